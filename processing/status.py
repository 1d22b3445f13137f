"""
Klasyfikacja statusu banku na podstawie rekordu menedżera.
- normalny: kod statusu 1 albo jedna z nazw z NORMAL_NAMES (dokładne dopasowanie)
- likwidacja: któraś z nazw (NAME_STATE, state_name) dokładnie z LIQUIDATION_NAMES
- wykluczony: któraś z nazw zawiera znacznik z EXCLUDED_MARKERS
Te trzy testy są niezależne, rekord może nie pasować do żadnego.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from processing.fields import ALIASES, resolve, resolve_status_code

NORMAL_CODE = 1
NORMAL_NAMES = frozenset({"Нормальний", "Normal", "Активний", "Active"})
LIQUIDATION_NAMES = frozenset({"Режим ліквідації", "Liquidation mode"})
EXCLUDED_MARKERS = ("Виключено", "Excluded")


def _code_is_normal(code: Any) -> bool:
    if code is None or isinstance(code, bool):
        return False
    if isinstance(code, (int, float)):
        return code == NORMAL_CODE
    if isinstance(code, str):
        return code.strip() == str(NORMAL_CODE)
    return False


def status_name(record: Mapping[str, Any]) -> Optional[str]:
    name = resolve(record, "status_name")
    return name if isinstance(name, str) else None


def status_names(record: Mapping[str, Any]) -> List[str]:
    """Wszystkie niepuste nazwy statusu, każdy alias osobno."""
    if not isinstance(record, Mapping):
        return []
    names = (record.get(key) for key in ALIASES["status_name"])
    return [name for name in names if isinstance(name, str) and name]


def is_normal_bank(record: Mapping[str, Any]) -> bool:
    if _code_is_normal(resolve_status_code(record)):
        return True
    return status_name(record) in NORMAL_NAMES


def is_liquidated(record: Mapping[str, Any]) -> bool:
    return any(name in LIQUIDATION_NAMES for name in status_names(record))


def is_excluded(record: Mapping[str, Any]) -> bool:
    return any(
        marker in name for name in status_names(record) for marker in EXCLUDED_MARKERS
    )
