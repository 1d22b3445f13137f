"""
Odczyt pól logicznych z rekordów menedżerów banków.
Rekordy pochodzą z różnych eksportów i to samo pole bywa zapisane pod kilkoma
kluczami (np. LAST_NAME / last_name / surname). Tabela ALIASES trzyma kolejność
priorytetu, pierwszy niepusty klucz wygrywa.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

ALIASES: Dict[str, Tuple[str, ...]] = {
    "surname": ("LAST_NAME", "last_name", "surname"),
    "first_name": ("FIRST_NAME", "first_name", "name"),
    "middle_name": ("MIDDLE_NAME", "middle_name"),
    "position": ("NAME_DOLGN", "position", "dolgn"),
    "bank": ("SHORTNAME", "bank_name", "bank"),
    "bank_code": ("MFO", "mfo", "bank_code"),
    "status_code": ("COD_STATE", "state_code"),
    "status_name": ("NAME_STATE", "state_name"),
    "date": ("DATE_BANK", "date_bank", "date"),
}

DEFAULTS: Dict[str, Any] = {
    "surname": "",
    "first_name": "",
    "middle_name": "",
    "position": "Position not specified",
    "bank": "Bank not specified",
    "bank_code": "",
    "status_code": None,
    "status_name": None,
    "date": None,
}

_MISSING = object()


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def resolve(record: Mapping[str, Any], field: str, default: Any = _MISSING) -> Any:
    """Zwraca wartość pola logicznego albo domyślną, gdy żaden alias nie pasuje.

    `0` jest poprawną wartością (np. kod statusu), pomijane są tylko None i "".
    """
    if field not in ALIASES:
        raise KeyError(f"nieznane pole logiczne: {field}")
    fallback = DEFAULTS[field] if default is _MISSING else default
    if not isinstance(record, Mapping):
        return fallback
    for key in ALIASES[field]:
        value = record.get(key)
        if not _is_blank(value):
            return value
    return fallback


def resolve_status_code(record: Mapping[str, Any]) -> Optional[Any]:
    return resolve(record, "status_code")


def full_name(record: Mapping[str, Any]) -> str:
    parts = (
        resolve(record, "surname"),
        resolve(record, "first_name"),
        resolve(record, "middle_name"),
    )
    # puste części nie dają podwójnych spacji
    return " ".join(str(p).strip() for p in parts if str(p).strip())
