"""
Agregaty dla listy rekordów menedżerów banków:
- ogólne liczniki statusów
- top-N po dowolnym polu logicznym (stanowisko, bank, status)
- rozkład po latach z pola daty
- grupowanie menedżerów po bankach
Wszystko liczone od zera przy każdym wywołaniu, rekordy wejściowe nie są modyfikowane.
"""
from __future__ import annotations

import collections
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from dateutil import parser as dtparse

from processing.fields import resolve
from processing.status import is_excluded, is_liquidated, is_normal_bank

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
STATUS_NOT_SPECIFIED = "Status not specified"

Record = Mapping[str, Any]


@dataclass(frozen=True)
class FrequencyEntry:
    key: str
    count: int


@dataclass(frozen=True)
class YearEntry:
    year: int
    count: int


@dataclass
class BankGroup:
    """Menedżerowie jednego banku w kolejności z pliku wejściowego."""
    code: str = ""
    managers: List[Record] = field(default_factory=list)


def general_stats(records: Sequence[Record]) -> Dict[str, int]:
    return {
        "total": len(records),
        "active_count": sum(1 for r in records if is_normal_bank(r)),
        "liquidated_count": sum(1 for r in records if is_liquidated(r)),
        "excluded_count": sum(1 for r in records if is_excluded(r)),
    }


def top_by(
    records: Iterable[Record],
    field_name: str,
    limit: Optional[int] = DEFAULT_LIMIT,
    default: Optional[str] = None,
) -> List[FrequencyEntry]:
    """Zlicza wartości pola i zwraca je malejąco po liczności.

    Remisy rozstrzyga kolejność pierwszego wystąpienia (Counter trzyma kolejność
    wstawiania, a sortowanie jest stabilne). `limit=None` zwraca wszystko.
    """
    if limit is not None and limit <= 0:
        return []
    counter: collections.Counter = collections.Counter()
    for rec in records:
        value = resolve(rec, field_name) if default is None else resolve(rec, field_name, default)
        counter[str(value)] += 1
    return [FrequencyEntry(key, count) for key, count in counter.most_common(limit)]


def top_positions(records: Iterable[Record], limit: Optional[int] = DEFAULT_LIMIT) -> List[FrequencyEntry]:
    return top_by(records, "position", limit)


def top_banks(records: Iterable[Record], limit: Optional[int] = DEFAULT_LIMIT) -> List[FrequencyEntry]:
    return top_by(records, "bank", limit)


def status_stats(records: Iterable[Record]) -> List[FrequencyEntry]:
    return top_by(records, "status_name", None, default=STATUS_NOT_SPECIFIED)


# dwie różne wartości domyślne: jeśli rok wyniku zależy od domyślnej, w tekście go nie ma
_PARSE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 1, 1))


def parse_date(value: Any) -> Optional[datetime]:
    """Parsuje datę z rekordu, None gdy się nie da.

    Liczby traktujemy jak znacznik czasu w milisekundach (tak zapisują eksporty JS).
    Tekst bez roku ("June 5", "12") jest odrzucany.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        first, second = (dtparse.parse(text, default=d) for d in _PARSE_DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first.year != second.year:
        return None
    return first


def _local_year(moment: datetime) -> Optional[int]:
    if moment.tzinfo is None:
        return moment.year
    try:
        return moment.astimezone().year
    except (OverflowError, ValueError, OSError):
        return None


def yearly_stats(records: Iterable[Record]) -> List[YearEntry]:
    yearly: Dict[int, int] = {}
    for rec in records:
        raw = resolve(rec, "date")
        if raw is None:
            continue
        moment = parse_date(raw)
        year = _local_year(moment) if moment is not None else None
        if year is None:
            logger.debug("Pomijam niepoprawną datę: %r", raw)
            continue
        yearly[year] = yearly.get(year, 0) + 1
    return [YearEntry(year, count) for year, count in sorted(yearly.items())]


def group_by_bank(records: Iterable[Record], only_active: bool = False) -> Dict[str, BankGroup]:
    banks: Dict[str, BankGroup] = {}
    for rec in records:
        if only_active and not is_normal_bank(rec):
            continue
        name = str(resolve(rec, "bank"))
        code = str(resolve(rec, "bank_code"))
        group = banks.get(name)
        if group is None:
            group = banks[name] = BankGroup(code=code)
        elif not group.code and code:
            group.code = code
        group.managers.append(rec)
    return banks


def all_stats(records: Sequence[Record], limit: Optional[int] = DEFAULT_LIMIT) -> Dict[str, Any]:
    return {
        "general": general_stats(records),
        "top_positions": top_positions(records, limit),
        "top_banks": top_banks(records, limit),
        "yearly": yearly_stats(records),
        "statuses": status_stats(records),
    }
