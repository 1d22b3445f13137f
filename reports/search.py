"""
Wyszukiwanie menedżerów po fragmencie nazwiska (bez rozróżniania wielkości liter).
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence

from processing.fields import resolve

logger = logging.getLogger(__name__)


def find_by_last_name(records: Sequence[Mapping[str, Any]], query: Any) -> List[Mapping[str, Any]]:
    if not isinstance(query, str) or not query:
        logger.warning("Niepoprawne nazwisko do wyszukania: %r", query)
        return []
    needle = query.casefold()
    return [rec for rec in records if needle in str(resolve(rec, "surname")).casefold()]
