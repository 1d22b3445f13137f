"""
Raporty tekstowe:
- lista banków z menedżerami (opcjonalnie z MFO i tylko banki "normalne")
- raport statystyk (liczniki, top-N stanowisk i banków, lata, statusy)
- podgląd wyników wyszukiwania
Funkcje tylko budują tekst, zapis/wyświetlenie robi scripts/bank_analyzer.py.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from processing.fields import full_name, resolve
from reports.aggregate import DEFAULT_LIMIT, all_stats, group_by_bank

SEPARATOR_WIDTH = 50


def format_bank_list(
    records: Sequence[Mapping[str, Any]],
    show_bank_code: bool = False,
    only_active: bool = False,
    width: int = SEPARATOR_WIDTH,
) -> str:
    lines = [
        "📈 LIST OF BANKS AND MANAGERS",
        "=" * width,
        "",
    ]
    for bank_name, group in group_by_bank(records, only_active).items():
        if show_bank_code and group.code:
            lines.append(f"{group.code} {bank_name}")
        else:
            lines.append(bank_name)
        for manager in group.managers:
            lines.append(f"  • {full_name(manager)} - {resolve(manager, 'position')}")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_summary(
    records: Sequence[Mapping[str, Any]],
    limit: Optional[int] = DEFAULT_LIMIT,
    width: int = SEPARATOR_WIDTH,
) -> str:
    stats = all_stats(records, limit)
    general = stats["general"]
    top_label = f"Top-{limit}" if limit is not None else "All"

    lines = [
        "📈 BANK MANAGERS STATISTICS",
        "=" * width,
        "",
        "📊 General statistics:",
        f"   • Total managers: {general['total']}",
        f"   • Banks with normal status: {general['active_count']}",
        f"   • Banks in liquidation: {general['liquidated_count']}",
        f"   • Banks excluded from the register: {general['excluded_count']}",
        "",
        f"🏆 {top_label} positions:",
    ]
    for i, item in enumerate(stats["top_positions"], start=1):
        lines.append(f"   {i}. {item.key}: {item.count}")

    lines.append("")
    lines.append(f"🏦 {top_label} banks by number of managers:")
    for i, item in enumerate(stats["top_banks"], start=1):
        lines.append(f"   {i}. {item.key}: {item.count} managers")

    lines.append("")
    lines.append("📅 Distribution by year of appointment:")
    if stats["yearly"]:
        for item in stats["yearly"]:
            lines.append(f"   • {item.year}: {item.count} appointments")
    else:
        lines.append("   • No date information available")

    lines.append("")
    lines.append("🏛️ Bank statuses:")
    for i, item in enumerate(stats["statuses"], start=1):
        lines.append(f"   {i}. {item.key}: {item.count}")
    return "\n".join(lines) + "\n"


def format_search_preview(
    query: str,
    matches: Sequence[Mapping[str, Any]],
    preview: int = 3,
) -> str:
    lines: List[str] = ["🔍 Search:"]
    if not matches:
        lines.append(f'   • No managers found with a surname containing "{query}"')
        return "\n".join(lines) + "\n"
    lines.append(f'   • Found {len(matches)} managers with a surname containing "{query}"')
    lines.append("   • Examples:")
    for i, manager in enumerate(matches[:max(preview, 0)], start=1):
        name = " ".join(
            str(p) for p in (resolve(manager, "surname"), resolve(manager, "first_name")) if str(p)
        )
        lines.append(f"     {i}. {name} - {resolve(manager, 'position')}")
    return "\n".join(lines) + "\n"
