#!/usr/bin/env python3
"""
CLI do analizy danych menedżerów banków.
Wczytuje plik JSON (-i), buduje listę banków z menedżerami albo raport statystyk
(--summary) i wypisuje go na konsolę (-d) i/lub zapisuje do pliku (-o).

Przykład:
    python -m scripts.bank_analyzer -i data/bank_managers.json -d -m -n
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ingest.load_managers import InputNotFoundError, load_config, load_records
from reports.search import find_by_last_name
from reports.stats_report import format_bank_list, format_search_preview, format_summary

logger = logging.getLogger("bank_analyzer")


def setup_logging(cfg: Dict[str, Any], verbose: bool = False) -> None:
    log_cfg = cfg.get("logging", {})
    level = "DEBUG" if verbose else str(log_cfg.get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=log_cfg.get("format", "%(asctime)s - %(levelname)s - %(message)s"),
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bank-analyzer",
        description="CLI do analizy danych menedżerów banków",
    )
    ap.add_argument("-i", "--input", required=True, help="Ścieżka do wejściowego pliku JSON")
    ap.add_argument("-o", "--output", help="Plik, do którego zapisać wynik")
    ap.add_argument("-d", "--display", action="store_true", help="Wypisz wynik na konsolę")
    ap.add_argument("-m", "--mfo", action="store_true", help="Pokaż kod MFO banku przed nazwą")
    ap.add_argument(
        "-n",
        "--normal",
        action="store_true",
        help='Tylko działające banki (status "Нормальний")',
    )
    ap.add_argument("--summary", action="store_true", help="Raport statystyk zamiast listy banków")
    ap.add_argument("--search", help="Dołącz wyniki wyszukiwania po fragmencie nazwiska")
    ap.add_argument("--limit", type=int, help="Rozmiar sekcji top-N (domyślnie z configu)")
    ap.add_argument("--config", help="Alternatywny plik config.yaml")
    ap.add_argument("--verbose", action="store_true", help="Logowanie na poziomie DEBUG")
    return ap


def render(records: List[Dict[str, Any]], args: argparse.Namespace, cfg: Dict[str, Any]) -> str:
    report_cfg = cfg.get("report", {})
    width = int(report_cfg.get("separator_width", 50))
    limit = args.limit if args.limit is not None else int(report_cfg.get("top_limit", 10))

    if args.summary:
        result = format_summary(records, limit=limit, width=width)
    else:
        result = format_bank_list(records, show_bank_code=args.mfo, only_active=args.normal, width=width)

    if args.search is not None:
        matches = find_by_last_name(records, args.search)
        preview = int(report_cfg.get("search_preview", 3))
        result += "\n" + format_search_preview(args.search, matches, preview)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    setup_logging(cfg, args.verbose)

    try:
        records = load_records(args.input)
    except InputNotFoundError:
        print("❌ Error: Cannot find input file", file=sys.stderr)
        return 1

    if not records:
        print("❌ Nie udało się wczytać danych do analizy", file=sys.stderr)
        return 1

    if not args.display and not args.output:
        return 0

    result = render(records, args, cfg)

    if args.display:
        print(result)

    if args.output:
        out_path = Path(args.output)
        encoding = cfg.get("output", {}).get("encoding", "utf-8")
        try:
            out_path.write_text(result, encoding=encoding)
        except OSError as exc:
            logger.error("Błąd zapisu do pliku %s: %s", out_path, exc)
            return 1
        print(f"✅ Wynik zapisano do pliku: {out_path}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)
