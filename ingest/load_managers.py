"""
Wczytywanie danych wejściowych:
- config/config.yaml (ustawienia raportów i logowania)
- plik JSON z tablicą rekordów menedżerów banków

Brak pliku wejściowego to twardy błąd (InputNotFoundError). Błąd odczytu albo niepoprawny JSON
jest logowany i daje pustą listę, więc dalsze agregaty po prostu wychodzą zerowe.
"""
from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

ROOT = Path(__file__).resolve().parents[1]
CONFIG = ROOT / "config" / "config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "report": {"top_limit": 10, "separator_width": 50, "search_preview": 3},
    "output": {"encoding": "utf-8"},
    "logging": {"level": "INFO", "format": "%(asctime)s - %(levelname)s - %(message)s"},
}

logger = logging.getLogger(__name__)


class InputNotFoundError(FileNotFoundError):
    """Plik wejściowy nie istnieje."""


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else CONFIG
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if not cfg_path.exists():
        return cfg
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    if data is None:
        return cfg
    if not isinstance(data, dict):
        raise ValueError(f"{cfg_path.name} musi być mapowaniem klucz -> wartość")
    return _merge(cfg, data)


def load_records(path: Union[str, Path], encoding: str = "utf-8") -> List[Dict[str, Any]]:
    in_path = Path(path)
    if not in_path.is_file():
        raise InputNotFoundError(f"Cannot find input file: {in_path}")

    try:
        data = json.loads(in_path.read_text(encoding=encoding))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("Błąd wczytywania danych %s: %s", in_path, exc)
        return []

    if not isinstance(data, list):
        logger.error("Błąd wczytywania danych %s: oczekiwano tablicy JSON", in_path)
        return []

    records = [rec for rec in data if isinstance(rec, dict)]
    if len(records) != len(data):
        logger.warning("Pominięto %d wpisów, które nie są obiektami", len(data) - len(records))
    logger.info("Wczytano %d rekordów z %s", len(records), in_path)
    return records
