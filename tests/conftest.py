import json
from pathlib import Path
from typing import Any, Dict, List

import pytest


@pytest.fixture
def two_banks() -> List[Dict[str, Any]]:
    return [
        {"LAST_NAME": "Petrenko", "NAME_STATE": "Нормальний", "SHORTNAME": "BankA", "NAME_DOLGN": "Manager"},
        {"LAST_NAME": "Ivanenko", "NAME_STATE": "Режим ліквідації", "SHORTNAME": "BankB", "NAME_DOLGN": "Director"},
    ]


@pytest.fixture
def mixed_records() -> List[Dict[str, Any]]:
    # trzy różne schematy eksportu w jednym pliku
    return [
        {
            "LAST_NAME": "Шевченко",
            "FIRST_NAME": "Тарас",
            "MIDDLE_NAME": "Григорович",
            "NAME_DOLGN": "Голова правління",
            "SHORTNAME": "АТ КБ ПРИВАТБАНК",
            "MFO": "305299",
            "COD_STATE": 1,
            "NAME_STATE": "Нормальний",
            "DATE_BANK": "2016-12-21",
        },
        {
            "last_name": "Ivanenko",
            "first_name": "Olena",
            "position": "Chief accountant",
            "bank_name": "Oschadbank",
            "mfo": "300465",
            "state_name": "Normal",
            "date_bank": "2019-03-04T09:30:00",
        },
        {
            "surname": "Kovalenko",
            "name": "Petro",
            "dolgn": "Chief accountant",
            "bank": "Oschadbank",
            "state_code": 3,
            "state_name": "Виключено з Державного реєстру банків",
            "date": "not a date",
        },
        {
            "LAST_NAME": "Бондар",
            "FIRST_NAME": "Ірина",
            "SHORTNAME": "АТ КБ ПРИВАТБАНК",
            "NAME_STATE": "Режим ліквідації",
            "DATE_BANK": "2016-01-05",
        },
    ]


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(payload: Any, name: str = "bank_managers.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
