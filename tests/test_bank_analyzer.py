from pathlib import Path

import pytest

from scripts.bank_analyzer import main


@pytest.fixture
def input_file(write_json, two_banks) -> Path:
    return write_json(two_banks)


def test_requires_input():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_missing_input_file(tmp_path: Path, capsys):
    assert main(["-i", str(tmp_path / "missing.json"), "-d"]) == 1
    assert "Cannot find input file" in capsys.readouterr().err


def test_malformed_input_exits_with_error(tmp_path: Path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("not json", encoding="utf-8")
    assert main(["-i", str(path), "-d"]) == 1


def test_no_output_target_is_silent(input_file: Path, capsys):
    assert main(["-i", str(input_file)]) == 0
    assert capsys.readouterr().out == ""


def test_display(input_file: Path, capsys):
    assert main(["-i", str(input_file), "-d"]) == 0
    out = capsys.readouterr().out
    assert "BankA" in out and "BankB" in out
    assert "  • Petrenko - Manager" in out


def test_display_normal_only(input_file: Path, capsys):
    assert main(["-i", str(input_file), "-d", "-n"]) == 0
    out = capsys.readouterr().out
    assert "BankA" in out
    assert "BankB" not in out


def test_output_file(input_file: Path, tmp_path: Path, capsys):
    out_path = tmp_path / "report.txt"
    assert main(["-i", str(input_file), "-o", str(out_path)]) == 0
    text = out_path.read_text(encoding="utf-8")
    assert text.startswith("📈 LIST OF BANKS AND MANAGERS")
    out = capsys.readouterr().out
    assert str(out_path) in out
    assert "Petrenko" not in out


def test_display_and_output(input_file: Path, tmp_path: Path, capsys):
    out_path = tmp_path / "report.txt"
    assert main(["-i", str(input_file), "-d", "-o", str(out_path), "-m"]) == 0
    assert "Petrenko" in capsys.readouterr().out
    assert "Petrenko" in out_path.read_text(encoding="utf-8")


def test_output_write_failure(input_file: Path, tmp_path: Path):
    assert main(["-i", str(input_file), "-o", str(tmp_path / "no-dir" / "report.txt")]) == 1


def test_summary_with_search(input_file: Path, capsys):
    assert main(["-i", str(input_file), "-d", "--summary", "--limit", "1", "--search", "iva"]) == 0
    out = capsys.readouterr().out
    assert "🏆 Top-1 positions:" in out
    assert 'Found 1 managers with a surname containing "iva"' in out
