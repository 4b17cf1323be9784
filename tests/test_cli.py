# tests/test_cli.py

import pytest

from gregcal.cli import main
from gregcal.config import load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GREGCAL_LOCALTIME", "GREGCAL_FORMAT", "GREGCAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_format_with_date(capsys):
    assert main(["format", "{:E}, {:D} {:M} {:Y}", "--date", "2015-09-13"]) == 0
    assert capsys.readouterr().out == "Sunday, 13 September 2015\n"


def test_format_with_yd(capsys):
    assert main(["format", "{:Y}-{:0>2n}-{:0>2D}", "--yd", "2015", "256"]) == 0
    assert capsys.readouterr().out == "2015-09-13\n"


def test_format_error_exit_status(capsys):
    assert main(["format", "{:7}", "--date", "2015-09-13"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert "'7'" in err


def test_range_error_exit_status(capsys):
    assert main(["format", "{:Y}", "--yd", "2015", "366"]) == 2
    assert "yearday 366" in capsys.readouterr().err


def test_info(capsys):
    assert main(["info", "2016-02-29", "--attr", "quarter"]) == 0
    out = capsys.readouterr().out
    assert "2016-02-29" in out
    assert "Monday" in out
    assert "quarter" in out


def test_info_shortcut(capsys):
    assert main(["2015-09-13"]) == 0
    assert "Sunday" in capsys.readouterr().out


def test_pretty_month(capsys):
    assert main(["pretty-month", "2015", "9"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].strip() == "September 2015"
    assert lines[1] == "Mo Tu We Th Fr Sa Su"
    assert lines[2] == "    1  2  3  4  5  6"
    assert lines[-1] == "28 29 30"


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "2000"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_tz(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("GREGCAL_LOCALTIME", str(tmp_path / "missing"))
    load_settings.cache_clear()
    assert main(["tz"]) == 1
    assert capsys.readouterr().out == "unknown\n"


@pytest.mark.parametrize("bad", ["2015-13", "2015-13-01", "2015-02-30", "yesterday"])
def test_format_bad_date_is_reported(bad, capsys):
    with pytest.raises(SystemExit) as info:
        main(["format", "{:Y}", "--date", bad])
    assert info.value.code == 2
    assert "invalid date" in capsys.readouterr().err


def test_info_bad_date_is_reported(capsys):
    with pytest.raises(SystemExit) as info:
        main(["info", "2015-9"])
    assert info.value.code == 2
    assert "invalid date" in capsys.readouterr().err


def test_format_negative_year(capsys):
    assert main(["format", "{:Y} {:M} {:D}", "--date=-0044-03-15"]) == 0
    assert capsys.readouterr().out == "-44 March 15\n"
