# tests/test_cli.py

import pytest

from eafcal import cli


@pytest.fixture(autouse=True)
def width_32(monkeypatch):
    monkeypatch.setenv("EAF_SIZE", "32")


def test_to_date(capsys):
    assert cli.main(["to-date", "0", "--calendar", "gregorian-unix"]) == 0
    assert capsys.readouterr().out == "rata die = 0\ndate     = 1970 1 1\n"


def test_to_date_negative(capsys):
    assert cli.main(["to-date", "-1"]) == 0
    assert capsys.readouterr().out == "rata die = -1\ndate     = 0 2 29\n"


def test_to_rata_die(capsys):
    assert cli.main(["to-rata-die", "2000", "3", "1", "--calendar", "gregorian-unix32"]) == 0
    assert capsys.readouterr().out == "rata die = 11017\ndate     = 2000 3 1\n"


def test_to_rata_die_julian(capsys):
    assert cli.main(["to-rata-die", "0", "3", "1", "--calendar", "julian"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "rata die = 0"


@pytest.mark.parametrize("argv,msg", [
    (["to-date", "abc"], "cannot parse rata die: abc"),
    (["to-date", str(2**31)], "not in [-2147483648, 2147483647]"),
    (["to-date", "0", "--calendar", "mayan"], "Unknown calendar"),
    (["to-rata-die", "2000", "13", "1"], "month 13 not in [1, 12]"),
    (["to-rata-die", "2000", "1", "0"], "day 0 not in [1, 31]"),
    (["to-rata-die", "x", "1", "1"], "cannot parse year"),
])
def test_malformed_input(capsys, argv, msg):
    assert cli.main(argv) == 1
    assert msg in capsys.readouterr().err


def test_eaf_size_64_widens_range_checks(monkeypatch, capsys):
    monkeypatch.setenv("EAF_SIZE", "64")
    assert cli.main(["to-date", str(2**31), "--calendar", "gregorian64"]) == 0
    assert capsys.readouterr().out.startswith(f"rata die = {2**31}\n")


def test_range_check_follows_calendar_width(capsys):
    assert cli.main(["to-date", "3000000000", "--calendar", "gregorian64"]) == 0
    assert capsys.readouterr().out.startswith("rata die = 3000000000\n")
    assert cli.main(["to-rata-die", "5000000000", "3", "1", "--calendar", "julian64"]) == 0
    assert capsys.readouterr().out.endswith("date     = 5000000000 3 1\n")
    assert cli.main(["to-date", "3000000000", "--calendar", "gregorian32"]) == 1
    assert "not in [-2147483648, 2147483647]" in capsys.readouterr().err


def test_unsuffixed_name_follows_eaf_size(monkeypatch, capsys):
    monkeypatch.setenv("EAF_SIZE", "64")
    assert cli.main(["to-date", "3000000000"]) == 0
    assert capsys.readouterr().out.startswith("rata die = 3000000000\n")


def test_invalid_eaf_size(monkeypatch, capsys):
    monkeypatch.setenv("EAF_SIZE", "128")
    assert cli.main(["to-date", "0"]) == 1
    assert "EAF_SIZE" in capsys.readouterr().err


def test_debug_flag(capsys):
    assert cli.main(["to-date", "1061042402", "--calendar", "gregorian-unix32", "--debug"]) == 0
    assert "date     = -32800 3 1" in capsys.readouterr().out


def test_fast_eaf(capsys):
    assert cli.main(["fast-eaf", "down", "5", "461", "153", "16"]) == 0
    out = capsys.readouterr().out
    assert "a'          = 2141" in out
    assert "d'          = 65536" in out
    assert "upper bound = 734" in out


def test_fast_eaf_bad_rounding(capsys):
    assert cli.main(["fast-eaf", "sideways", "1", "0", "1", "3"]) == 1
    assert "unknown 'rounding'" in capsys.readouterr().err


def test_fast_eaf_skips_bad_k(capsys):
    assert cli.main(["fast-eaf", "up", "1", "0", "10", "0", "32"]) == 0
    out, err = capsys.readouterr()
    assert "a'          = 429496730" in out
    assert "skipping k = 0" in err


def test_info(capsys):
    assert cli.main(["info", "--calendar", "gregorian-unix32"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Gregorian (Unix) optimised 32-bits:\n")
    assert "rata_die_min          = -12699422" in out
    assert "to_date(rata_die_min) = -32800 3 1" in out
    assert "date_max              = 2906945 2 28" in out


def test_compare(capsys):
    assert cli.main(["compare", "--only", "baum", "--span", "500"]) == 0
    assert "OK" in capsys.readouterr().out


def test_round_trip(capsys):
    assert cli.main(["round-trip", "--calendars", "gregorian-unix32,julian64", "--N", "50"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_identities(capsys):
    assert cli.main(["identities", "--only", "example-13"]) == 0
    assert "Pass." in capsys.readouterr().out
