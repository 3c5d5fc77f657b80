"""
tests/cli/test_cli.py

Covers:
  - CSV output for both feeds on stdout
  - Writing to an output file
  - Error reporting and exit status
"""

import csv

import pytest

from timetable.cli import main


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "TIMETABLE_DEFAULT_WINDOW_DAYS",
        "TIMETABLE_WEEKDAY_CACHE_SIZE",
        "TIMETABLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


# ── Helpers ───────────────────────────────────────────────────────────────────

def read_csv(text):
    return list(csv.reader(text.splitlines()))


# ── Feeds ─────────────────────────────────────────────────────────────────────

class TestFeeds:

    def test_monthly(self, capsys):
        assert main(["monthly", "2020", "2020"]) == 0
        rows = read_csv(capsys.readouterr().out)
        assert rows[0] == ["uid", "year", "quarter", "month", "days_in_month", "ordinal"]
        assert rows[1] == ["20840", "2020", "1", "1", "31", "1"]
        assert rows[2] == ["20841", "2020", "1", "2", "29", "2"]
        assert len(rows) == 13

    def test_daily(self, capsys):
        assert main(["daily", "--start", "2021-01-01", "--end", "2021-01-07"]) == 0
        rows = read_csv(capsys.readouterr().out)
        assert rows[0][:3] == ["uid", "date", "year"]
        assert rows[1] == [
            "2025933", "2021-01-01", "2021", "1", "1", "1", "1", "5", "1", "False", "1",
        ]
        assert len(rows) == 8

    def test_daily_default_window_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("TIMETABLE_DEFAULT_WINDOW_DAYS", "2")
        assert main(["daily"]) == 0
        assert len(read_csv(capsys.readouterr().out)) == 1 + 5

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "out" / "months.csv"
        assert main(["--output", str(target), "monthly", "2020", "2021"]) == 0
        assert capsys.readouterr().out == ""
        with target.open(newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 25
        assert rows[-1][-1] == "24"


# ── Errors ────────────────────────────────────────────────────────────────────

class TestErrors:

    def test_invalid_range_exit_status(self, capsys):
        assert main(["monthly", "2025", "2020"]) == 2
        err = capsys.readouterr().err
        assert "after end_year" in err

    def test_year_beyond_calendar_exit_status(self, capsys):
        assert main(["monthly", "2020", "10000000000000000000"]) == 2
        assert "outside 1..9999" in capsys.readouterr().err

    def test_invalid_daily_range(self, capsys):
        assert main(["daily", "--start", "2025-01-01", "--end", "2020-01-01"]) == 2
        assert "after end_date" in capsys.readouterr().err

    def test_bad_date_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["daily", "--start", "yesterday"])
        assert exc.value.code == 2

    def test_missing_feed_is_usage_error(self):
        with pytest.raises(SystemExit):
            main([])

    def test_bad_settings_reported(self, capsys, monkeypatch):
        monkeypatch.setenv("TIMETABLE_WEEKDAY_CACHE_SIZE", "3")
        assert main(["monthly", "2020", "2020"]) == 2
        assert "weekday_cache_size" in capsys.readouterr().err
