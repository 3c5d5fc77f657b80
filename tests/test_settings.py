"""
tests/test_settings.py

Covers:
  - Defaults
  - Reading values from a mapping and from the process environment
  - Validation errors and their messages
"""

import logging

import pytest

from timetable import SettingsError, TimetableError, TimetableSettings


# ── Defaults / environment ────────────────────────────────────────────────────

class TestFromEnv:

    def test_defaults(self):
        s = TimetableSettings()
        assert s.default_window_days == 100
        assert s.weekday_cache_size == 10
        assert s.log_level == "WARNING"

    def test_empty_mapping_uses_defaults(self):
        assert TimetableSettings.from_env({}) == TimetableSettings()

    def test_reads_values(self):
        s = TimetableSettings.from_env(
            {
                "TIMETABLE_DEFAULT_WINDOW_DAYS": "30",
                "TIMETABLE_WEEKDAY_CACHE_SIZE": " 16 ",
                "TIMETABLE_LOG_LEVEL": "debug",
            }
        )
        assert s.default_window_days == 30
        assert s.weekday_cache_size == 16
        assert s.logging_level == logging.DEBUG

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("TIMETABLE_DEFAULT_WINDOW_DAYS", "12")
        monkeypatch.delenv("TIMETABLE_WEEKDAY_CACHE_SIZE", raising=False)
        monkeypatch.delenv("TIMETABLE_LOG_LEVEL", raising=False)
        assert TimetableSettings.from_env().default_window_days == 12


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    def test_non_integer_names_variable(self):
        with pytest.raises(SettingsError, match="TIMETABLE_DEFAULT_WINDOW_DAYS"):
            TimetableSettings.from_env({"TIMETABLE_DEFAULT_WINDOW_DAYS": "ten"})

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_window_days": -1},
            {"weekday_cache_size": 9},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(SettingsError):
            TimetableSettings(**kwargs)

    def test_settings_error_is_timetable_error(self):
        assert issubclass(SettingsError, TimetableError)
