from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from timetable._exceptions import SettingsError
from timetable.calendar.weekday import WeekdayCache

ENV_WINDOW_DAYS = "TIMETABLE_DEFAULT_WINDOW_DAYS"
ENV_CACHE_SIZE = "TIMETABLE_WEEKDAY_CACHE_SIZE"
ENV_LOG_LEVEL = "TIMETABLE_LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _int_from_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise SettingsError(f"{key} must be an integer; got {raw!r}.") from None


@dataclass(frozen=True)
class TimetableSettings:
    """
    Tunables for opening sequences.

    default_window_days  Days either side of today used for a missing daily bound.
    weekday_cache_size   Slots in each daily run's weekday-of-1-January memo.
    log_level            Level the command-line writer configures logging at.
    """

    default_window_days: int = 100
    weekday_cache_size: int = WeekdayCache.MIN_CAPACITY
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.default_window_days < 0:
            raise SettingsError(
                f"default_window_days must be >= 0; got {self.default_window_days}."
            )
        if self.weekday_cache_size < WeekdayCache.MIN_CAPACITY:
            raise SettingsError(
                f"weekday_cache_size must be >= {WeekdayCache.MIN_CAPACITY}; "
                f"got {self.weekday_cache_size}."
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise SettingsError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}; got {self.log_level!r}."
            )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "TimetableSettings":
        env = os.environ if environ is None else environ
        return TimetableSettings(
            default_window_days=_int_from_env(env, ENV_WINDOW_DAYS, 100),
            weekday_cache_size=_int_from_env(
                env, ENV_CACHE_SIZE, WeekdayCache.MIN_CAPACITY
            ),
            log_level=env.get(ENV_LOG_LEVEL, "").strip() or "WARNING",
        )
