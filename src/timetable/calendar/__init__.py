# src/timetable/calendar/__init__.py
"""
timetable.calendar
~~~~~~~~~~~~~~~~~~

Calendar arithmetic behind the timetable feeds: leap years, month lengths,
quarters, day-of-year, Monday-based week numbers, Julian day conversion and
a bounded per-run memo of the weekday of 1 January.

Basic usage::

    from timetable.calendar import day_of_year, days_in_month, iso_week, WeekdayCache

    cache = WeekdayCache()
    doy   = day_of_year(2021, 1, 4)                       # → 4
    week  = iso_week(2021, doy, cache.weekday_of_jan1(2021))  # → 2

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    days_in_month(2024, np.arange(1, 13))   # → array([31, 29, 31, ...])
"""

from __future__ import annotations

from timetable.calendar.julian import (
    EPOCH_JULIAN_DAY,
    from_julian_day,
    julian_day,
    weekday_of_julian_day,
)
from timetable.calendar.math import (
    day_of_year,
    days_in_month,
    is_leap_year,
    iso_week,
    quarter_of_month,
)
from timetable.calendar.weekday import WeekdayCache

__all__ = [
    "EPOCH_JULIAN_DAY",
    "WeekdayCache",
    "day_of_year",
    "days_in_month",
    "from_julian_day",
    "is_leap_year",
    "iso_week",
    "julian_day",
    "quarter_of_month",
    "weekday_of_julian_day",
]
