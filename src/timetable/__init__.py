# src/timetable/__init__.py
"""
timetable
~~~~~~~~~

Calendar dimension feeds for data-warehouse star schemas.  Two lazy
sequences stream one row per pull without materialising their range:

* a monthly timetable, one MonthRow per month of an inclusive year range;
* a daily timetable, one DayRow per day of an inclusive date range.

Basic usage::

    from datetime import date
    from timetable import open_monthly, open_daily

    for row in open_monthly(2020, 2021):
        print(row.uid, row.year, row.quarter, row.month, row.days_in_month)

    days = open_daily(date(2021, 1, 1), date(2021, 1, 7))
    first = next(days)          # DayRow(uid=..., iso_weekday=5, ...)

Public API
----------
open_monthly       Open a MonthlySequence over [start_year, end_year].
open_daily         Open a DailySequence; missing bounds default around today.
MonthRow, DayRow   Immutable row types.
TimetableSettings  Environment-driven configuration.
TimetableError     Base exception; InvalidRange and DateRangeOverflow derive from it.
"""

from __future__ import annotations

from timetable._exceptions import (
    DateRangeOverflow,
    InvalidRange,
    SettingsError,
    TimetableError,
)
from timetable.sequence import (
    DailySequence,
    DayRow,
    MonthlySequence,
    MonthRow,
    open_daily,
    open_monthly,
)
from timetable.settings import TimetableSettings

__all__ = [
    "DailySequence",
    "DateRangeOverflow",
    "DayRow",
    "InvalidRange",
    "MonthRow",
    "MonthlySequence",
    "SettingsError",
    "TimetableError",
    "TimetableSettings",
    "open_daily",
    "open_monthly",
]
