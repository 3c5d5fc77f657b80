from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date
from typing import Any

from timetable.calendar.julian import EPOCH_JULIAN_DAY

MONTH_UID_BASE: int = 20000
DAY_UID_BASE: int = 2000000
UID_EPOCH_YEAR: int = 1950


def month_uid(year: int, month: int) -> int:
    return MONTH_UID_BASE + (year - UID_EPOCH_YEAR) * 12 + (month - 1)


def day_uid(jd: int) -> int:
    """Surrogate id of a Julian day, anchored at 1950-01-01."""
    return DAY_UID_BASE + (jd - EPOCH_JULIAN_DAY)


class _Row:
    """Column access shared by the row types."""

    __slots__ = ()

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls))

    def as_tuple(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.field_names())


@dataclass(frozen=True, slots=True)
class MonthRow(_Row):
    uid: int
    year: int
    quarter: int
    month: int
    days_in_month: int
    ordinal: int


@dataclass(frozen=True, slots=True)
class DayRow(_Row):
    uid: int
    date: date
    year: int
    quarter: int
    month: int
    day: int
    iso_week: int
    iso_weekday: int
    day_of_year: int
    is_weekend: bool
    ordinal: int
