"""
Julian day numbers on the proleptic Gregorian calendar.

Integer-only conversions (Fliegel & Van Flandern), valid for any int64-sized
year, including years before 1 and after 9999 that ``datetime.date`` cannot hold.
"""

from __future__ import annotations

import numpy as np

from .math import IntLike, _ints, _out


def julian_day(year: IntLike, month: IntLike, day: IntLike) -> IntLike:
    y, m, d = _ints(year), _ints(month), _ints(day)
    a = (14 - m) // 12
    yy = y + 4800 - a
    mm = m + 12 * a - 3
    jd = d + (153 * mm + 2) // 5 + 365 * yy + yy // 4 - yy // 100 + yy // 400 - 32045
    return _out(jd)


def from_julian_day(jd: IntLike) -> tuple[IntLike, IntLike, IntLike]:
    """Inverse of :func:`julian_day`; returns ``(year, month, day)``."""
    a = _ints(jd) + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return _out(year), _out(month), _out(day)


def weekday_of_julian_day(jd: IntLike) -> IntLike:
    """Weekday counted from Sunday: 0 = Sunday ... 6 = Saturday."""
    return _out((_ints(jd) + 1) % 7)


EPOCH_JULIAN_DAY: int = julian_day(1950, 1, 1)
