"""
Pure calendar arithmetic on the proleptic Gregorian calendar.

Every function accepts Python ints or NumPy integer arrays.  Array inputs
broadcast against each other and yield arrays; scalar inputs yield plain
Python scalars.  Arguments outside their domain (a month of 13, a weekday
of 7) raise ``ValueError`` rather than being clamped.
"""

from __future__ import annotations

from typing import Union

import numpy as np

IntLike = Union[int, "np.ndarray"]
BoolLike = Union[bool, "np.ndarray"]


def _table(values: list[int]) -> np.ndarray:
    arr = np.array(values, dtype=np.int64)
    arr.flags.writeable = False
    return arr


# Slot 0 is padding so the tables are indexed by the 1-based month.
DAYS_PER_MONTH = _table([0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31])
DAYS_BEFORE_MONTH = _table([0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334])
QUARTER_OF_MONTH = _table([0, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4])


# ── helpers ──────────────────────────────────────────────────────────────────

def _ints(x: IntLike) -> np.ndarray:
    try:
        arr = np.asarray(x)
    except OverflowError:
        raise ValueError(f"Integer input exceeds the int64 range: {x!r}.") from None
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Expected integer input; got dtype {arr.dtype}.")
    if arr.dtype == np.uint64 and np.any(arr > np.iinfo(np.int64).max):
        raise ValueError("Integer input exceeds the int64 range.")
    return arr.astype(np.int64, copy=False)


def _out(result: np.ndarray, kind: type = int) -> IntLike | BoolLike:
    return kind(result) if np.ndim(result) == 0 else result


def _check_range(name: str, values: np.ndarray, low: IntLike, high: IntLike) -> None:
    bad = (values < low) | (values > high)
    if np.any(bad):
        offending = np.unique(np.broadcast_to(values, bad.shape)[bad]).tolist()
        raise ValueError(f"{name} out of range: {offending}.")


def _leap(y: np.ndarray) -> np.ndarray:
    return ((y % 4 == 0) & (y % 100 != 0)) | (y % 400 == 0)


# ── public API ───────────────────────────────────────────────────────────────

def is_leap_year(year: IntLike) -> BoolLike:
    return _out(_leap(_ints(year)), bool)


def days_in_month(year: IntLike, month: IntLike) -> IntLike:
    y, m = _ints(year), _ints(month)
    _check_range("month", m, 1, 12)
    return _out(DAYS_PER_MONTH[m] + ((m == 2) & _leap(y)))


def quarter_of_month(month: IntLike) -> IntLike:
    m = _ints(month)
    _check_range("month", m, 1, 12)
    return _out(QUARTER_OF_MONTH[m])


def day_of_year(year: IntLike, month: IntLike, day: IntLike) -> IntLike:
    """1-based ordinal of ``(year, month, day)`` within its year (1..366)."""
    y, m, d = _ints(year), _ints(month), _ints(day)
    _check_range("month", m, 1, 12)
    _check_range("day", d, 1, DAYS_PER_MONTH[m] + ((m == 2) & _leap(y)))
    return _out(DAYS_BEFORE_MONTH[m] + d + ((m > 2) & _leap(y)))


def iso_week(year: IntLike, day_of_year: IntLike, jan1_weekday: IntLike) -> IntLike:
    """
    Monday-based week number (1..53) of a day within its own year.

    ``jan1_weekday`` is the weekday of 1 January counted from Sunday
    (0 = Sunday ... 6 = Saturday).  Week 1 is the (possibly partial) week
    holding 1 January; each Monday starts a new week.

    This deliberately differs from strict ISO-8601 at year boundaries: a late
    December day is never moved into week 1 of the following year, and an
    early January day is never moved into week 52/53 of the previous one.
    """
    y, doy, j = _ints(year), _ints(day_of_year), _ints(jan1_weekday)
    _check_range("jan1_weekday", j, 0, 6)
    _check_range("day_of_year", doy, 1, 365 + _leap(y))
    monday_based = np.where(j == 0, 6, j - 1)
    return _out((doy + monday_based - 1) // 7 + 1)
