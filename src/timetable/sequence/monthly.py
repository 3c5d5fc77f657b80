from __future__ import annotations

import logging
import operator
from datetime import MAXYEAR, MINYEAR

from timetable._exceptions import DateRangeOverflow, InvalidRange
from timetable.calendar.math import days_in_month, quarter_of_month
from timetable.sequence.rows import MonthRow, month_uid

logger = logging.getLogger(__name__)


class MonthlySequence:
    """
    Lazy monthly timetable over the inclusive year range [start_year, end_year].

    Iterating yields one MonthRow per month in ascending (year, month)
    order, January of ``start_year`` first.  The cursor only moves forward;
    re-open with the same bounds to replay the run.
    """

    def __init__(self, start_year: int, end_year: int) -> None:
        start_year, end_year = operator.index(start_year), operator.index(end_year)
        if start_year > end_year:
            raise InvalidRange(
                f"start_year {start_year} is after end_year {end_year}."
            )
        if start_year < MINYEAR or end_year > MAXYEAR:
            raise DateRangeOverflow(
                f"Years {start_year}..{end_year} lie outside {MINYEAR}..{MAXYEAR}."
            )

        self._start_year: int = start_year
        self._end_year: int = end_year
        self._year: int = start_year
        self._month: int = 1
        self._ordinal: int = 1
        self._total: int = (end_year - start_year + 1) * 12
        self._processed: int = 0
        logger.debug(
            "Opened monthly sequence %d..%d (%d months).",
            start_year, end_year, self._total,
        )

    # ── iteration ────────────────────────────────────────────────────────

    def __iter__(self) -> "MonthlySequence":
        return self

    def __next__(self) -> MonthRow:
        if self._processed >= self._total:
            raise StopIteration

        year, month = self._year, self._month
        row = MonthRow(
            uid=month_uid(year, month),
            year=year,
            quarter=quarter_of_month(month),
            month=month,
            days_in_month=days_in_month(year, month),
            ordinal=self._ordinal,
        )

        self._ordinal += 1
        self._month += 1
        if self._month > 12:
            self._month = 1
            self._year += 1
        self._processed += 1

        if self._processed == self._total:
            logger.debug(
                "Monthly sequence %d..%d exhausted after %d rows.",
                self._start_year, self._end_year, self._processed,
            )
        return row

    def __length_hint__(self) -> int:
        return self.remaining

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def start_year(self) -> int:
        return self._start_year

    @property
    def end_year(self) -> int:
        return self._end_year

    @property
    def total(self) -> int:
        return self._total

    @property
    def processed(self) -> int:
        return self._processed

    @property
    def remaining(self) -> int:
        return self._total - self._processed

    @property
    def done(self) -> bool:
        return self._processed >= self._total

    def __repr__(self) -> str:
        return (
            f"MonthlySequence(start_year={self._start_year}, "
            f"end_year={self._end_year}, "
            f"processed={self._processed}/{self._total})"
        )


def open_monthly(start_year: int, end_year: int) -> MonthlySequence:
    return MonthlySequence(start_year, end_year)
