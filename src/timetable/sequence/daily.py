from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import Callable, Optional, Union

from timetable._exceptions import DateRangeOverflow, InvalidRange
from timetable.calendar.julian import from_julian_day, julian_day, weekday_of_julian_day
from timetable.calendar.math import day_of_year, iso_week, quarter_of_month
from timetable.calendar.weekday import WeekdayCache
from timetable.sequence.rows import DayRow, day_uid
from timetable.settings import TimetableSettings

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime]

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

_MIN_JULIAN_DAY: int = julian_day(MINYEAR, 1, 1)
_MAX_JULIAN_DAY: int = julian_day(MAXYEAR, 12, 31)


def to_date(value: DateLike) -> date:
    """
    Normalise a date-like to a ``date``.
    Accepts ``date``/``datetime`` objects and 'YYYY-MM-DD' or 'YYYYMMDD' strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {value!r}")
    raise TypeError(f"Unsupported type for date: {type(value)}")


class DailySequence:
    """
    Lazy daily timetable over the inclusive range [start_date, end_date].

    Iterating yields one DayRow per calendar day in ascending order.  Each
    instance owns its own WeekdayCache, so independent sequences can be
    interleaved freely.  If a day cannot be represented the pull raises
    DateRangeOverflow, and so does every pull after it.
    """

    def __init__(
        self,
        start_date: DateLike,
        end_date: DateLike,
        *,
        cache_size: int = WeekdayCache.MIN_CAPACITY,
    ) -> None:
        start, end = to_date(start_date), to_date(end_date)
        if start > end:
            raise InvalidRange(
                f"start_date {start.isoformat()} is after end_date {end.isoformat()}."
            )

        self._start: date = start
        self._end: date = end
        self._current: int = julian_day(start.year, start.month, start.day)
        self._ordinal: int = 1
        self._total: int = (end - start).days + 1
        self._processed: int = 0
        self._cache: WeekdayCache = WeekdayCache(cache_size)
        self._failure: Optional[DateRangeOverflow] = None
        logger.debug(
            "Opened daily sequence %s..%s (%d days).",
            start.isoformat(), end.isoformat(), self._total,
        )

    # ── iteration ────────────────────────────────────────────────────────

    def __iter__(self) -> "DailySequence":
        return self

    def __next__(self) -> DayRow:
        if self._failure is not None:
            raise DateRangeOverflow(
                f"Daily sequence already failed: {self._failure}"
            ) from self._failure
        if self._processed >= self._total:
            raise StopIteration

        try:
            row = self._row_for(self._current)
        except DateRangeOverflow as exc:
            self._failure = exc
            logger.error(
                "Daily sequence %s..%s failed after %d rows: %s",
                self._start.isoformat(), self._end.isoformat(), self._processed, exc,
            )
            raise

        self._ordinal += 1
        self._current += 1
        self._processed += 1

        if self._processed == self._total:
            logger.debug(
                "Daily sequence %s..%s exhausted after %d rows.",
                self._start.isoformat(), self._end.isoformat(), self._processed,
            )
        return row

    def __length_hint__(self) -> int:
        return 0 if self._failure is not None else self.remaining

    def _row_for(self, jd: int) -> DayRow:
        if not _MIN_JULIAN_DAY <= jd <= _MAX_JULIAN_DAY:
            raise DateRangeOverflow(
                f"Julian day {jd} lies outside years {MINYEAR}..{MAXYEAR}."
            )

        year, month, day = from_julian_day(jd)
        raw_wday = weekday_of_julian_day(jd)
        doy = day_of_year(year, month, day)
        jan1_wday = self._cache.weekday_of_jan1(year)

        return DayRow(
            uid=day_uid(jd),
            date=date(year, month, day),
            year=year,
            quarter=quarter_of_month(month),
            month=month,
            day=day,
            iso_week=iso_week(year, doy, jan1_wday),
            iso_weekday=7 if raw_wday == 0 else raw_wday,
            day_of_year=doy,
            is_weekend=raw_wday in (0, 6),
            ordinal=self._ordinal,
        )

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def start_date(self) -> date:
        return self._start

    @property
    def end_date(self) -> date:
        return self._end

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
        return self._failure is not None or self._processed >= self._total

    @property
    def failed(self) -> bool:
        return self._failure is not None

    @property
    def weekday_cache(self) -> WeekdayCache:
        return self._cache

    def __repr__(self) -> str:
        state = "failed" if self._failure is not None else f"{self._processed}/{self._total}"
        return (
            f"DailySequence(start_date={self._start.isoformat()!r}, "
            f"end_date={self._end.isoformat()!r}, "
            f"processed={state})"
        )


def open_daily(
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
    *,
    today: Optional[Callable[[], DateLike]] = None,
    settings: Optional[TimetableSettings] = None,
) -> DailySequence:
    """
    Open a daily sequence.  A missing bound defaults to ``today()`` minus
    (start) or plus (end) ``settings.default_window_days`` days.
    """
    if settings is None:
        settings = TimetableSettings.from_env()

    if start_date is None or end_date is None:
        now = to_date((today or date.today)())
        window = timedelta(days=settings.default_window_days)
        try:
            if start_date is None:
                start_date = now - window
            if end_date is None:
                end_date = now + window
        except OverflowError as exc:
            raise DateRangeOverflow(
                f"Default window of {settings.default_window_days} days around "
                f"{now.isoformat()} leaves the representable calendar."
            ) from exc

    return DailySequence(start_date, end_date, cache_size=settings.weekday_cache_size)
