from __future__ import annotations

import logging

from .julian import julian_day, weekday_of_julian_day

logger = logging.getLogger(__name__)


class WeekdayCache:
    """
    Bounded memo of the weekday (0 = Sunday) of 1 January per year.

    The first ``capacity`` distinct years stay cached; later years are
    computed on every request.  There is no eviction.  One instance belongs
    to one daily run and is never shared between runs.
    """

    MIN_CAPACITY: int = 10

    def __init__(self, capacity: int = MIN_CAPACITY) -> None:
        if capacity < self.MIN_CAPACITY:
            raise ValueError(
                f"Cache capacity must be at least {self.MIN_CAPACITY}; got {capacity}."
            )
        self._capacity: int = int(capacity)
        self._entries: dict[int, int] = {}
        self._hits: int = 0
        self._misses: int = 0

    def weekday_of_jan1(self, year: int) -> int:
        cached = self._entries.get(year)
        if cached is not None:
            self._hits += 1
            return cached

        self._misses += 1
        wday = weekday_of_julian_day(julian_day(year, 1, 1))
        if len(self._entries) < self._capacity:
            self._entries[year] = wday
            if len(self._entries) == self._capacity:
                logger.debug(
                    "Weekday cache full at %d years; later years are computed uncached.",
                    self._capacity,
                )
        return wday

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, year: object) -> bool:
        return year in self._entries

    def __repr__(self) -> str:
        return (
            f"WeekdayCache(capacity={self._capacity}, "
            f"years={sorted(self._entries)}, "
            f"hits={self._hits}, misses={self._misses})"
        )
