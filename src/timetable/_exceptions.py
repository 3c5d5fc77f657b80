class TimetableError(Exception):
    """Base class for all timetable errors."""


class InvalidRange(TimetableError, ValueError):
    """Start bound lies after the end bound."""


class DateRangeOverflow(TimetableError, OverflowError):
    """A computed date falls outside the representable calendar."""


class SettingsError(TimetableError):
    """A configuration value is missing or malformed."""
