from timetable.sequence.daily import DailySequence, open_daily, to_date
from timetable.sequence.monthly import MonthlySequence, open_monthly
from timetable.sequence.rows import DayRow, MonthRow

__all__ = [
    "DailySequence",
    "DayRow",
    "MonthRow",
    "MonthlySequence",
    "open_daily",
    "open_monthly",
    "to_date",
]
