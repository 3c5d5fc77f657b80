"""
Command-line writer for the timetable feeds.

    timetable monthly 2020 2030 --output data/months.csv
    timetable daily --start 2021-01-01 --end 2021-12-31

Rows are streamed as CSV, a header of field names first.
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

from timetable._exceptions import TimetableError
from timetable.sequence import open_daily, open_monthly, to_date
from timetable.sequence.rows import DayRow, MonthRow
from timetable.settings import TimetableSettings

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="timetable", description="Stream calendar dimension feeds as CSV"
    )
    parser.add_argument("-o", "--output", type=Path, help="write to PATH instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    sub = parser.add_subparsers(dest="feed", required=True)

    monthly = sub.add_parser("monthly", help="one row per month")
    monthly.add_argument("start_year", type=int)
    monthly.add_argument("end_year", type=int)

    daily = sub.add_parser("daily", help="one row per day")
    daily.add_argument("--start", type=to_date, default=None, help="YYYY-MM-DD")
    daily.add_argument("--end", type=to_date, default=None, help="YYYY-MM-DD")
    return parser.parse_args(argv)


def write_rows(rows: Iterable[MonthRow | DayRow], fields: Sequence[str], stream: TextIO) -> int:
    writer = csv.writer(stream)
    writer.writerow(fields)
    count = 0
    for row in rows:
        writer.writerow(row.as_tuple())
        count += 1
    return count


def _run(args: argparse.Namespace, settings: TimetableSettings, stream: TextIO) -> int:
    if args.feed == "monthly":
        return write_rows(
            open_monthly(args.start_year, args.end_year), MonthRow.field_names(), stream
        )
    return write_rows(
        open_daily(args.start, args.end, settings=settings), DayRow.field_names(), stream
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = TimetableSettings.from_env()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.logging_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        if args.output is None:
            count = _run(args, settings, sys.stdout)
        else:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with args.output.open("w", newline="", encoding="utf-8") as f:
                count = _run(args, settings, f)
    except TimetableError as exc:
        print(f"timetable: error: {exc}", file=sys.stderr)
        return 2

    logger.info("Wrote %d %s rows.", count, args.feed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
