"""Small date calculations: days to Christmas, minutes to year end, weekdays."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from datetime import date, datetime

__all__ = [
    "days_until_christmas",
    "minutes_until_year_end",
    "years_with_wednesday_fifteenth",
    "main",
]

_WEDNESDAY = 2


def days_until_christmas(now: datetime) -> int:
    """Whole days from ``now`` until the next December 25 at midnight."""
    christmas = now.replace(month=12, day=25, hour=0, minute=0, second=0, microsecond=0)
    if now >= christmas:
        christmas = christmas.replace(year=now.year + 1)
    return (christmas - now).days


def minutes_until_year_end(now: datetime) -> int:
    """Whole minutes from ``now`` until midnight at the start of next year."""
    year_end = now.replace(
        year=now.year + 1, month=1, day=1, hour=0, minute=0, second=0, microsecond=0
    )
    return int((year_end - now).total_seconds() // 60)


def years_with_wednesday_fifteenth(start_year: int, end_year: int) -> list[int]:
    """Years in the inclusive range whose January 15 falls on a Wednesday."""
    return [
        year
        for year in range(start_year, end_year + 1)
        if date(year, 1, 15).weekday() == _WEDNESDAY
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Date calculations.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("christmas", help="days until the next Christmas")
    commands.add_parser("year-end", help="minutes until the end of the year")
    wednesdays = commands.add_parser(
        "wednesdays", help="years whose January 15 is a Wednesday"
    )
    wednesdays.add_argument("start_year", type=int)
    wednesdays.add_argument("end_year", type=int)
    args = parser.parse_args(argv)

    if args.command == "christmas":
        print(f"Days remaining until the next Christmas: {days_until_christmas(datetime.now())}")
    elif args.command == "year-end":
        minutes = minutes_until_year_end(datetime.now())
        print(f"Minutes remaining until the end of the current year: {minutes}")
    else:
        try:
            years = years_with_wednesday_fifteenth(args.start_year, args.end_year)
        except ValueError as exc:
            parser.error(str(exc))
        for year in years:
            print(f"In year {year}, the 15th day of some month is a Wednesday.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())