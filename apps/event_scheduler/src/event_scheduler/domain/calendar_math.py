"""Calendar helpers for recurrence date arithmetic."""

from __future__ import annotations

import math
from datetime import date, timedelta

WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def is_leap_year(year: int) -> bool:
    """Return whether a year is a Gregorian leap year."""

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def weekday_index(value: date) -> int:
    """Return weekday index counted from Sunday (0) to Saturday (6)."""

    return (value.weekday() + 1) % 7


def weekday_name(index: int) -> str:
    """Return English weekday name for a Sunday-based index, or empty string."""

    if 0 <= index < len(WEEKDAY_NAMES):
        return WEEKDAY_NAMES[index]
    return ""


def get_week_of_month(value: date) -> int:
    """Return 1-based position of the week holding the date within its month."""

    first_of_month = weekday_index(value.replace(day=1))
    return math.ceil((value.day + first_of_month) / 7)


def roll_date(year: int, month: int, day: int) -> date:
    """Build a date rolling out-of-range month and day values forward.

    Month 13 becomes January of the next year and day 0 is the last day of
    the previous month, so ``roll_date(2025, 2, 31)`` is March 3rd and
    ``roll_date(2024, 3, 0)`` is February 29th.
    """

    year_offset, month_index = divmod(month - 1, 12)
    first_of_month = date(year=year + year_offset, month=month_index + 1, day=1)
    return first_of_month + timedelta(days=day - 1)


def format_date(value: date) -> str:
    """Format date as YYYY-MM-DD."""

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(value: date | str) -> date:
    """Parse YYYY-MM-DD text into a date, passing dates through unchanged."""

    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())
