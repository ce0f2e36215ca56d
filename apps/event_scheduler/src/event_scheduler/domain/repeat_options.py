"""Repeat option labels for recurrence anchors that need disambiguation.

Some anchors read differently depending on the recurrence type. The 15th of a
month can mean "every 15th" or "every third Thursday", a 31st can mean "the
31st" or "the last day of the month", and February 29th can mean "only on leap
years" or "the last day of February". The editing surface renders these
options as radio choices and stores the chosen value as the rule's option.
"""

from __future__ import annotations

from datetime import date

from event_scheduler.domain.calendar_math import (
    get_week_of_month,
    parse_date,
    weekday_index,
    weekday_name,
)
from event_scheduler.domain.recurrence_types import (
    RecurrenceType,
    RepeatOption,
    RepeatOptionValue,
)

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def ordinal(value: int) -> str:
    """Return English ordinal for a positive integer (1st, 2nd, 11th, 23rd)."""

    if 11 <= value % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
    return f"{value}{suffix}"


def get_repeat_options(
    recurrence_type: RecurrenceType | str,
    anchor_date: date | str,
) -> list[RepeatOption]:
    """Return the choices to offer for a recurrence type and anchor date.

    Daily and weekly recurrences never need disambiguation and return an
    empty list.
    """

    anchor = parse_date(anchor_date)
    if recurrence_type == RecurrenceType.MONTHLY:
        return _monthly_options(anchor)
    if recurrence_type == RecurrenceType.YEARLY:
        return _yearly_options(anchor)
    return []


def _monthly_options(anchor: date) -> list[RepeatOption]:
    if anchor.day == 31:
        return [
            RepeatOption(RepeatOptionValue.DATE, "every month on the 31st"),
            RepeatOption(RepeatOptionValue.LAST_DAY, "last day of the month"),
        ]

    week_of_month = get_week_of_month(anchor)
    day_name = weekday_name(weekday_index(anchor))
    return [
        RepeatOption(
            RepeatOptionValue.DATE,
            f"every month on the {ordinal(anchor.day)}",
        ),
        RepeatOption(
            RepeatOptionValue.WEEK,
            f"every month, {ordinal(week_of_month)} {day_name}",
        ),
    ]


def _yearly_options(anchor: date) -> list[RepeatOption]:
    if anchor.month == 2 and anchor.day == 29:
        return [
            RepeatOption(RepeatOptionValue.LEAP, "every year Feb 29"),
            RepeatOption(RepeatOptionValue.LAST_DAY, "last day of February every year"),
        ]

    month_name = MONTH_ABBREVIATIONS[anchor.month - 1]
    return [
        RepeatOption(
            RepeatOptionValue.DATE,
            f"every year on {month_name} {anchor.day}",
        )
    ]
