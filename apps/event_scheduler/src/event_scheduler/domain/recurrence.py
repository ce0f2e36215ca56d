"""Recurrence expansion into concrete occurrence dates."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TypeVar

from event_scheduler.domain.calendar_math import (
    format_date,
    get_week_of_month,
    is_leap_year,
    parse_date,
    roll_date,
    weekday_index,
)
from event_scheduler.domain.events import EventForm
from event_scheduler.domain.recurrence_types import (
    RecurrenceRule,
    RecurrenceType,
    RepeatOptionValue,
)

logger = logging.getLogger(__name__)

MAX_DATE = date(2025, 6, 25)

# Every year residue repeats within one 400-year Gregorian cycle.
_LEAP_SEARCH_LIMIT = 400

EventT = TypeVar("EventT", bound=EventForm)


def increment_date(
    value: date,
    recurrence_type: RecurrenceType | str,
    interval: int,
    option: RepeatOptionValue | str | None = None,
) -> date:
    """Advance a date by one recurrence step.

    Month and year shifts keep the day number and roll overflowing days into
    the following month instead of clamping them, so January 31st plus one
    month lands on March 2nd or 3rd. Unsupported types return the date
    unchanged.
    """

    if recurrence_type == RecurrenceType.DAILY:
        return value + timedelta(days=interval)
    if recurrence_type == RecurrenceType.WEEKLY:
        return value + timedelta(days=interval * 7)
    if recurrence_type == RecurrenceType.MONTHLY:
        return _increment_monthly(value, interval, option)
    if recurrence_type == RecurrenceType.YEARLY:
        return _increment_yearly(value, interval, option)
    return value


def _increment_monthly(
    value: date,
    interval: int,
    option: RepeatOptionValue | str | None,
) -> date:
    if option == RepeatOptionValue.WEEK:
        week_of_month = get_week_of_month(value)
        target_weekday = weekday_index(value)
        shifted = roll_date(value.year, value.month + interval, value.day)
        first_weekday = weekday_index(shifted.replace(day=1))
        offset = (target_weekday - first_weekday + 7) % 7
        target_day = 1 + offset + (week_of_month - 1) * 7
        return roll_date(shifted.year, shifted.month, target_day)

    return roll_date(value.year, value.month + interval, value.day)


def _increment_yearly(
    value: date,
    interval: int,
    option: RepeatOptionValue | str | None,
) -> date:
    if option == RepeatOptionValue.LEAP:
        year = value.year + interval
        for _ in range(_LEAP_SEARCH_LIMIT):
            if is_leap_year(year):
                break
            year += interval
        else:
            return value
        shifted = roll_date(year, value.month, value.day)
        february = roll_date(shifted.year, 2, shifted.day)
        return roll_date(february.year, february.month, 29)

    if option == RepeatOptionValue.LAST_DAY:
        return roll_date(value.year + interval, 3, 0)

    return roll_date(value.year + interval, value.month, value.day)


def expand_dates(
    base_date: date,
    rule: RecurrenceRule,
    *,
    ceiling: date = MAX_DATE,
) -> list[date]:
    """Return every occurrence date from base_date up to the rule's cutoff.

    The cutoff is the rule's end date when set, otherwise ``ceiling``. An end
    date before the base date yields an empty list.
    """

    cutoff = rule.end_date if rule.end_date is not None else ceiling
    occurrences: list[date] = []
    current = base_date
    while current <= cutoff:
        occurrences.append(current)
        try:
            next_date = increment_date(
                current, rule.type, rule.interval, rule.option
            )
        except (ValueError, OverflowError):
            break
        if next_date == current:
            break
        current = next_date
    return occurrences


def generate_repeated_events(
    event: EventT,
    *,
    ceiling: date = MAX_DATE,
) -> list[EventT]:
    """Materialize one event record per occurrence of the event's recurrence.

    Each record is a copy of ``event`` with only ``date`` replaced.
    """

    occurrence_dates = expand_dates(
        parse_date(event.date),
        event.repeat.to_rule(),
        ceiling=ceiling,
    )
    logger.debug(
        "recurrence_expanded",
        extra={
            "base_date": event.date,
            "recurrence_type": str(event.repeat.type),
            "occurrences": len(occurrence_dates),
        },
    )
    return [
        event.model_copy(update={"date": format_date(occurrence)})
        for occurrence in occurrence_dates
    ]
