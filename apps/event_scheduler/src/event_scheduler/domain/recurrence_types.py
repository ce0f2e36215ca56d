"""Recurrence value types shared by the advisor and the expander."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date


class RecurrenceType(enum.StrEnum):
    """Supported recurrence types."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class RepeatOptionValue(enum.StrEnum):
    """Disambiguation choices for ambiguous recurrence anchors."""

    DATE = "date"
    WEEK = "week"
    LAST_DAY = "lastDay"
    LEAP = "leap"


@dataclass(slots=True, frozen=True)
class RecurrenceRule:
    """How an event repeats and until when."""

    type: RecurrenceType
    interval: int = 1
    end_date: date | None = None
    option: RepeatOptionValue | None = None

    def __post_init__(self) -> None:
        if self.interval < 1:
            raise ValueError("Recurrence interval must be at least 1.")


@dataclass(slots=True, frozen=True)
class RepeatOption:
    """One selectable recurrence disambiguation choice."""

    value: RepeatOptionValue
    label: str
