"""Recurrence API schemas."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from event_scheduler.domain.calendar_math import format_date
from event_scheduler.domain.events import EventForm
from event_scheduler.domain.recurrence_types import RepeatOption

RecurrenceTypeParam = Literal["none", "daily", "weekly", "monthly", "yearly"]
RepeatOptionParam = Literal["date", "week", "lastDay", "leap"]


class RepeatOptionResponse(BaseModel):
    """One selectable repeat option."""

    value: RepeatOptionParam
    label: str

    @classmethod
    def from_model(cls, option: RepeatOption) -> RepeatOptionResponse:
        return cls(value=option.value.value, label=option.label)


class RepeatOptionsResponse(BaseModel):
    """Repeat options offered for one recurrence type and anchor date."""

    type: RecurrenceTypeParam
    date: str = Field(pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
    options: list[RepeatOptionResponse]

    @classmethod
    def from_models(
        cls,
        *,
        recurrence_type: RecurrenceTypeParam,
        anchor_date: date,
        options: list[RepeatOption],
    ) -> RepeatOptionsResponse:
        return cls(
            type=recurrence_type,
            date=format_date(anchor_date),
            options=[RepeatOptionResponse.from_model(option) for option in options],
        )


class ExpandRecurrenceResponse(BaseModel):
    """Occurrence records materialized from one event template."""

    count: int = Field(ge=0)
    events: list[EventForm]

    @classmethod
    def from_events(cls, events: list[EventForm]) -> ExpandRecurrenceResponse:
        return cls(count=len(events), events=events)
