"""Event records exchanged with the events backend."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from event_scheduler.domain.calendar_math import parse_date
from event_scheduler.domain.recurrence_types import (
    RecurrenceRule,
    RecurrenceType,
    RepeatOptionValue,
)

ISO_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class WireModel(BaseModel):
    """Base model using camelCase on the wire and keeping unknown fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, object]:
        """Serialize to the JSON shape expected by the events backend."""

        return self.model_dump(mode="json", by_alias=True)


def _validate_iso_date(value: str) -> str:
    parse_date(value)
    return value


class RepeatInfo(WireModel):
    """Recurrence settings attached to an event."""

    type: RecurrenceType = RecurrenceType.NONE
    interval: int = Field(default=1, ge=1)
    end_date: str | None = Field(default=None, pattern=ISO_DATE_PATTERN)
    repeat_option: RepeatOptionValue | None = None
    id: str | None = None

    @field_validator("end_date", mode="before")
    @classmethod
    def blank_end_date_as_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("end_date")
    @classmethod
    def validate_end_date(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return _validate_iso_date(value)

    def to_rule(self) -> RecurrenceRule:
        """Build the domain recurrence rule for these settings."""

        return RecurrenceRule(
            type=self.type,
            interval=self.interval,
            end_date=parse_date(self.end_date) if self.end_date else None,
            option=self.repeat_option,
        )

    @property
    def is_recurring(self) -> bool:
        return self.type != RecurrenceType.NONE


class EventForm(WireModel):
    """Event payload before the backend assigns an identifier."""

    title: str = ""
    date: str = Field(pattern=ISO_DATE_PATTERN)
    start_time: str = ""
    end_time: str = ""
    description: str = ""
    location: str = ""
    category: str = ""
    repeat: RepeatInfo = Field(default_factory=RepeatInfo)
    notification_time: int = 10

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        return _validate_iso_date(value)

    def detached(self) -> EventForm:
        """Return a copy cut loose from its series, as sent on edits."""

        repeat = self.repeat.model_copy(
            update={"type": RecurrenceType.NONE, "id": None}
        )
        return self.model_copy(update={"repeat": repeat})


class Event(EventForm):
    """Persisted event."""

    id: str
