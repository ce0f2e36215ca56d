"""API request and response schemas."""

from event_scheduler.api.schemas.recurrences import (
    ExpandRecurrenceResponse,
    RepeatOptionResponse,
    RepeatOptionsResponse,
)

__all__ = [
    "ExpandRecurrenceResponse",
    "RepeatOptionResponse",
    "RepeatOptionsResponse",
]
