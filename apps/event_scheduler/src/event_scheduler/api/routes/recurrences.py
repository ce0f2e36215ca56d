"""Recurrence helper routes."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from event_scheduler.api.dependencies import get_recurrence_ceiling
from event_scheduler.api.schemas.recurrences import (
    ExpandRecurrenceResponse,
    RecurrenceTypeParam,
    RepeatOptionsResponse,
)
from event_scheduler.domain.calendar_math import parse_date
from event_scheduler.domain.errors import InvalidRequestError, compose_error_message
from event_scheduler.domain.events import EventForm
from event_scheduler.domain.recurrence import generate_repeated_events
from event_scheduler.domain.repeat_options import get_repeat_options

router = APIRouter(tags=["Recurrences"])


@router.get(
    "/repeat-options",
    response_model=RepeatOptionsResponse,
    responses={
        400: {"description": "Invalid query parameters"},
    },
)
def list_repeat_options(
    type: Annotated[RecurrenceTypeParam, Query()],
    anchor: Annotated[
        str,
        Query(alias="date", pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"),
    ],
) -> RepeatOptionsResponse:
    """Return the disambiguation choices for a recurrence anchor."""

    anchor_date = _parse_anchor_date(anchor)
    return RepeatOptionsResponse.from_models(
        recurrence_type=type,
        anchor_date=anchor_date,
        options=get_repeat_options(type, anchor_date),
    )


@router.post(
    "/recurrences/expand",
    response_model=ExpandRecurrenceResponse,
    responses={
        400: {"description": "Invalid payload"},
    },
)
def expand_recurrence(
    payload: EventForm,
    ceiling: Annotated[date, Depends(get_recurrence_ceiling)],
) -> ExpandRecurrenceResponse:
    """Materialize one event record per occurrence of the payload recurrence."""

    return ExpandRecurrenceResponse.from_events(
        generate_repeated_events(payload, ceiling=ceiling)
    )


def _parse_anchor_date(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as exc:
        raise InvalidRequestError(
            message=compose_error_message(
                cause=f"'{value}' is not a valid calendar date.",
                action="Send the date as an existing YYYY-MM-DD day.",
            ),
            details={"date": value},
        ) from exc
