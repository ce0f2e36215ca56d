"""Event persistence workflows against the events backend."""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from datetime import date

from event_scheduler.domain.errors import EventOperationError
from event_scheduler.domain.events import Event, EventForm
from event_scheduler.domain.recurrence import MAX_DATE, generate_repeated_events
from event_scheduler.infrastructure.http_requester import APIRequester

logger = logging.getLogger(__name__)

EVENTS_PATH = "/api/events"
EVENTS_LIST_PATH = "/api/events-list"


class DeleteMode(enum.StrEnum):
    """Scope of a delete on an event that belongs to a series."""

    SINGLE = "single"
    ALL = "all"


class EventOperations:
    """Fetch, save and delete events, keeping the last fetched list locally."""

    def __init__(
        self,
        *,
        requester: APIRequester,
        ceiling: date = MAX_DATE,
    ) -> None:
        self._requester = requester
        self._ceiling = ceiling
        self.events: list[Event] = []

    async def fetch_events(self) -> list[Event]:
        """Reload the event list from the backend."""

        payload = await self._requester.request("GET", EVENTS_PATH)
        if not isinstance(payload, Mapping) or not isinstance(
            payload.get("events"), list
        ):
            raise EventOperationError("Events response is missing the events list.")
        self.events = [Event.model_validate(item) for item in payload["events"]]
        return self.events

    async def save_event(
        self,
        event: Event | EventForm,
        *,
        editing: bool,
    ) -> list[Event]:
        """Create or update an event and return the refreshed event list.

        New recurring events are expanded into one record per occurrence and
        sent as a batch. Edits always detach the event from its series.
        """

        if not editing and event.repeat.is_recurring:
            occurrences = generate_repeated_events(event, ceiling=self._ceiling)
            await self._requester.request(
                "POST",
                EVENTS_LIST_PATH,
                json_body={"events": [item.to_payload() for item in occurrences]},
            )
            saved_count = len(occurrences)
        elif editing and event.repeat.is_recurring:
            await self._requester.request(
                "PUT",
                EVENTS_LIST_PATH,
                json_body={"events": [event.detached().to_payload()]},
            )
            saved_count = 1
        elif editing:
            if not isinstance(event, Event):
                raise EventOperationError("Editing requires a persisted event id.")
            await self._requester.request(
                "PUT",
                f"{EVENTS_PATH}/{event.id}",
                json_body=event.detached().to_payload(),
            )
            saved_count = 1
        else:
            await self._requester.request(
                "POST",
                EVENTS_PATH,
                json_body=event.to_payload(),
            )
            saved_count = 1

        logger.info(
            "events_saved",
            extra={
                "editing": editing,
                "recurrence_type": str(event.repeat.type),
                "saved_count": saved_count,
            },
        )
        return await self.fetch_events()

    async def delete_event(
        self,
        event_id: str,
        mode: DeleteMode | str = DeleteMode.SINGLE,
    ) -> list[Event]:
        """Delete one event, or its whole series when mode is ``all``."""

        event = next((item for item in self.events if item.id == event_id), None)
        series_id = event.repeat.id if event is not None else None

        if series_id and mode == DeleteMode.ALL:
            related_ids = [
                item.id for item in self.events if item.repeat.id == series_id
            ]
            await self._requester.request(
                "DELETE",
                EVENTS_LIST_PATH,
                json_body={"eventIds": related_ids},
            )
            deleted_ids = related_ids
        else:
            await self._requester.request("DELETE", f"{EVENTS_PATH}/{event_id}")
            deleted_ids = [event_id]

        logger.info(
            "events_deleted",
            extra={
                "event_id": event_id,
                "mode": str(mode),
                "deleted_count": len(deleted_ids),
            },
        )
        return await self.fetch_events()
