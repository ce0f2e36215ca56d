"""MCP server exposing recurrence helpers and event operations."""

from __future__ import annotations

from typing import Any, Literal

from fastmcp import FastMCP

from event_scheduler.core.settings import get_settings
from event_scheduler.domain.events import Event, EventForm
from event_scheduler.domain.recurrence import generate_repeated_events
from event_scheduler.domain.repeat_options import get_repeat_options
from event_scheduler.infrastructure.http_requester import (
    APIRequester,
    HTTPAPIRequester,
    normalize_base_url,
)
from event_scheduler.services.event_operations import DeleteMode, EventOperations

RecurrenceTypeName = Literal["none", "daily", "weekly", "monthly", "yearly"]
DeleteModeName = Literal["single", "all"]


def create_mcp_server(
    *,
    api_base_url: str | None = None,
    timeout_seconds: float | None = None,
    requester: APIRequester | None = None,
) -> FastMCP:
    """Create MCP server with recurrence tools and event backend tools."""

    settings = get_settings()
    resolved_base_url = normalize_base_url(
        api_base_url or settings.events_api_base_url
    )
    resolved_timeout = (
        settings.events_api_timeout_seconds
        if timeout_seconds is None
        else timeout_seconds
    )
    if resolved_timeout <= 0:
        raise ValueError("Events API timeout must be greater than zero.")

    mcp = FastMCP(name="Event Scheduler")
    api_requester: APIRequester = requester or HTTPAPIRequester(
        base_url=resolved_base_url,
        timeout_seconds=resolved_timeout,
    )
    ceiling = settings.recurrence_ceiling_date

    def _operations() -> EventOperations:
        return EventOperations(requester=api_requester, ceiling=ceiling)

    @mcp.tool(name="get_repeat_options")
    def repeat_options(
        type: RecurrenceTypeName,
        date: str,
    ) -> list[dict[str, str]]:
        """List repeat choices for a recurrence type and YYYY-MM-DD date."""

        return [
            {"value": option.value.value, "label": option.label}
            for option in get_repeat_options(type, date)
        ]

    @mcp.tool
    def expand_recurrence(event: dict[str, Any]) -> list[dict[str, Any]]:
        """Expand an event payload into one record per occurrence."""

        template = EventForm.model_validate(event)
        return [
            item.to_payload()
            for item in generate_repeated_events(template, ceiling=ceiling)
        ]

    @mcp.tool
    async def list_events() -> list[dict[str, Any]]:
        """List events stored in the backend."""

        events = await _operations().fetch_events()
        return [item.to_payload() for item in events]

    @mcp.tool
    async def save_event(
        event: dict[str, Any],
        editing: bool = False,
    ) -> list[dict[str, Any]]:
        """Create or edit an event; new recurring events are expanded first."""

        model: Event | EventForm = (
            Event.model_validate(event)
            if "id" in event
            else EventForm.model_validate(event)
        )
        events = await _operations().save_event(model, editing=editing)
        return [item.to_payload() for item in events]

    @mcp.tool
    async def delete_event(
        event_id: str,
        mode: DeleteModeName = "single",
    ) -> list[dict[str, Any]]:
        """Delete one event, or every event of its series with mode 'all'."""

        operations = _operations()
        await operations.fetch_events()
        events = await operations.delete_event(event_id, DeleteMode(mode))
        return [item.to_payload() for item in events]

    return mcp
