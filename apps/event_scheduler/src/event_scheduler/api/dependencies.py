"""API dependency providers."""

from __future__ import annotations

from datetime import date

from event_scheduler.core.settings import get_settings


def get_recurrence_ceiling() -> date:
    """Return the last date unterminated recurrences may reach."""

    return get_settings().recurrence_ceiling_date
