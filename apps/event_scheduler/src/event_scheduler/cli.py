"""CLI bootstrap for event-scheduler."""

import json
from pathlib import Path

import typer
from pydantic import ValidationError

from event_scheduler.core.settings import get_settings
from event_scheduler.domain.calendar_math import parse_date
from event_scheduler.domain.events import EventForm
from event_scheduler.domain.recurrence import generate_repeated_events
from event_scheduler.domain.recurrence_types import RecurrenceType
from event_scheduler.domain.repeat_options import get_repeat_options

app = typer.Typer(help="CLI for recurring event scheduling.")
INPUT_FILE_OPTION = typer.Option(..., exists=True, dir_okay=False)


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("event-scheduler is ready")


@app.command("repeat-options")
def repeat_options(recurrence_type: RecurrenceType, anchor_date: str) -> None:
    """List the repeat choices for a recurrence type and YYYY-MM-DD date."""
    try:
        anchor = parse_date(anchor_date)
    except ValueError as exc:
        raise typer.BadParameter(
            f"'{anchor_date}' is not a valid YYYY-MM-DD date.",
            param_hint="ANCHOR_DATE",
        ) from exc

    options = get_repeat_options(recurrence_type, anchor)
    if not options:
        typer.echo("No repeat options for this recurrence.")
        return
    for option in options:
        typer.echo(f"{option.value}: {option.label}")


@app.command("expand")
def expand(input: Path = INPUT_FILE_OPTION) -> None:
    """Expand an event JSON file into its occurrence dates."""
    try:
        payload = json.loads(input.read_text(encoding="utf-8"))
        event = EventForm.model_validate(payload)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(
            f"Input file is not valid JSON: {exc.msg}.",
            param_hint="--input",
        ) from exc
    except ValidationError as exc:
        raise typer.BadParameter(
            f"Input file is not a valid event: {exc.error_count()} invalid field(s).",
            param_hint="--input",
        ) from exc
    occurrences = generate_repeated_events(
        event,
        ceiling=get_settings().recurrence_ceiling_date,
    )

    for occurrence in occurrences:
        typer.echo(occurrence.date)
    typer.echo(f"Occurrences: {len(occurrences)}")


def main() -> None:
    """Run the event-scheduler CLI application."""
    app()


if __name__ == "__main__":
    main()
