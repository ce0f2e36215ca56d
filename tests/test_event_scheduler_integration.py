from __future__ import annotations

import json
from pathlib import Path

from fastapi.testclient import TestClient
from typer.testing import CliRunner

from event_scheduler.api.app import create_app
from event_scheduler.cli import app


def _fixture_path() -> Path:
    return (
        Path(__file__).resolve().parent.parent
        / "apps"
        / "event_scheduler"
        / "tests"
        / "fixtures"
        / "weekly_review_event.json"
    )


def _parse_cli_dates(output: str) -> list[str]:
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    return [line for line in lines if not line.startswith("Occurrences: ")]


def test_cli_and_api_expand_to_same_occurrences() -> None:
    fixture_path = _fixture_path()
    payload = json.loads(fixture_path.read_text(encoding="utf-8"))

    cli_result = CliRunner().invoke(app, ["expand", "--input", str(fixture_path)])
    assert cli_result.exit_code == 0

    with TestClient(create_app()) as client:
        api_response = client.post("/v1/recurrences/expand", json=payload)
    assert api_response.status_code == 200

    cli_dates = _parse_cli_dates(cli_result.stdout)
    api_dates = [event["date"] for event in api_response.json()["events"]]

    assert cli_dates == api_dates == [
        "2024-03-15",
        "2024-03-29",
        "2024-04-12",
        "2024-04-26",
        "2024-05-10",
    ]
    assert "Occurrences: 5" in cli_result.stdout


def test_cli_and_api_agree_on_repeat_options() -> None:
    cli_result = CliRunner().invoke(app, ["repeat-options", "monthly", "2025-01-31"])
    assert cli_result.exit_code == 0

    with TestClient(create_app()) as client:
        api_response = client.get(
            "/v1/repeat-options",
            params={"type": "monthly", "date": "2025-01-31"},
        )

    api_lines = [
        f"{option['value']}: {option['label']}"
        for option in api_response.json()["options"]
    ]
    assert cli_result.stdout.splitlines() == api_lines == [
        "date: every month on the 31st",
        "lastDay: last day of the month",
    ]


def test_cli_rejects_invalid_anchor_date() -> None:
    cli_result = CliRunner().invoke(app, ["repeat-options", "yearly", "2023-02-29"])

    assert cli_result.exit_code != 0


def test_cli_reports_no_options_for_daily() -> None:
    cli_result = CliRunner().invoke(app, ["repeat-options", "daily", "2025-05-15"])

    assert cli_result.exit_code == 0
    assert "No repeat options" in cli_result.stdout


def test_cli_expand_rejects_invalid_event_file(tmp_path: Path) -> None:
    input_path = tmp_path / "event.json"
    input_path.write_text(
        json.dumps(
            {
                "title": "Broken",
                "date": "2024-03-15",
                "repeat": {"type": "daily", "endDate": "2024-02-30"},
            }
        ),
        encoding="utf-8",
    )

    cli_result = CliRunner().invoke(app, ["expand", "--input", str(input_path)])

    assert cli_result.exit_code == 2
    assert isinstance(cli_result.exception, SystemExit)


def test_cli_expand_rejects_malformed_json(tmp_path: Path) -> None:
    input_path = tmp_path / "event.json"
    input_path.write_text("{not json", encoding="utf-8")

    cli_result = CliRunner().invoke(app, ["expand", "--input", str(input_path)])

    assert cli_result.exit_code == 2
    assert isinstance(cli_result.exception, SystemExit)
