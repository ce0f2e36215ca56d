"""Contract tests for the repeat options endpoint."""

from __future__ import annotations

from fastapi.testclient import TestClient

from event_scheduler.api.app import create_app


def test_monthly_repeat_options_contract(client: TestClient) -> None:
    response = client.get(
        "/v1/repeat-options",
        params={"type": "monthly", "date": "2025-05-15"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "type": "monthly",
        "date": "2025-05-15",
        "options": [
            {"value": "date", "label": "every month on the 15th"},
            {"value": "week", "label": "every month, 3rd Thursday"},
        ],
    }


def test_yearly_leap_day_repeat_options(client: TestClient) -> None:
    response = client.get(
        "/v1/repeat-options",
        params={"type": "yearly", "date": "2024-02-29"},
    )

    assert response.status_code == 200
    assert [option["value"] for option in response.json()["options"]] == [
        "leap",
        "lastDay",
    ]


def test_daily_repeat_options_are_empty(client: TestClient) -> None:
    response = client.get(
        "/v1/repeat-options",
        params={"type": "daily", "date": "2025-05-15"},
    )

    assert response.status_code == 200
    assert response.json()["options"] == []


def test_unknown_type_is_rejected(client: TestClient) -> None:
    response = client.get(
        "/v1/repeat-options",
        params={"type": "hourly", "date": "2025-05-15"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"


def test_nonexistent_date_is_rejected(client: TestClient) -> None:
    response = client.get(
        "/v1/repeat-options",
        params={"type": "monthly", "date": "2025-02-30"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_REQUEST"
    assert body["details"] == {"date": "2025-02-30"}


def test_openapi_contains_repeat_options_path() -> None:
    schema = create_app().openapi()

    assert "200" in schema["paths"]["/v1/repeat-options"]["get"]["responses"]
