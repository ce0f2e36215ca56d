from __future__ import annotations

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from event_scheduler.api.app import create_app
from event_scheduler.api.dependencies import get_recurrence_ceiling


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def short_ceiling_client() -> Generator[TestClient, None, None]:
    app = create_app()
    app.dependency_overrides[get_recurrence_ceiling] = lambda: date(2024, 4, 30)
    with TestClient(app) as test_client:
        yield test_client
