from fastapi import FastAPI
from fastapi.testclient import TestClient

from event_scheduler.api.error_handlers import register_error_handlers
from event_scheduler.domain.errors import InvalidRequestError


def test_domain_error_handler_returns_contract_shape() -> None:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    def boom() -> None:
        raise InvalidRequestError(message="Bad anchor date")

    client = TestClient(app)
    response = client.get("/boom")

    assert response.status_code == 400
    assert response.json() == {
        "code": "INVALID_REQUEST",
        "message": "Bad anchor date",
    }


def test_unexpected_error_handler_hides_internals() -> None:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/crash")
    def crash() -> None:
        raise KeyError("secret")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/crash")

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "INTERNAL_SERVER_ERROR"
    assert body["details"] == {"error_type": "KeyError"}
