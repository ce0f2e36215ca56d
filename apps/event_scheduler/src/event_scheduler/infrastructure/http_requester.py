"""HTTP boundary for the events backend."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from event_scheduler.domain.errors import EventOperationError

ParamValue = str | int | float | bool | None
ParamsMapping = Mapping[str, ParamValue]


class APIRequester(Protocol):
    """Requester abstraction to simplify HTTP boundary testing."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: ParamsMapping | None = None,
        json_body: Mapping[str, object] | None = None,
    ) -> object: ...


@dataclass(slots=True, frozen=True)
class HTTPAPIRequester:
    """httpx wrapper for the events REST API."""

    base_url: str
    timeout_seconds: float
    transport: httpx.AsyncBaseTransport | None = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: ParamsMapping | None = None,
        json_body: Mapping[str, object] | None = None,
    ) -> object:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self.transport,
        ) as client:
            response = await client.request(
                method=method,
                url=path,
                params=params,
                json=dict(json_body) if json_body is not None else None,
            )

        if response.is_success:
            return _parse_json_response(response)
        raise EventOperationError(
            build_api_error(response),
            status_code=response.status_code,
        )


def _parse_json_response(response: httpx.Response) -> object:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise EventOperationError(
            f"API returned a non-JSON response with status {response.status_code}.",
            status_code=response.status_code,
        ) from exc


def build_api_error(response: httpx.Response) -> str:
    """Describe a failed response using the backend error payload when present."""

    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        if text:
            return f"API request failed with status {response.status_code}: {text}"
        return f"API request failed with status {response.status_code}."

    if isinstance(payload, Mapping):
        error_code = payload.get("code")
        error_message = payload.get("message")
        details = payload.get("details")
        if isinstance(error_code, str) and isinstance(error_message, str):
            if details is None:
                return f"API error {error_code}: {error_message}"
            return f"API error {error_code}: {error_message} | details={details}"

    return f"API request failed with status {response.status_code}: {payload}"


def normalize_base_url(value: str) -> str:
    return value.rstrip("/")
