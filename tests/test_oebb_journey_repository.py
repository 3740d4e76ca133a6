"""Tests for the ÖBB journey API adapter."""

import asyncio
import json
import logging
from typing import Any
from unittest.mock import patch

import aiohttp
import pytest

from oebb_connections.adapters.oebb_api import OebbJourneyRepository
from oebb_connections.adapters.oebb_api.http_client import OebbHttpClient
from oebb_connections.adapters.oebb_api.oebb_journey_repository import build_product_flags
from oebb_connections.domain.exceptions import TransientFetchError
from oebb_connections.domain.models import TransportProduct

PRODUCTS = frozenset({TransportProduct.SUBURBAN, TransportProduct.REGIONAL})


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, status: int = 200, body: str | bytes = "") -> None:
        self.status = status
        self._body = body.encode() if isinstance(body, str) else body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self._body.decode(encoding, errors)

    async def json(self, content_type: str | None = "application/json") -> Any:  # noqa: ARG002
        return json.loads(self._body.decode())


class FailingRequest:
    """Request context manager that fails before a response arrives."""

    def __init__(self, error: BaseException) -> None:
        self._error = error

    async def __aenter__(self) -> None:
        raise self._error

    async def __aexit__(self, *exc_info: object) -> None:
        return None


class FakeSession:
    """Records GET requests and replays canned responses."""

    def __init__(self, *responses: FakeResponse | FailingRequest) -> None:
        self._responses = list(responses)
        self.requests: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse | FailingRequest:
        self.requests.append((url, kwargs))
        return self._responses.pop(0)


def _ok(payload: Any) -> FakeResponse:
    return FakeResponse(200, json.dumps(payload))


def test_build_product_flags_enables_only_admissible_products() -> None:
    """Given suburban and regional, when building flags, then every other product is disabled."""
    flags = build_product_flags(PRODUCTS)

    assert flags["suburban"] is True
    assert flags["regional"] is True
    assert flags["subway"] is False
    assert flags["nationalExpress"] is False
    assert set(flags) == {p.value for p in TransportProduct}


@pytest.mark.asyncio
async def test_get_journeys_sends_query_and_returns_journeys() -> None:
    """Given a valid response, when getting journeys, then the journeys array is returned."""
    journeys = [{"legs": [{"departure": "2024-01-01T08:00:00+01:00"}]}]
    session = FakeSession(_ok({"journeys": journeys}))
    repository = OebbJourneyRepository(
        session=session,  # type: ignore[arg-type]
        base_url="https://example.test/api/",
        results=4,
    )

    result = await repository.get_journeys("1292101", "1290302", PRODUCTS)

    assert result == journeys
    url, kwargs = session.requests[0]
    assert url == "https://example.test/api/journeys"
    assert kwargs["params"]["from"] == "1292101"
    assert kwargs["params"]["to"] == "1290302"
    assert kwargs["params"]["results"] == 4
    assert kwargs["params"]["suburban"] == "true"
    assert kwargs["params"]["bus"] == "false"
    assert kwargs["headers"]["Accept"] == "application/json"
    assert "timeout" not in kwargs


@pytest.mark.asyncio
async def test_get_journeys_can_omit_product_filters() -> None:
    """Given product filters disabled, when getting journeys, then no product params are sent."""
    session = FakeSession(_ok({"journeys": []}))
    repository = OebbJourneyRepository(
        session=session,  # type: ignore[arg-type]
        send_product_filters=False,
    )

    await repository.get_journeys("1292101", "1290302", PRODUCTS)

    params = session.requests[0][1]["params"]
    assert set(params) == {"from", "to", "results"}


@pytest.mark.asyncio
async def test_timeout_is_passed_to_session() -> None:
    """Given a request timeout, when fetching, then an aiohttp ClientTimeout is passed along."""
    session = FakeSession(_ok({"journeys": []}))
    client = OebbHttpClient(session=session, timeout_seconds=7.5)  # type: ignore[arg-type]

    await client.fetch_journeys("a", "b")

    timeout = session.requests[0][1]["timeout"]
    assert isinstance(timeout, aiohttp.ClientTimeout)
    assert timeout.total == 7.5


@pytest.mark.asyncio
async def test_error_status_raises_transient_error_with_status() -> None:
    """Given a 503 response, when fetching, then TransientFetchError carries the status code."""
    session = FakeSession(FakeResponse(503, "Service Unavailable"))
    client = OebbHttpClient(session=session)  # type: ignore[arg-type]

    with pytest.raises(TransientFetchError) as exc_info:
        await client.fetch_journeys("a", "b")

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_undecodable_error_body_is_still_transient() -> None:
    """Given a 502 whose body is not valid UTF-8, when fetching, then TransientFetchError is raised."""
    session = FakeSession(FakeResponse(502, b"\xff\xfe gateway"))
    client = OebbHttpClient(session=session)  # type: ignore[arg-type]

    with pytest.raises(TransientFetchError) as exc_info:
        await client.fetch_journeys("a", "b")

    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_error_body_is_passed_to_response_log() -> None:
    """Given a 503 with a body, when fetching, then the response log receives status and body."""
    session = FakeSession(FakeResponse(503, "Service Unavailable"))
    client = OebbHttpClient(session=session, base_url="https://example.test")  # type: ignore[arg-type]

    with (
        patch("oebb_connections.adapters.oebb_api.http_client.log_api_response") as log_response,
        pytest.raises(TransientFetchError),
    ):
        await client.fetch_journeys("a", "b")

    log_response.assert_called_once_with(
        "https://example.test/journeys", 503, "Service Unavailable"
    )


@pytest.mark.asyncio
async def test_enum_error_logs_product_filter_hint(caplog: pytest.LogCaptureFixture) -> None:
    """Given a 502 ENUM error, when fetching, then a hint about product filters is logged."""
    session = FakeSession(FakeResponse(502, '{"message": "invalid ENUM value"}'))
    client = OebbHttpClient(session=session)  # type: ignore[arg-type]

    with caplog.at_level(logging.WARNING), pytest.raises(TransientFetchError):
        await client.fetch_journeys("a", "b", {"suburban": True})

    assert "SEND_PRODUCT_FILTERS=false" in caplog.text


@pytest.mark.asyncio
async def test_missing_journeys_array_raises_and_logs_api_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given a payload without journeys but with an error field, when fetching, then it is malformed."""
    session = FakeSession(_ok({"error": "location not found"}))
    client = OebbHttpClient(session=session)  # type: ignore[arg-type]

    with caplog.at_level(logging.ERROR), pytest.raises(TransientFetchError, match="missing"):
        await client.fetch_journeys("a", "b")

    assert "location not found" in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"journeys": None}, {"journeys": "x"}, [1, 2]])
async def test_non_list_journeys_is_malformed(payload: Any) -> None:
    """Given journeys that is not a list, when fetching, then TransientFetchError is raised."""
    client = OebbHttpClient(session=FakeSession(_ok(payload)))  # type: ignore[arg-type]

    with pytest.raises(TransientFetchError):
        await client.fetch_journeys("a", "b")


@pytest.mark.asyncio
async def test_invalid_json_is_malformed() -> None:
    """Given a body that is not JSON, when fetching, then TransientFetchError is raised."""
    session = FakeSession(FakeResponse(200, "<html>"))
    client = OebbHttpClient(session=session)  # type: ignore[arg-type]

    with pytest.raises(TransientFetchError, match="Invalid JSON"):
        await client.fetch_journeys("a", "b")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()]
)
async def test_network_errors_become_transient(error: BaseException) -> None:
    """Given a connection error or timeout, when fetching, then TransientFetchError is raised."""
    client = OebbHttpClient(session=FakeSession(FailingRequest(error)))  # type: ignore[arg-type]

    with pytest.raises(TransientFetchError, match="Network error"):
        await client.fetch_journeys("a", "b")


@pytest.mark.asyncio
async def test_missing_session_raises_runtime_error() -> None:
    """Given no session, when fetching, then RuntimeError is raised."""
    with pytest.raises(RuntimeError, match="aiohttp session"):
        await OebbHttpClient().fetch_journeys("a", "b")
