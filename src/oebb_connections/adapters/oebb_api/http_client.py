"""HTTP client for ÖBB journey API requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from oebb_connections.adapters.api_request_logger import log_api_request, log_api_response
from oebb_connections.adapters.oebb_api.constants import (
    DEFAULT_HEADERS,
    DEFAULT_RESULTS,
    JOURNEYS_PATH,
    OEBB_BASE_URL,
)
from oebb_connections.domain.exceptions import TransientFetchError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class OebbHttpClient:
    """HTTP client for the /journeys endpoint.

    Every kind of upstream trouble (error status, malformed payload, network
    failure) is raised as TransientFetchError so callers can retry it.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = OEBB_BASE_URL,
        results: int = DEFAULT_RESULTS,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            base_url: API base URL without trailing slash.
            results: Number of journeys requested per query.
            timeout_seconds: Per-request timeout; None keeps the session default.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._results = results
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds) if timeout_seconds else None

    def _build_params(
        self, origin: str, destination: str, product_flags: dict[str, bool] | None
    ) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "from": origin,
            "to": destination,
            "results": self._results,
        }
        if product_flags:
            params.update(
                {name: "true" if enabled else "false" for name, enabled in product_flags.items()}
            )
        return params

    async def _log_error_response(self, response: "ClientResponse", url: str) -> str:
        """Log error response details and return the body text."""
        error_text = await response.text(errors="replace")
        error_body = error_text[:500] if error_text else "(empty response body)"
        logger.error(f"OEBB API returned status {response.status} for {url}: {error_body}")
        if response.status == 502 and "ENUM" in error_text:
            logger.warning(
                "API ENUM error - the upstream may reject product filters "
                "(set SEND_PRODUCT_FILTERS=false to omit them)"
            )
        return error_text

    async def _handle_journeys_response(
        self, response: "ClientResponse", url: str, origin: str, destination: str
    ) -> list[dict[str, Any]]:
        """Extract the journeys array, raising TransientFetchError if unusable."""
        if not 200 <= response.status < 300:
            error_text = await self._log_error_response(response, url)
            log_api_response(url, response.status, error_text)
            raise TransientFetchError(f"HTTP {response.status}", status_code=response.status)

        log_api_response(url, response.status)

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise TransientFetchError(f"Invalid JSON from {url}: {e}") from e

        journeys = data.get("journeys") if isinstance(data, dict) else None
        if not isinstance(journeys, list):
            logger.warning(f"No journeys array in response from {origin} to {destination}")
            if isinstance(data, dict) and data.get("error"):
                logger.error(f"API Error: {data['error']}")
            raise TransientFetchError(f"Malformed response from {url}: missing journeys array")

        logger.debug(f"Raw journeys count: {len(journeys)}")
        return journeys

    async def fetch_journeys(
        self,
        origin: str,
        destination: str,
        product_flags: dict[str, bool] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch raw journeys from {base_url}/journeys.

        Args:
            origin: Origin station ID.
            destination: Destination station ID.
            product_flags: Optional product -> requested flags sent as query parameters.

        Returns:
            List of raw journey dictionaries.

        Raises:
            TransientFetchError: On error status, malformed payload or network failure.
        """
        if not self._session:
            raise RuntimeError("OEBB API requires an aiohttp session")

        url = f"{self._base_url}{JOURNEYS_PATH}"
        params = self._build_params(origin, destination, product_flags)
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)
        logger.debug(f"Fetching journeys: {origin} -> {destination}")

        request_kwargs: dict[str, Any] = {"params": params, "headers": DEFAULT_HEADERS}
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        try:
            async with self._session.get(url, **request_kwargs) as response:
                return await self._handle_journeys_response(response, url, origin, destination)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Network error fetching journeys from {url}: {e}")
            raise TransientFetchError(f"Network error: {e}") from e
