"""ÖBB journey repository adapter."""

import logging
from typing import TYPE_CHECKING, Any

from oebb_connections.adapters.oebb_api.constants import DEFAULT_RESULTS, OEBB_BASE_URL
from oebb_connections.adapters.oebb_api.http_client import OebbHttpClient
from oebb_connections.domain.models.transport_product import TransportProduct
from oebb_connections.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def build_product_flags(admissible_products: frozenset[TransportProduct]) -> dict[str, bool]:
    """Request every admissible product and exclude all others."""
    return {product.value: product in admissible_products for product in TransportProduct}


class OebbJourneyRepository(JourneyRepository):
    """Adapter for the ÖBB /journeys endpoint."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = OEBB_BASE_URL,
        results: int = DEFAULT_RESULTS,
        send_product_filters: bool = True,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API base URL.
            results: Number of journeys requested per query.
            send_product_filters: Send per-product query flags; filtering happens
                client-side either way.
            timeout_seconds: Per-request timeout; None keeps the session default.
        """
        self._http_client = OebbHttpClient(
            session=session, base_url=base_url, results=results, timeout_seconds=timeout_seconds
        )
        self._send_product_filters = send_product_filters

    async def get_journeys(
        self,
        origin: str,
        destination: str,
        admissible_products: frozenset[TransportProduct],
    ) -> list[dict[str, Any]]:
        """Issue one journey query for an origin/destination pair."""
        product_flags = (
            build_product_flags(admissible_products) if self._send_product_filters else None
        )
        return await self._http_client.fetch_journeys(origin, destination, product_flags)
