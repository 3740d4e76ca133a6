"""Journey repository port."""

from typing import Any, Protocol

from oebb_connections.domain.models.transport_product import TransportProduct


class JourneyRepository(Protocol):
    """Port for retrieving raw journey records from the upstream API."""

    async def get_journeys(
        self,
        origin: str,
        destination: str,
        admissible_products: frozenset[TransportProduct],
    ) -> list[dict[str, Any]]:
        """Issue a single journey query.

        Raises:
            TransientFetchError: On error status, malformed payload or network failure.
        """
        ...
