"""Journey fetcher with bounded retry."""

import logging
from typing import TYPE_CHECKING, Any

from oebb_connections.application.retry import with_retry
from oebb_connections.domain.exceptions import RetryExhaustedError

if TYPE_CHECKING:
    from oebb_connections.domain.models import TransportProduct
    from oebb_connections.domain.ports import JourneyRepository

logger = logging.getLogger(__name__)


class JourneyFetcher:
    """Fetches raw journeys for one origin/destination pair, retrying transient failures."""

    def __init__(
        self,
        repository: "JourneyRepository",
        max_attempts: int = 3,
        retry_delay_seconds: float = 2.0,
    ) -> None:
        """Initialize the fetcher.

        Args:
            repository: Port issuing the actual upstream query.
            max_attempts: Default number of tries per fetch.
            retry_delay_seconds: Fixed pause between tries.
        """
        self._repository = repository
        self.max_attempts = max_attempts
        self.retry_delay_seconds = retry_delay_seconds

    async def fetch_journeys(
        self,
        origin: str,
        destination: str,
        admissible_products: "frozenset[TransportProduct]",
        max_attempts: int | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch raw journey records.

        Returns an empty list once every attempt has failed transiently.
        Non-transient exceptions propagate to the caller.
        """
        attempts = max_attempts if max_attempts is not None else self.max_attempts

        async def _attempt() -> list[dict[str, Any]]:
            return await self._repository.get_journeys(origin, destination, admissible_products)

        try:
            journeys = await with_retry(
                _attempt,
                max_attempts=attempts,
                delay_seconds=self.retry_delay_seconds,
                description=f"journey query {origin} -> {destination}",
            )
        except RetryExhaustedError as e:
            logger.error(f"All retry attempts failed for {origin} -> {destination}: {e.last_error}")
            return []

        logger.debug(f"Fetched {len(journeys)} raw journeys for {origin} -> {destination}")
        return journeys
