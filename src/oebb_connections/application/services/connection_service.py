"""Connection pipeline: fetch, normalize, correlate, select."""

import asyncio
import logging
from typing import TYPE_CHECKING

from oebb_connections.application.services.connection_correlator import as_connection, correlate
from oebb_connections.application.services.connection_ranking import select

if TYPE_CHECKING:
    from oebb_connections.application.services.journey_fetcher import JourneyFetcher
    from oebb_connections.application.services.journey_normalizer import JourneyNormalizer
    from oebb_connections.domain.models import Connection, RefreshRequest

logger = logging.getLogger(__name__)


class ConnectionService:
    """Runs the journey pipeline for a single refresh request.

    Stateless per call; concurrent invocations do not interfere.
    """

    def __init__(self, fetcher: "JourneyFetcher", normalizer: "JourneyNormalizer") -> None:
        self._fetcher = fetcher
        self._normalizer = normalizer

    async def get_connections(self, request: "RefreshRequest") -> list["Connection"]:
        """Fetch the primary pair and every correlation pair, then merge and rank.

        Transient upstream failures show up as empty fetches. Unexpected
        exceptions propagate after the sibling fetches are cancelled.
        """
        destinations = [request.destination, *request.correlations.values()]
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(
                        self._fetcher.fetch_journeys(
                            request.origin, destination, request.admissible_products
                        )
                    )
                    for destination in destinations
                ]
        except ExceptionGroup as e:
            # Siblings are already cancelled; surface the first failure unwrapped
            raise e.exceptions[0] from None
        raw_results = [task.result() for task in tasks]

        primary = self._normalizer.normalize(
            raw_results[0], request.admissible_products, request.policy
        )
        connections = [as_connection(journey) for journey in primary]

        for label, raw in zip(request.correlations, raw_results[1:], strict=True):
            secondary = self._normalizer.normalize(raw, request.admissible_products, request.policy)
            connections = correlate(connections, secondary, label)

        selected = select(connections, request.limit)
        logger.info(
            f"Route {request.route_key}: {len(primary)} valid journeys, returning {len(selected)}"
        )
        return selected
