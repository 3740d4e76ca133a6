"""Refresh use case with last-good-result fallback."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from oebb_connections.domain.models import ErrorDetails, RefreshResult

if TYPE_CHECKING:
    from oebb_connections.application.services.connection_service import ConnectionService
    from oebb_connections.domain.contracts import ConnectionCacheProtocol
    from oebb_connections.domain.models import RefreshRequest

logger = logging.getLogger(__name__)


class RefreshService:
    """Runs one refresh cycle and talks to the last-good-result cache at its boundaries."""

    def __init__(
        self,
        connection_service: "ConnectionService",
        cache: "ConnectionCacheProtocol",
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        """Initialize the refresh service.

        Args:
            connection_service: The connection pipeline.
            cache: Store for the last good result per route.
            clock: Source of the update timestamp.
        """
        self._connection_service = connection_service
        self._cache = cache
        self._clock = clock

    async def run_refresh(self, request: "RefreshRequest") -> RefreshResult:
        """Refresh connections for one route.

        Fresh non-empty results are cached. Empty results and pipeline failures
        fall back to the cached result, if it is still fresh.
        """
        try:
            connections = await self._connection_service.get_connections(request)
        except Exception as e:
            logger.error(f"Refresh failed for route {request.route_key}: {e}", exc_info=True)
            cached = self._cache.load(request.route_key)
            if cached:
                logger.info(f"Offline - showing {len(cached)} cached connections")
            return RefreshResult(
                route_key=request.route_key,
                connections=cached,
                updated_at=self._clock(),
                status="offline",
                from_cache=bool(cached),
                error=ErrorDetails.from_exception(e),
            )

        if connections:
            self._cache.save(request.route_key, connections)
            return RefreshResult(
                route_key=request.route_key,
                connections=connections,
                updated_at=self._clock(),
            )

        logger.warning(f"No connections returned for route {request.route_key}")
        cached = self._cache.load(request.route_key)
        return RefreshResult(
            route_key=request.route_key,
            connections=cached,
            updated_at=self._clock(),
            from_cache=bool(cached),
        )
