"""In-memory connection cache implementation."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from oebb_connections.domain.contracts.connection_cache import ConnectionCacheProtocol

if TYPE_CHECKING:
    from oebb_connections.domain.models.connection import Connection

logger = logging.getLogger(__name__)


class InMemoryConnectionCache(ConnectionCacheProtocol):
    """In-memory last-good-result store, keyed by route."""

    def __init__(
        self,
        max_age_seconds: float | None = 300,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            max_age_seconds: Entries older than this load as empty. None disables expiry.
            clock: Time source in seconds.
        """
        self._max_age_seconds = max_age_seconds
        self._clock = clock
        self._cache: dict[str, tuple[float, list[Connection]]] = {}

    def save(self, route_key: str, connections: list[Connection]) -> None:
        self._cache[route_key] = (self._clock(), list(connections))

    def load(self, route_key: str) -> list[Connection]:
        entry = self._cache.get(route_key)
        if entry is None:
            return []

        stored_at, connections = entry
        age = self._clock() - stored_at
        if self._max_age_seconds is not None and age >= self._max_age_seconds:
            logger.debug(f"Cached connections for {route_key} are stale")
            return []
        return list(connections)
