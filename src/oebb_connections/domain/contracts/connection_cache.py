"""Protocol for caching the last good connections per route."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from oebb_connections.domain.models.connection import Connection


class ConnectionCacheProtocol(Protocol):
    """Protocol for the last-good-result store.

    The store owns its freshness policy: load() returns an empty list once an
    entry is too old.
    """

    def save(self, route_key: str, connections: list["Connection"]) -> None:
        """Store connections for a route.

        Args:
            route_key: The route key.
            connections: The connections to cache.
        """
        ...

    def load(self, route_key: str) -> list["Connection"]:
        """Get cached connections for a route.

        Args:
            route_key: The route key.

        Returns:
            List of cached connections, or empty list if none are fresh enough.
        """
        ...
