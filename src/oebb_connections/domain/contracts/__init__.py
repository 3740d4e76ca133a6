"""Contracts (protocols) implemented by adapters."""

from oebb_connections.domain.contracts.connection_cache import ConnectionCacheProtocol

__all__ = ["ConnectionCacheProtocol"]
