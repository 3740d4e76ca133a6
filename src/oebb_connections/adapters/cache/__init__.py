"""Last-good-result stores."""

from oebb_connections.adapters.cache.file_connection_cache import FileConnectionCache
from oebb_connections.adapters.cache.in_memory_connection_cache import InMemoryConnectionCache

__all__ = ["FileConnectionCache", "InMemoryConnectionCache"]
