"""Display adapters."""

from oebb_connections.adapters.display.connection_formatter import ConnectionFormatter

__all__ = ["ConnectionFormatter"]
