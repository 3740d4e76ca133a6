"""Ports (interfaces) for the ports-and-adapters architecture."""

from oebb_connections.domain.ports.display_adapter import ConnectionDisplay
from oebb_connections.domain.ports.journey_repository import JourneyRepository
from oebb_connections.domain.ports.refresh_runner import RefreshRunner

__all__ = [
    "ConnectionDisplay",
    "JourneyRepository",
    "RefreshRunner",
]
