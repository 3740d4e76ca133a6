"""Adapters layer - external system integrations."""

from oebb_connections.adapters.cache import FileConnectionCache, InMemoryConnectionCache
from oebb_connections.adapters.config import AppConfig, RouteConfigurationLoader
from oebb_connections.adapters.display import ConnectionFormatter
from oebb_connections.adapters.oebb_api import OebbJourneyRepository
from oebb_connections.adapters.refresh_poller import RefreshPoller

__all__ = [
    "AppConfig",
    "ConnectionFormatter",
    "FileConnectionCache",
    "InMemoryConnectionCache",
    "OebbJourneyRepository",
    "RefreshPoller",
    "RouteConfigurationLoader",
]
