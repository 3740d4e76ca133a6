"""Application services (use cases) for connection retrieval."""

from oebb_connections.application.services.connection_correlator import correlate
from oebb_connections.application.services.connection_ranking import select
from oebb_connections.application.services.connection_service import ConnectionService
from oebb_connections.application.services.journey_fetcher import JourneyFetcher
from oebb_connections.application.services.journey_normalizer import (
    JourneyNormalizer,
    TextCleaner,
    clean_line_name,
)
from oebb_connections.application.services.refresh_service import RefreshService

__all__ = [
    "ConnectionService",
    "JourneyFetcher",
    "JourneyNormalizer",
    "RefreshService",
    "TextCleaner",
    "clean_line_name",
    "correlate",
    "select",
]
