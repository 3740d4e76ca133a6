"""Main entry point and composition root for the ÖBB connections application."""

import logging
import sys
from typing import TYPE_CHECKING

from oebb_connections.adapters.cache import FileConnectionCache, InMemoryConnectionCache
from oebb_connections.adapters.config import AppConfig
from oebb_connections.adapters.oebb_api import OebbJourneyRepository
from oebb_connections.application.services import (
    ConnectionService,
    JourneyFetcher,
    JourneyNormalizer,
    RefreshService,
    TextCleaner,
)
from oebb_connections.domain.contracts import ConnectionCacheProtocol
from oebb_connections.domain.models import RefreshRequest, TransportCatalog

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_cache(config: AppConfig) -> ConnectionCacheProtocol:
    """Create the last-good-result store selected by configuration."""
    if config.cache_file:
        logger.debug(f"Caching connections in {config.cache_file}")
        return FileConnectionCache(config.cache_file, max_age_seconds=config.cache_max_age_seconds)
    return InMemoryConnectionCache(max_age_seconds=config.cache_max_age_seconds)


def create_refresh_service(config: AppConfig, session: "ClientSession") -> RefreshService:
    """Wire repository, pipeline and cache into a refresh service."""
    repository = OebbJourneyRepository(
        session=session,
        base_url=config.api_base_url,
        results=config.api_results,
        send_product_filters=config.send_product_filters,
        timeout_seconds=config.api_timeout_seconds,
    )
    fetcher = JourneyFetcher(
        repository,
        max_attempts=config.fetch_max_attempts,
        retry_delay_seconds=config.retry_delay_seconds,
    )
    normalizer = JourneyNormalizer(TextCleaner(config.boilerplate_token_list))
    return RefreshService(ConnectionService(fetcher, normalizer), create_cache(config))


def build_request(
    config: AppConfig,
    catalog: TransportCatalog,
    route_key: str | None = None,
    limit: int | None = None,
) -> RefreshRequest:
    """Build the refresh request for a route (default route if none given).

    Raises:
        ValueError: If the route is not in the catalog or the limit is below 1.
    """
    route = catalog.route(route_key or config.default_route)
    return RefreshRequest.for_route(
        route,
        admissible_products=catalog.admissible_products,
        limit=limit if limit is not None else config.result_limit,
        policy=config.policy,
    )


if __name__ == "__main__":
    from oebb_connections.cli import cli_main

    cli_main()
