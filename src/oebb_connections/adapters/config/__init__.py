"""Configuration adapters."""

from oebb_connections.adapters.config.app_config import AppConfig
from oebb_connections.adapters.config.route_configuration_loader import RouteConfigurationLoader

__all__ = ["AppConfig", "RouteConfigurationLoader"]
