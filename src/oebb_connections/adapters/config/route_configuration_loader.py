"""Transport catalog loader."""

import logging
from typing import Any

from oebb_connections.adapters.config.app_config import AppConfig
from oebb_connections.adapters.oebb_api.constants import DEFAULT_ROUTES, DEFAULT_STATIONS
from oebb_connections.domain.models.route_configuration import RouteConfiguration
from oebb_connections.domain.models.station import Station
from oebb_connections.domain.models.transport_catalog import TransportCatalog

logger = logging.getLogger(__name__)


class RouteConfigurationLoader:
    """Builds the transport catalog from app config and optional TOML file.

    TOML format:

        [[stations]]
        key = "FLORIDSDORF"
        id = "1292101"
        name = "Floridsdorf"

        [[routes]]
        key = "f-m"
        from = "FLORIDSDORF"
        to = "WIEN_MITTE"
        label = "F → M"
        correlate = ["PRATERSTERN"]
    """

    @staticmethod
    def _default_stations() -> dict[str, Station]:
        return {
            key: Station(key=key, id=station_id, name=name)
            for key, (station_id, name) in DEFAULT_STATIONS.items()
        }

    @staticmethod
    def _default_routes() -> list[dict[str, Any]]:
        return [
            {"key": key, "from": origin, "to": destination, "label": label, "correlate": correlate}
            for key, (origin, destination, label, correlate) in DEFAULT_ROUTES.items()
        ]

    @staticmethod
    def _parse_stations(stations_data: list[dict[str, Any]]) -> dict[str, Station]:
        stations: dict[str, Station] = {}
        for station_data in stations_data:
            key = station_data.get("key")
            station_id = station_data.get("id")
            if not key or not station_id:
                raise ValueError(f"Station entries need 'key' and 'id': {station_data}")
            name = station_data.get("name") or str(key)
            stations[str(key)] = Station(key=str(key), id=str(station_id), name=str(name))
        return stations

    @staticmethod
    def _parse_route(
        route_data: dict[str, Any], stations: dict[str, Station]
    ) -> RouteConfiguration:
        key = route_data.get("key")
        if not key:
            raise ValueError("All routes must have a 'key' field")

        def _station(station_key: Any, role: str) -> Station:
            if not isinstance(station_key, str) or station_key not in stations:
                raise ValueError(
                    f"Route '{key}' references unknown {role} station '{station_key}'"
                )
            return stations[station_key]

        origin = _station(route_data.get("from"), "origin")
        destination = _station(route_data.get("to"), "destination")

        correlate = route_data.get("correlate", [])
        if not isinstance(correlate, list):
            raise ValueError(f"Route '{key}': 'correlate' must be a list of station keys")
        correlations = [_station(station_key, "correlation") for station_key in correlate]

        label = route_data.get("label") or f"{origin.name} → {destination.name}"
        return RouteConfiguration(
            key=str(key),
            label=str(label),
            origin=origin,
            destination=destination,
            correlations=correlations,
        )

    @staticmethod
    def load(config: AppConfig) -> TransportCatalog:
        """Load the transport catalog.

        Raises:
            ValueError: On unknown station references or duplicate route keys.
        """
        stations_data: list[dict[str, Any]] = []
        routes_data: list[dict[str, Any]] = []
        if config.config_file:
            stations_data, routes_data = config.get_catalog_config()

        stations = RouteConfigurationLoader._default_stations()
        stations.update(RouteConfigurationLoader._parse_stations(stations_data))

        routes: dict[str, RouteConfiguration] = {}
        for route_data in routes_data or RouteConfigurationLoader._default_routes():
            route = RouteConfigurationLoader._parse_route(route_data, stations)
            if route.key in routes:
                raise ValueError(f"Route keys must be unique. Duplicate key found: '{route.key}'")
            routes[route.key] = route

        logger.debug(f"Loaded catalog with {len(stations)} station(s) and {len(routes)} route(s)")
        return TransportCatalog(
            stations=stations,
            routes=routes,
            admissible_products=config.products,
        )
