"""Transport catalog domain model."""

from dataclasses import dataclass, field

from .route_configuration import RouteConfiguration
from .station import Station
from .transport_product import TransportProduct


@dataclass(frozen=True)
class TransportCatalog:
    """Known stations, routes and the admissible transport products."""

    stations: dict[str, Station]
    routes: dict[str, RouteConfiguration]
    admissible_products: frozenset[TransportProduct] = field(
        default_factory=lambda: frozenset({TransportProduct.SUBURBAN, TransportProduct.REGIONAL})
    )

    def station(self, key: str) -> Station:
        """Look up a station by catalog key."""
        try:
            return self.stations[key]
        except KeyError:
            raise ValueError(f"Unknown station '{key}'") from None

    def route(self, key: str) -> RouteConfiguration:
        """Look up a route by key."""
        try:
            return self.routes[key]
        except KeyError:
            known = ", ".join(self.routes)
            raise ValueError(f"Unknown route '{key}' (known routes: {known})") from None
