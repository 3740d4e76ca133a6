"""Refresh request domain model."""

from dataclasses import dataclass, field

from .admissibility_policy import AdmissibilityPolicy
from .route_configuration import RouteConfiguration
from .transport_product import TransportProduct


@dataclass(frozen=True)
class RefreshRequest:
    """Everything a single pipeline run needs, passed explicitly per call."""

    route_key: str
    origin: str
    destination: str
    admissible_products: frozenset[TransportProduct]
    limit: int = 5
    correlations: dict[str, str] = field(
        default_factory=dict
    )  # label -> station id fetched as an auxiliary destination
    policy: AdmissibilityPolicy = AdmissibilityPolicy.ALL_LEGS

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")

    @classmethod
    def for_route(
        cls,
        route: RouteConfiguration,
        admissible_products: frozenset[TransportProduct],
        limit: int = 5,
        policy: AdmissibilityPolicy = AdmissibilityPolicy.ALL_LEGS,
    ) -> "RefreshRequest":
        """Build a request for a configured route."""
        return cls(
            route_key=route.key,
            origin=route.origin.id,
            destination=route.destination.id,
            admissible_products=admissible_products,
            limit=limit,
            correlations={station.name: station.id for station in route.correlations},
            policy=policy,
        )
