"""Route configuration domain model."""

from dataclasses import dataclass, field

from .station import Station


@dataclass(frozen=True)
class RouteConfiguration:
    """A selectable origin/destination pair."""

    key: str  # e.g. "f-m"
    label: str  # e.g. "F → M"
    origin: Station
    destination: Station
    correlations: list[Station] = field(
        default_factory=list
    )  # Stations whose arrival times are correlated onto the route's connections
