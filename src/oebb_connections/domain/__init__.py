"""Domain layer - core business logic and models."""

from oebb_connections.domain.models import (
    Connection,
    Journey,
    Leg,
    Line,
    Station,
    TransportProduct,
)
from oebb_connections.domain.ports import (
    ConnectionDisplay,
    JourneyRepository,
)

__all__ = [
    "Connection",
    "ConnectionDisplay",
    "Journey",
    "JourneyRepository",
    "Leg",
    "Line",
    "Station",
    "TransportProduct",
]
