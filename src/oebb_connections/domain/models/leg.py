"""Leg and line domain models."""

from dataclasses import dataclass
from datetime import datetime

from .transport_product import TransportProduct


@dataclass(frozen=True)
class Line:
    """Vehicle line serving a leg."""

    name: str
    product: TransportProduct | None
    direction: str | None = None  # Raw upstream direction text


@dataclass(frozen=True)
class Leg:
    """One vehicle or walking segment of a journey."""

    departure: datetime
    arrival: datetime
    line: Line | None = None
    platform: str | None = None
    delay_seconds: int | None = None
    direction: str | None = None  # Cleaned direction text for display
    destination: str | None = None
    walking: bool = False

    @property
    def delay_minutes(self) -> int:
        """Upstream-reported delay rounded to whole minutes."""
        if not self.delay_seconds:
            return 0
        return round(self.delay_seconds / 60)
