"""Connection domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from .journey import Journey
from .leg import Leg


@dataclass(frozen=True)
class Connection:
    """A journey enriched with arrival times correlated from sibling fetches.

    auxiliary_arrivals maps a label (usually a station name) to the arrival
    time of the same train at that station.
    """

    journey: Journey
    auxiliary_arrivals: dict[str, datetime] = field(default_factory=dict)

    @property
    def legs(self) -> tuple[Leg, ...]:
        return self.journey.legs

    @property
    def departure(self) -> datetime:
        return self.journey.departure

    @property
    def arrival(self) -> datetime:
        return self.journey.arrival

    @property
    def duration_minutes(self) -> int:
        return self.journey.duration_minutes

    @property
    def transfers(self) -> int:
        return self.journey.transfers

    def with_auxiliary_arrival(self, label: str, arrival: datetime) -> "Connection":
        """Return a copy with one more auxiliary arrival attached."""
        return Connection(
            journey=self.journey,
            auxiliary_arrivals={**self.auxiliary_arrivals, label: arrival},
        )
