"""Journey domain model."""

from dataclasses import dataclass
from datetime import datetime

from .leg import Leg


@dataclass(frozen=True)
class Journey:
    """Door-to-door result of a single upstream journey query.

    Departure, arrival, duration and transfer count are derived from the legs
    and never stored separately.
    """

    legs: tuple[Leg, ...]

    def __post_init__(self) -> None:
        if not self.legs:
            raise ValueError("A journey needs at least one leg")

    @property
    def departure(self) -> datetime:
        """Departure of the first leg."""
        return self.legs[0].departure

    @property
    def arrival(self) -> datetime:
        """Arrival of the last leg."""
        return self.legs[-1].arrival

    @property
    def duration_minutes(self) -> int:
        """Door-to-door duration in whole minutes."""
        return round((self.arrival - self.departure).total_seconds() / 60)

    @property
    def transfers(self) -> int:
        """Number of vehicle changes (walking legs do not count)."""
        vehicle_legs = sum(1 for leg in self.legs if not leg.walking)
        return max(0, vehicle_legs - 1)

    @property
    def first_transport_leg(self) -> Leg:
        """First non-walking leg, or the first leg if every leg is walking."""
        for leg in self.legs:
            if not leg.walking:
                return leg
        return self.legs[0]
