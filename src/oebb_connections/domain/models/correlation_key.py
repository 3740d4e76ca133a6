"""Correlation key domain model."""

from dataclasses import dataclass
from datetime import datetime

from .journey import Journey


@dataclass(frozen=True)
class CorrelationKey:
    """Heuristic join key for matching the same train across separate fetches.

    Two journeys with equal keys are assumed, not proven, to describe the same
    vehicle run. Distinct trains that share a departure instant and a line name
    collide; the correlator treats them as one.
    """

    departure: datetime
    line_name: str

    @classmethod
    def for_journey(cls, journey: Journey) -> "CorrelationKey":
        """Build the key from the journey departure and its first leg's line name."""
        first_line = journey.legs[0].line
        return cls(departure=journey.departure, line_name=first_line.name if first_line else "")
