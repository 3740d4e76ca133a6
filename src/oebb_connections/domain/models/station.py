"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a station in the transport catalog."""

    key: str  # Catalog key, e.g. "FLORIDSDORF"
    id: str  # Upstream station identifier, e.g. "1292101"
    name: str
