"""Transport product domain model."""

from enum import StrEnum


class TransportProduct(StrEnum):
    """Product tags used by the ÖBB HAFAS profile."""

    NATIONAL_EXPRESS = "nationalExpress"
    NATIONAL = "national"
    INTERREGIONAL = "interregional"
    REGIONAL = "regional"
    SUBURBAN = "suburban"
    BUS = "bus"
    FERRY = "ferry"
    SUBWAY = "subway"
    TRAM = "tram"
    ON_CALL = "onCall"

    @classmethod
    def parse(cls, value: object) -> "TransportProduct | None":
        """Return the product for an upstream tag, or None if the tag is unknown."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
