"""Admissibility policy domain model."""

from enum import StrEnum


class AdmissibilityPolicy(StrEnum):
    """Which legs of a journey must use an admissible transport product.

    ALL_LEGS: every leg is walking or admissible.
    STRICT_FIRST_LEG: ALL_LEGS, and the first leg must also be a non-walking
    admissible leg (journeys starting with a footpath are rejected).
    """

    ALL_LEGS = "all_legs"
    STRICT_FIRST_LEG = "strict_first_leg"
