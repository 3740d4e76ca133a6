"""Filtering and normalization of raw journey records."""

import logging
import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from oebb_connections.domain.constants import DEFAULT_BOILERPLATE_TOKENS
from oebb_connections.domain.models import (
    AdmissibilityPolicy,
    Journey,
    Leg,
    Line,
    TransportProduct,
)

logger = logging.getLogger(__name__)

_LINE_QUALIFIER = re.compile(r"\s*\(.*")
_WHITESPACE = re.compile(r"\s+")


def clean_line_name(name: str | None) -> str:
    """Cut a line name at its first parenthesis ("S 1 (Zug-Nr. 123)" -> "S 1")."""
    if not name:
        return ""
    return _LINE_QUALIFIER.sub("", name).strip()


class TextCleaner:
    """Removes boilerplate tokens from station and direction text."""

    def __init__(self, boilerplate_tokens: Iterable[str] = DEFAULT_BOILERPLATE_TOKENS) -> None:
        tokens = sorted({t.strip() for t in boilerplate_tokens if t.strip()}, key=len, reverse=True)
        if tokens:
            alternation = "|".join(r"\s+".join(map(re.escape, t.split())) for t in tokens)
            # Lookarounds instead of \b so tokens ending in punctuation ("Bhf.") match too
            self._pattern: re.Pattern[str] | None = re.compile(
                rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE
            )
        else:
            self._pattern = None

    def clean(self, text: str | None) -> str | None:
        """Strip boilerplate tokens case-insensitively and collapse whitespace."""
        if text is None:
            return None
        if self._pattern is not None:
            text = self._pattern.sub("", text)
        return _WHITESPACE.sub(" ", text).strip()


class JourneyNormalizer:
    """Validates raw journeys against the admissible products and maps them to Journey."""

    def __init__(self, text_cleaner: TextCleaner | None = None) -> None:
        """Initialize with an optional text cleaner (default boilerplate tokens otherwise)."""
        self._text_cleaner = text_cleaner or TextCleaner()

    def normalize(
        self,
        raw_journeys: Iterable[Any],
        admissible_products: frozenset[TransportProduct],
        policy: AdmissibilityPolicy = AdmissibilityPolicy.ALL_LEGS,
    ) -> list[Journey]:
        """Filter and convert raw journey records, preserving input order.

        Records without legs, with unparseable legs, or failing the admissibility
        policy are dropped silently.
        """
        journeys = []
        for raw in raw_journeys:
            journey = self._parse_journey(raw)
            if journey is None:
                continue
            if not self._is_admissible(journey, admissible_products, policy):
                continue
            journeys.append(journey)

        logger.debug(f"Kept {len(journeys)} journeys after filtering")
        return journeys

    @staticmethod
    def _leg_is_admissible(leg: Leg, admissible_products: frozenset[TransportProduct]) -> bool:
        """Check the vehicle rule for a single non-walking leg."""
        return leg.line is not None and leg.line.product in admissible_products

    def _is_admissible(
        self,
        journey: Journey,
        admissible_products: frozenset[TransportProduct],
        policy: AdmissibilityPolicy,
    ) -> bool:
        """Apply the admissibility policy to a parsed journey."""
        if all(leg.walking for leg in journey.legs):
            return False

        if not all(
            leg.walking or self._leg_is_admissible(leg, admissible_products)
            for leg in journey.legs
        ):
            return False

        if policy is AdmissibilityPolicy.STRICT_FIRST_LEG:
            first = journey.legs[0]
            if first.walking or not self._leg_is_admissible(first, admissible_products):
                return False

        return True

    def _parse_journey(self, raw: Any) -> Journey | None:
        """Parse a raw journey, or return None if required fields are missing."""
        if not isinstance(raw, dict):
            return None

        raw_legs = raw.get("legs")
        if not isinstance(raw_legs, list) or not raw_legs:
            return None

        legs = []
        for raw_leg in raw_legs:
            leg = self._parse_leg(raw_leg)
            if leg is None:
                logger.debug(f"Dropping journey with unparseable leg: {raw_leg!r:.200}")
                return None
            legs.append(leg)

        return Journey(legs=tuple(legs))

    def _parse_leg(self, raw_leg: Any) -> Leg | None:
        """Parse a raw leg into a Leg."""
        if not isinstance(raw_leg, dict):
            return None

        departure = _parse_time(raw_leg.get("departure") or raw_leg.get("plannedDeparture"))
        arrival = _parse_time(raw_leg.get("arrival") or raw_leg.get("plannedArrival"))
        if departure is None or arrival is None:
            return None

        direction = raw_leg.get("direction")
        if not isinstance(direction, str):
            direction = None

        return Leg(
            departure=departure,
            arrival=arrival,
            line=_parse_line(raw_leg.get("line"), direction),
            platform=_parse_platform(raw_leg),
            delay_seconds=_parse_delay(raw_leg.get("departureDelay")),
            direction=self._text_cleaner.clean(direction),
            destination=_parse_destination(raw_leg.get("destination")),
            walking=bool(raw_leg.get("walking")),
        )


def _parse_time(value: Any) -> datetime | None:
    """Parse ISO 8601 time string."""
    if not isinstance(value, str) or not value:
        return None

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_line(raw_line: Any, direction: str | None) -> Line | None:
    if not isinstance(raw_line, dict):
        return None
    name = raw_line.get("name")
    return Line(
        name=clean_line_name(name if isinstance(name, str) else None),
        product=TransportProduct.parse(raw_line.get("product")),
        direction=direction,
    )


def _parse_platform(raw_leg: dict[str, Any]) -> str | None:
    platform = raw_leg.get("departurePlatform") or raw_leg.get("platform")
    if platform is None or platform == "":
        return None
    return str(platform).strip()


def _parse_delay(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return int(value)


def _parse_destination(value: Any) -> str | None:
    # HAFAS returns a stop object, simplified proxies return a plain name
    if isinstance(value, dict):
        name = value.get("name")
        return name if isinstance(name, str) else None
    if isinstance(value, str):
        return value
    return None
