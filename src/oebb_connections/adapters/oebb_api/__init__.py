"""ÖBB journey API adapters."""

from oebb_connections.adapters.oebb_api.oebb_journey_repository import OebbJourneyRepository

__all__ = ["OebbJourneyRepository"]
