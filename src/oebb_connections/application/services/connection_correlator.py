"""Correlation of journeys across separate fetches."""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from oebb_connections.domain.models import Connection, CorrelationKey, Journey

logger = logging.getLogger(__name__)


def as_connection(entry: Journey | Connection) -> Connection:
    """Wrap a journey as an un-enriched connection; connections pass through."""
    if isinstance(entry, Connection):
        return entry
    return Connection(journey=entry)


def correlate(
    primary: Sequence[Journey | Connection],
    secondary: Sequence[Journey],
    label: str,
    key: Callable[[Journey], CorrelationKey] = CorrelationKey.for_journey,
) -> list[Connection]:
    """Attach arrival times from a sibling fetch onto the primary connections.

    Each primary entry whose key matches a secondary journey gets that
    journey's arrival stored under label. Primary order is kept; secondary
    journeys without a match are dropped. If the secondary fetch holds several
    journeys with one key, the first one wins. A secondary match is attached
    to every primary entry sharing its key.

    Can be applied repeatedly with different labels to merge more than two
    fetches.
    """
    arrivals: dict[CorrelationKey, datetime] = {}
    for journey in secondary:
        arrivals.setdefault(key(journey), journey.arrival)

    merged = []
    matched_keys: set[CorrelationKey] = set()
    for entry in primary:
        connection = as_connection(entry)
        entry_key = key(connection.journey)
        if entry_key in arrivals:
            connection = connection.with_auxiliary_arrival(label, arrivals[entry_key])
            matched_keys.add(entry_key)
        merged.append(connection)

    dropped = len(arrivals) - len(matched_keys)
    logger.debug(
        f"Correlated '{label}': {len(matched_keys)} matched, {dropped} secondary journey(s) dropped"
    )
    return merged
