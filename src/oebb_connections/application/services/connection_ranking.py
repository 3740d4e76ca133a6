"""Ranking and selection of connections."""

from collections.abc import Sequence

from oebb_connections.domain.models import Connection


def select(connections: Sequence[Connection], limit: int) -> list[Connection]:
    """Return the earliest connections by departure, at most limit of them.

    The sort is stable, so connections departing at the same instant keep
    their input order.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return sorted(connections, key=lambda c: c.departure)[:limit]
