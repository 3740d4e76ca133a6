"""Refresh result domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from .connection import Connection
from .error_details import ErrorDetails


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of one refresh cycle for a route."""

    route_key: str
    connections: list[Connection]
    updated_at: datetime
    status: Literal["online", "offline"] = "online"
    from_cache: bool = False  # True if connections are the last good result, not fresh data
    error: ErrorDetails | None = field(default=None)
