"""Display adapter port."""

from typing import Protocol

from oebb_connections.domain.models.refresh_result import RefreshResult


class ConnectionDisplay(Protocol):
    """Port for rendering refresh results."""

    def render(self, route_label: str, result: RefreshResult) -> str:
        """Render a refresh result for one route."""
        ...
