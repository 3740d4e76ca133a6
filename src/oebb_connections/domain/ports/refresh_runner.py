"""Refresh runner port."""

from typing import Protocol

from oebb_connections.domain.models.refresh_request import RefreshRequest
from oebb_connections.domain.models.refresh_result import RefreshResult


class RefreshRunner(Protocol):
    """Port for running one refresh cycle."""

    async def run_refresh(self, request: RefreshRequest) -> RefreshResult:
        """Refresh connections for the requested route."""
        ...
