"""Periodic refresh loop with a cooldown guard."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oebb_connections.domain.models import RefreshRequest, RefreshResult
    from oebb_connections.domain.ports import RefreshRunner

logger = logging.getLogger(__name__)


class RefreshPoller:
    """Refreshes one route periodically and on demand.

    At most one refresh is in flight at a time, and a new one is refused until
    cooldown_seconds have passed since the previous one started.
    """

    def __init__(
        self,
        runner: RefreshRunner,
        request: RefreshRequest,
        on_result: Callable[[RefreshResult], None],
        interval_seconds: float = 180,
        cooldown_seconds: float = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the poller.

        Args:
            runner: Runs a refresh cycle.
            request: The refresh request issued on every cycle.
            on_result: Called with each completed result.
            interval_seconds: Pause between automatic refreshes.
            cooldown_seconds: Minimum gap between the starts of two refreshes.
            clock: Monotonic time source in seconds.
        """
        self.runner = runner
        self.request = request
        self.on_result = on_result
        self.interval_seconds = interval_seconds
        self.cooldown_seconds = cooldown_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        self._last_started: float | None = None
        self._task: asyncio.Task | None = None

    def _in_cooldown(self) -> bool:
        if self._last_started is None:
            return False
        return self._clock() - self._last_started < self.cooldown_seconds

    async def refresh_now(self) -> RefreshResult | None:
        """Run a refresh unless one is in flight or the cooldown has not passed.

        Returns:
            The refresh result, or None if the trigger was ignored.
        """
        if self._lock.locked():
            logger.info("Refresh already in progress, ignoring trigger")
            return None
        if self._in_cooldown():
            logger.info("Refresh cooldown active, ignoring trigger")
            return None

        async with self._lock:
            self._last_started = self._clock()
            result = await self.runner.run_refresh(self.request)

        self.on_result(result)
        return result

    async def start(self) -> None:
        """Start the polling task."""
        if self._task is not None and not self._task.done():
            logger.warning("Refresh poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started refresh poller for route {self.request.route_key}")

    async def stop(self) -> None:
        """Stop the polling task."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Refresh poller cancelled")
            logger.info("Stopped refresh poller")

    async def wait(self) -> None:
        """Wait until the polling task ends."""
        if self._task is not None:
            await self._task

    async def _refresh_with_error_handling(self) -> None:
        try:
            await self.refresh_now()
        except Exception as e:
            # Keep polling; the next cycle starts a fresh pipeline run
            logger.error(f"Error in refresh loop (will retry): {e}", exc_info=True)

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        await self._refresh_with_error_handling()

        try:
            while True:
                await asyncio.sleep(max(self.interval_seconds, self.cooldown_seconds))
                await self._refresh_with_error_handling()
        except asyncio.CancelledError:
            logger.info("Refresh poller cancelled")
            raise
