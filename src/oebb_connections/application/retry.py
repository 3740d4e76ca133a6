"""Bounded retry with a fixed delay between attempts."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from oebb_connections.domain.exceptions import RetryExhaustedError, TransientFetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    max_attempts: int,
    delay_seconds: float,
    retry_on: tuple[type[Exception], ...] = (TransientFetchError,),
    description: str = "operation",
) -> T:
    """Run operation until it succeeds or max_attempts is used up.

    Only exceptions listed in retry_on trigger another attempt; anything else
    propagates immediately.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt.
        max_attempts: Total number of tries (>= 1).
        delay_seconds: Fixed pause between attempts.
        retry_on: Exception types considered transient.
        description: Used in log messages.

    Returns:
        The first successful result.

    Raises:
        RetryExhaustedError: If every attempt failed transiently.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 1
    while True:
        try:
            return await operation()
        except retry_on as e:
            logger.warning(f"{description} failed (attempt {attempt}/{max_attempts}): {e}")
            if attempt >= max_attempts:
                raise RetryExhaustedError(max_attempts, e) from e
        logger.debug(f"Retrying {description} in {delay_seconds}s")
        await asyncio.sleep(delay_seconds)
        attempt += 1
