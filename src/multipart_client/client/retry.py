"""Retry logic with linear backoff for async operations.

This module provides:
- retry: Run an async operation up to ``retries`` times, waiting
  ``delay * attempt`` seconds between attempts
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from multipart_client.core.config import DEFAULT_DELAY

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry(
    operation: Callable[[], Awaitable[T]],
    retries: int,
    on_error: Callable[[Exception], None] | None = None,
    delay: float = DEFAULT_DELAY,
    attempt: int = 1,
) -> T:
    """Execute an async operation with linear backoff retry.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per attempt.
        retries: Maximum number of attempts, including the first one.
        on_error: Optional callback invoked once with the final error.
        delay: Base backoff in seconds.
        attempt: Number of the first attempt (1 unless continuing a sequence).

    Returns:
        Result of the operation.

    Raises:
        The last exception if every attempt fails. Cancellation is never retried.
    """
    while True:
        try:
            return await operation()
        except Exception as e:
            if attempt >= retries:
                logger.error(f"All {retries} attempts failed: {e}")
                if on_error:
                    on_error(e)
                raise

            backoff = delay * attempt
            logger.warning(
                f"Attempt {attempt}/{retries} failed: {e}. "
                f"Retrying in {backoff:.1f}s..."
            )
            await asyncio.sleep(backoff)
            attempt += 1
