"""Bounded connect retry: fixed attempt count, flat delay, last error re-raised."""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CONNECT_ATTEMPTS = 5
DEFAULT_CONNECT_DELAY = 2.0


async def connect_with_retry(
    connect: Callable[[], Awaitable[T]],
    *,
    attempts: int = DEFAULT_CONNECT_ATTEMPTS,
    delay: float = DEFAULT_CONNECT_DELAY,
    name: str = "vector store",
) -> T:
    """Await ``connect()`` up to ``attempts`` times, sleeping ``delay`` seconds between tries.

    ``connect`` must be idempotent. After the last failed attempt its exception
    propagates unchanged.
    """
    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts!r}")
    last_exc: Exception = RuntimeError("unreachable")
    for attempt in range(1, attempts + 1):
        try:
            result = await connect()
        except Exception as exc:
            last_exc = exc
        else:
            logger.info("%s connection established (attempt %d/%d)", name, attempt, attempts)
            return result
        if attempt < attempts:
            logger.warning(
                "%s connection attempt %d/%d failed (%s), retry in %.1fs",
                name, attempt, attempts, last_exc, delay,
            )
            await asyncio.sleep(delay)
    logger.error("%s connection failed after %d attempts: %s", name, attempts, last_exc)
    raise last_exc
