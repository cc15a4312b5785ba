"""
Async Utilities Module

Provides small asyncio primitives shared by the service: a plain delay
and a deadline race around any awaitable.
"""
import asyncio
from typing import TypeVar, Awaitable


T = TypeVar('T')


async def wait(seconds: float) -> None:
    """Resolve after `seconds` seconds."""
    await asyncio.sleep(seconds)


async def timeout(seconds: float, awaitable: Awaitable[T]) -> T:
    """
    Race an awaitable against a deadline.

    Args:
        seconds: Deadline in seconds.
        awaitable: Coroutine, task or future to wait for.

    Returns:
        The awaitable's result if it completes first.

    Raises:
        asyncio.TimeoutError: If the deadline elapses first. The pending
            awaitable is cancelled.
        Any exception raised by the awaitable itself.

    Example:
        >>> result = await timeout(2.0, fetch_subtitles(url))
    """
    return await asyncio.wait_for(awaitable, timeout=seconds)
