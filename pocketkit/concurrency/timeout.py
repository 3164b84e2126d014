"""Deadline wrapper for awaitables."""

import asyncio
from typing import Awaitable, TypeVar

from pocketkit.errors import OperationTimeoutError

T = TypeVar("T")

DEFAULT_TIMEOUT_MESSAGE = "Operation timed out"


async def with_timeout(
    awaitable: Awaitable[T],
    seconds: float,
    message: str = DEFAULT_TIMEOUT_MESSAGE,
) -> T:
    """
    Await ``awaitable`` for at most ``seconds``.

    On expiry the underlying operation is cancelled (asyncio.wait_for
    semantics) and OperationTimeoutError(message) is raised. Failures of the
    operation itself propagate unchanged.
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as exc:
        raise OperationTimeoutError(message) from exc
