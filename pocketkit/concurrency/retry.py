"""
Retry an async operation a fixed number of times with a fixed delay.

**Conceptual**: retry invokes a zero-argument async operation. When an
attempt fails it notifies the optional observer with the failure and the
1-based attempt number, waits ``delay`` seconds, and tries again. After the
last attempt it raises the last failure. With ``attempts = N`` the
operation runs at most N times and the delay happens at most N - 1 times:
there is never a wait after the final attempt.

**Failure shape**: the observer and the caller always receive an Exception.
A failure that is a bare BaseException subclass (raised by some libraries
for their own control flow) is wrapped in OperationError with the original
on ``__cause__``. The interpreter's own control-flow exceptions
(KeyboardInterrupt, SystemExit, GeneratorExit, asyncio.CancelledError) are
never retried or wrapped; they propagate at once.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from pocketkit.config.settings import RetrySettings
from pocketkit.errors import CONTROL_FLOW_EXCEPTIONS, ValidationError, normalize_failure
from pocketkit.utils.time import sleep as default_sleep

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[], Awaitable[T]]
FailureObserver = Callable[[Exception, int], None]
Sleeper = Callable[[float], Awaitable[None]]


async def retry(
    operation: Operation,
    attempts: int,
    delay: float,
    on_error: Optional[FailureObserver] = None,
    sleep: Optional[Sleeper] = None,
) -> T:
    """
    Await ``operation()`` until it succeeds or ``attempts`` runs out.

    Args:
        operation: Zero-argument callable returning an awaitable.
        attempts: Maximum number of invocations (>= 1).
        delay: Seconds to wait between attempts (>= 0).
        on_error: Optional observer called as on_error(error, attempt) after
            every failed attempt, including the last.
        sleep: Async delay function; defaults to pocketkit.utils.time.sleep.

    Returns:
        The result of the first successful attempt.

    Raises:
        ValidationError: If attempts < 1 or delay < 0 (nothing is invoked).
        Exception: The last failure once all attempts are exhausted.

    Example:
        >>> data = await retry(
        ...     lambda: fetch_data(),
        ...     attempts=3,
        ...     delay=1.0,
        ...     on_error=lambda err, n: print(f"Attempt {n} failed: {err}"),
        ... )
    """
    if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
        raise ValidationError(f"attempts must be a positive integer, got: {attempts}")
    if delay < 0:
        raise ValidationError(f"delay must be non-negative, got: {delay}")

    wait = sleep or default_sleep
    last_error: Optional[Exception] = None

    for attempt in range(1, attempts + 1):
        try:
            return await operation()
        except CONTROL_FLOW_EXCEPTIONS:
            raise
        except BaseException as exc:
            last_error = normalize_failure(exc)

        logger.debug("Attempt %d/%d failed: %r", attempt, attempts, last_error)
        if on_error is not None:
            on_error(last_error, attempt)
        if attempt < attempts:
            await wait(delay)

    raise last_error


async def retry_with_settings(
    operation: Operation,
    settings: Optional[RetrySettings] = None,
    on_error: Optional[FailureObserver] = None,
    sleep: Optional[Sleeper] = None,
) -> T:
    """retry() with attempts and delay taken from ``settings`` (RetrySettings() by default)."""
    settings = settings or RetrySettings()
    return await retry(
        operation,
        attempts=settings.attempts,
        delay=settings.delay_seconds,
        on_error=on_error,
        sleep=sleep,
    )
