"""
Time and clock abstractions, timestamps, delays and duration formatting.

This module provides a simple, testable way to obtain "now" via a clock object
rather than calling datetime.now() directly. Helpers that depend on the
current time (timestamp, create_time_elapsed, the past/future date
predicates) accept an optional Clock so tests can freeze or step time
instead of sleeping.

Units: timestamps and durations are in milliseconds (int), the delay
primitive ``sleep`` takes seconds like asyncio.sleep.
"""

import asyncio
import math
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Protocol

from pocketkit.errors import ValidationError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Clock(Protocol):
    """
    Abstract time source protocol.

    **Conceptual**: A Clock is any object that can answer the question "what time
    is it right now?" By depending on this abstraction instead of directly calling
    datetime.now(), code becomes testable and deterministic.

    **Usage**: Accept an optional Clock and call clock.now() whenever the
    current time is needed. In production pass nothing (or a RealClock); in
    tests pass a FrozenClock or a ManualClock.

    **Example**:
        clock = ManualClock(start)
        elapsed = create_time_elapsed(clock)
        clock.advance(milliseconds=500)
        elapsed()  # 500
    """

    def now(self) -> datetime:
        """
        Return the current time according to this clock.

        Returns:
            datetime object representing "now" (timezone-aware, UTC preferred).
        """
        ...


class RealClock:
    """Clock that returns the actual current system time (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """
    Clock that always returns a fixed timestamp.

    **Usage**:
        clock = FrozenClock(datetime(2015, 1, 5, tzinfo=timezone.utc))
        clock.now()  # Always 2015-01-05T00:00:00+00:00
    """

    def __init__(self, fixed_now: datetime):
        """
        Args:
            fixed_now: The datetime to return on every call to now().
                       Should be timezone-aware (UTC recommended).
        """
        self._fixed_now = fixed_now

    def now(self) -> datetime:
        return self._fixed_now


class ManualClock:
    """
    Clock that only moves when told to.

    Useful for elapsed-time tests: start it at a known instant, call
    advance(), and read deterministic differences.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime(2000, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def advance(self, milliseconds: float = 0, seconds: float = 0) -> datetime:
        """Move the clock forward and return the new "now"."""
        self._now = self._now + timedelta(seconds=seconds, milliseconds=milliseconds)
        return self._now


def get_real_clock() -> Clock:
    """Factory function to create a RealClock instance."""
    return RealClock()


def get_frozen_clock(fixed_now: datetime) -> Clock:
    """Factory function to create a FrozenClock with a given timestamp."""
    return FrozenClock(fixed_now)


def timestamp(clock: Optional[Clock] = None) -> int:
    """
    Current time as integer milliseconds since the Unix epoch.

    Args:
        clock: Time source; defaults to the real system clock.
    """
    current = (clock or RealClock()).now()
    if current.tzinfo is None:
        # Naive datetimes are local time, as datetime.timestamp() assumes
        current = current.astimezone()
    # Integer arithmetic so 1.2s reads as 1200, never 1199
    delta = current - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def to_seconds(ms: float) -> int:
    """Whole seconds in ``ms`` milliseconds, rounded down: to_seconds(1500) == 1."""
    return math.floor(ms / 1000)


def to_milliseconds(seconds: float) -> float:
    """Milliseconds in ``seconds``: to_milliseconds(0.5) == 500."""
    return seconds * 1000


async def sleep(seconds: float) -> None:
    """Suspend the current coroutine for ``seconds``."""
    await asyncio.sleep(seconds)


def create_time_elapsed(clock: Optional[Clock] = None) -> Callable[[], float]:
    """
    Start a stopwatch and return a reader for the milliseconds since creation.

    Without a clock the stopwatch uses time.monotonic(), so wall-clock
    adjustments never make the reading jump. With a clock, readings are
    differences of clock.now().

    Returns:
        Zero-argument callable returning elapsed milliseconds.
    """
    if clock is None:
        start = time.monotonic()
        return lambda: (time.monotonic() - start) * 1000

    start_ms = timestamp(clock)
    return lambda: timestamp(clock) - start_ms


_TIME_UNITS = (
    # (long name, unit in ms, short suffix)
    ("day", 86_400_000, "d"),
    ("hour", 3_600_000, "h"),
    ("minute", 60_000, "m"),
    ("second", 1_000, "s"),
)

ZERO_DURATION_LABEL = "0s"


def format_duration(ms: float, style: str = "short") -> str:
    """
    Render a millisecond duration as days, hours, minutes and seconds.

    **Functionally**:
    - Units are filled largest first; each takes the whole number of units
      that fit and the remainder flows to the next unit.
    - Zero-valued units are omitted.
    - Sub-second remainders are dropped.
    - When every unit is zero (including negative input) the result is "0s"
      in both styles.

    Examples:
        >>> format_duration(90061000)
        '1d 1h 1m 1s'
        >>> format_duration(93784000, "long")
        '1 day 2 hours 3 minutes 4 seconds'

    Args:
        ms: Duration in milliseconds.
        style: "short" for "1d 2h", "long" for "1 day 2 hours".

    Returns:
        The formatted duration.

    Raises:
        ValidationError: If style is not "short" or "long".
    """
    if style not in ("short", "long"):
        raise ValidationError(f"style must be 'short' or 'long', got: {style!r}")

    parts = []
    remaining = ms
    for unit, unit_ms, short in _TIME_UNITS:
        value = math.floor(remaining / unit_ms)
        if value > 0:
            if style == "short":
                parts.append(f"{value}{short}")
            else:
                parts.append(f"{value} {unit}{'' if value == 1 else 's'}")
            remaining %= unit_ms

    return " ".join(parts) if parts else ZERO_DURATION_LABEL
