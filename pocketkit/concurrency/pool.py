"""
Bounded-concurrency mapping of an async worker over a list of items.

**Conceptual**: async_pool runs ``worker(item, index)`` for every item while
keeping at most ``concurrency`` invocations in flight, and returns results
in input order regardless of which invocation finished first. It is the
usual shape for calling a rate-limited service for many inputs.

**Algorithm**: one cursor, owned by the call, points at the next unclaimed
index. ``min(concurrency, len(items))`` logical workers each loop: claim the
cursor's index, advance it, await the worker, store the result in that
index's slot. Claiming and advancing happen with no ``await`` in between, so
under the single-threaded event loop no two logical workers can claim the
same index and no lock is needed.

**Failure policy**: when an invocation raises, no logical worker claims
further items, every invocation already in flight is allowed to finish,
and then the first failure (in completion order) is raised. Nothing is
cancelled and no partial results are returned. This holds for any failure,
including bare BaseException subclasses; only the interpreter's control flow
(KeyboardInterrupt, SystemExit, GeneratorExit, CancelledError) propagates
at once.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from pocketkit.config.settings import PoolSettings
from pocketkit.errors import CONTROL_FLOW_EXCEPTIONS

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Worker = Callable[[T, int], Awaitable[R]]


class _Run:
    """Cursor, result slots and first failure for a single async_pool call."""

    def __init__(self, items: Sequence):
        self.items = items
        self.results: List = [None] * len(items)
        self.cursor = 0
        self.failure: Optional[BaseException] = None

    def claim(self) -> Optional[int]:
        """Return the next unclaimed index, or None when done or failed."""
        if self.failure is not None or self.cursor >= len(self.items):
            return None
        index = self.cursor
        self.cursor += 1
        return index


async def _drain(run: _Run, worker: Worker) -> None:
    while True:
        index = run.claim()
        if index is None:
            return
        try:
            run.results[index] = await worker(run.items[index], index)
        except CONTROL_FLOW_EXCEPTIONS:
            raise
        except BaseException as exc:
            logger.debug("Worker failed on item %d: %r", index, exc)
            if run.failure is None:
                run.failure = exc
            return


async def async_pool(
    concurrency: Optional[int],
    items: Sequence[T],
    worker: Worker,
    settings: Optional[PoolSettings] = None,
) -> List[R]:
    """
    Map ``worker`` over ``items`` with at most ``concurrency`` calls in flight.

    **Functionally**:
    - ``result[i]`` is the awaited value of ``worker(items[i], i)``.
    - With concurrency >= len(items) every item starts immediately, the
      same as gathering all calls without a limit.
    - concurrency <= 0 or an empty items list returns [] without calling
      the worker.

    Args:
        concurrency: Maximum simultaneous worker invocations. None means
            use ``settings.concurrency`` (PoolSettings() when no settings).
        items: Inputs; positions are significant.
        worker: Async callable taking (item, index).
        settings: Defaults used when concurrency is None.

    Returns:
        Results aligned with ``items``.

    Raises:
        BaseException: The first failure raised by a worker invocation, after
            all in-flight invocations have settled.

    Example:
        >>> async def fetch(url, i):
        ...     return await client.get(url)
        >>> pages = await async_pool(2, urls, fetch)
    """
    if concurrency is None:
        concurrency = (settings or PoolSettings()).concurrency

    items = list(items)
    if concurrency <= 0 or not items:
        return []

    run = _Run(items)
    slots = min(concurrency, len(items))
    logger.debug("Starting pool: %d items, %d logical workers", len(items), slots)

    # _drain only raises control-flow exceptions, so gather waits for every
    # logical worker
    await asyncio.gather(*(_drain(run, worker) for _ in range(slots)))

    if run.failure is not None:
        raise run.failure
    return run.results


async def async_sequential(items: Sequence[T], worker: Worker) -> List[R]:
    """
    Await ``worker(item, index)`` for each item strictly one after another.

    Unlike async_pool(1, ...) this is a plain loop: the first failure
    propagates immediately since nothing else is in flight.
    """
    results = []
    for index, item in enumerate(items):
        results.append(await worker(item, index))
    return results
