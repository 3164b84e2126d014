"""
Async helpers built on asyncio: bounded-concurrency mapping, retry with a
fixed delay, and timeouts.

All "parallelism" here is cooperative interleaving on one event loop; no
helper starts threads or processes. async_pool, async_sequential and retry
never cancel work they have started; with_timeout cancels its awaitable
when the limit expires.
"""
