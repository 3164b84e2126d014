"""
pocketkit – small, independent helper functions.

Type predicates and guards, list/dict/string transforms, math and
statistics helpers, async helpers (bounded concurrency, retry, timeout),
functional composition and time formatting. Import helpers from their
modules directly, e.g. ``from pocketkit.concurrency.pool import async_pool``.
"""

__version__ = "0.1.0"
