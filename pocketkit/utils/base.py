"""Base helpers used by the predicate and guard modules."""

import datetime as _dt
import re
from collections.abc import Awaitable

from pocketkit.errors import PocketkitAssertionError


def assert_that(condition: bool, message: str) -> None:
    """
    Raise PocketkitAssertionError with ``message`` when ``condition`` is false.

    Unlike the ``assert`` statement this is never stripped by ``python -O``.
    """
    if not condition:
        raise PocketkitAssertionError(message)


def get_type_name(value) -> str:
    """
    Return a short lowercase name for the kind of ``value``.

    Built-in kinds get stable names ("null", "boolean", "number", "string",
    "list", "dict", "date", ...); anything else falls back to its class name
    in lower case.

    Examples:
        >>> get_type_name(None)
        'null'
        >>> get_type_name([1, 2])
        'list'
        >>> get_type_name(ValueError("x"))
        'valueerror'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if isinstance(value, (list, tuple)):
        return "list"
    if isinstance(value, dict):
        return "dict"
    if isinstance(value, (set, frozenset)):
        return "set"
    if isinstance(value, (_dt.date, _dt.datetime)):
        return "date"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, Awaitable):
        return "awaitable"
    if callable(value) and not isinstance(value, type):
        return "function"
    return type(value).__name__.lower()


def noop(*args, **kwargs) -> None:
    """Accept anything, do nothing."""
    return None
