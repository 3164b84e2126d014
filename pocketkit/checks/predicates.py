"""
Boolean predicates classifying a single value.

Every predicate is pure and deterministic except is_past_date and
is_future_date, which compare against the current time (injectable through
a Clock for tests).

Notes on Python semantics:
  - bool is a subclass of int, but is_number/is_integer reject booleans.
  - NaN is not considered a number (is_number(float("nan")) is False).
  - "List" means list or tuple; "dict" means a plain dict (or subclass).
"""

import datetime as _dt
import inspect
import math
import re
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import urlsplit

from requests.exceptions import RequestException
from requests.models import PreparedRequest

from pocketkit.utils.time import Clock, RealClock


def is_none(value: Any) -> bool:
    return value is None


def is_defined(value: Any) -> bool:
    return value is not None


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_function(value: Any) -> bool:
    """Callable that is not a class."""
    return callable(value) and not isinstance(value, type)


def is_number(value: Any) -> bool:
    """int or float, excluding bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_dict(value: Any) -> bool:
    return isinstance(value, dict)


def is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_set(value: Any) -> bool:
    return isinstance(value, (set, frozenset))


def is_date(value: Any) -> bool:
    """datetime.date or datetime.datetime instance."""
    return isinstance(value, _dt.date)


def is_regexp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_awaitable(value: Any) -> bool:
    """Coroutine, Task, Future or any object implementing __await__."""
    return inspect.isawaitable(value)


def is_error(value: Any) -> bool:
    return isinstance(value, BaseException)


def is_bytes(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def is_stream(value: Any) -> bool:
    """File-like object: anything with a callable ``read``."""
    return callable(getattr(value, "read", None))


def is_primitive(value: Any) -> bool:
    """str, bool or number (NaN excluded)."""
    return is_string(value) or is_bool(value) or is_number(value)


def is_none_or_empty(value: Any) -> bool:
    """
    True for None, a blank string, and any empty container.

    Strings count as empty when they contain only whitespace. Containers are
    lists, tuples, dicts (and other mappings), sets and bytes. Other values,
    including 0 and False, are never "empty".
    """
    if value is None:
        return True
    if is_string(value):
        return len(value.strip()) == 0
    if is_list(value) or is_mapping(value) or is_set(value) or is_bytes(value):
        return len(value) == 0
    return False


def is_empty_dict(value: Any) -> bool:
    return is_dict(value) and len(value) == 0


def is_integer(value: Any) -> bool:
    """
    Integral number: any int (not bool), or a float with no fractional part.

    is_integer(3.0) is True, matching how a float 3.0 "is" the integer 3.
    """
    if not is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


def is_float(value: Any) -> bool:
    """Number with a fractional part (infinities count as non-integral)."""
    return is_number(value) and not is_integer(value)


def is_positive(value: Any) -> bool:
    return is_number(value) and value > 0


def is_negative(value: Any) -> bool:
    return is_number(value) and value < 0


def is_url(value: Any) -> bool:
    """
    True when ``value`` is a well-formed absolute URL string.

    HTTP(S) URLs go through the same preparation requests applies before
    sending, so a missing host or malformed authority is rejected. Other
    schemes (ftp:, mailto:, file:) only need a scheme plus a host or path.
    """
    if not is_string(value) or not value.strip():
        return False
    try:
        PreparedRequest().prepare_url(value, None)
    except RequestException:
        return False

    parts = urlsplit(value)
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def _now_for(value: _dt.date, clock: Optional[Clock]) -> _dt.date:
    # Aware in the local zone; naive clock readings count as local time
    now = (clock or RealClock()).now().astimezone()
    if isinstance(value, _dt.datetime) and value.tzinfo is not None:
        return now
    # Naive datetimes and plain dates are local wall-clock values, as in
    # timestamp(), so compare them against local "now"
    local_now = now.replace(tzinfo=None)
    if not isinstance(value, _dt.datetime):
        return local_now.date()
    return local_now


def is_past_date(value: Any, clock: Optional[Clock] = None) -> bool:
    """
    True when ``value`` is a date/datetime strictly before "now".

    Plain dates compare against today's date, so today is neither past nor
    future.
    """
    return is_date(value) and value < _now_for(value, clock)


def is_future_date(value: Any, clock: Optional[Clock] = None) -> bool:
    """True when ``value`` is a date/datetime strictly after "now"."""
    return is_date(value) and value > _now_for(value, clock)
