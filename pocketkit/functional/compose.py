"""
Function composition and wrapping: pipe, compose, memoize, once, curry.

**Memoization key**: memoize keys its cache by a canonical JSON
serialization of the call's arguments (positional list plus keyword dict
with sorted keys; values JSON cannot encode fall back to repr()). Two calls
whose arguments serialize identically share one cache entry even when the
arguments are not equal by ``==``; for example ``f(1)`` and ``f(1.0)``
differ ("1" vs "1.0") but ``f((1, 2))`` and ``f([1, 2])`` are the same
entry. The cache lives on the wrapper and is never evicted.
"""

import functools
import inspect
import json
from typing import Any, Callable, Optional

from pocketkit.errors import ValidationError


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Compose left to right: pipe(f, g, h)(x) == h(g(f(x))).

    With no functions the result is the identity.
    """

    def piped(value):
        for fn in fns:
            value = fn(value)
        return value

    return piped


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose right to left: compose(f, g, h)(x) == f(g(h(x)))."""
    return pipe(*reversed(fns))


def memoization_key(args: tuple, kwargs: dict) -> str:
    """Canonical serialization of a call's arguments, as used by memoize."""
    return json.dumps([list(args), kwargs], sort_keys=True, default=repr)


def memoize(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Cache ``fn``'s results by the serialized form of its arguments.

    The wrapper exposes its cache as ``wrapper.cache`` (a dict from key to
    result) so callers can inspect or clear it.
    """
    cache = {}

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        key = memoization_key(args, kwargs)
        if key in cache:
            return cache[key]
        result = fn(*args, **kwargs)
        cache[key] = result
        return result

    wrapper.cache = cache
    return wrapper


def once(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Run ``fn`` on the first call only; later calls return the first result.

    Arguments of later calls are ignored. If the first call raises, the
    function has still "run": later calls return None rather than retrying.
    """
    called = False
    result = None

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        nonlocal called, result
        if not called:
            called = True
            result = fn(*args, **kwargs)
        return result

    return wrapper


def _required_positional_count(fn: Callable[..., Any]) -> int:
    params = inspect.signature(fn).parameters.values()
    return sum(
        1
        for param in params
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        and param.default is param.empty
    )


def curry(fn: Callable[..., Any], arity: Optional[int] = None) -> Callable[..., Any]:
    """
    Allow ``fn`` to be called with its positional arguments in several steps.

    Arguments accumulate until ``arity`` of them have been supplied, then
    ``fn`` is invoked with all of them::

        add = curry(lambda a, b, c: a + b + c)
        add(1)(2)(3) == add(1, 2)(3) == add(1, 2, 3) == 6

    Args:
        fn: Function to curry.
        arity: Number of positional arguments to collect. Defaults to the
            count of required positional parameters in fn's signature.

    Raises:
        ValidationError: If arity is negative.
    """
    if arity is None:
        arity = _required_positional_count(fn)
    if arity < 0:
        raise ValidationError(f"arity must be non-negative, got: {arity}")

    def curried(*args):
        if len(args) >= arity:
            return fn(*args)
        return lambda *more: curried(*args, *more)

    return functools.wraps(fn)(curried)
