"""
Tests for pocketkit/functional/compose.py
"""

import pytest

from pocketkit.errors import ValidationError
from pocketkit.functional.compose import (
    compose,
    curry,
    memoization_key,
    memoize,
    once,
    pipe,
)


def add_one(x):
    return x + 1


def double(x):
    return x * 2


def square(x):
    return x * x


def test_pipe_runs_left_to_right():
    """((3 + 1) * 2)^2 = 64."""
    assert pipe(add_one, double, square)(3) == 64


def test_compose_runs_right_to_left():
    assert compose(square, double, add_one)(3) == 64


def test_empty_pipeline_is_identity():
    assert pipe()(5) == 5
    assert compose()("x") == "x"


def test_memoize_caches_by_arguments():
    calls = []

    @memoize
    def slow_square(n):
        calls.append(n)
        return n * n

    assert slow_square(4) == 16
    assert slow_square(4) == 16
    assert slow_square(5) == 25
    assert calls == [4, 5]
    assert len(slow_square.cache) == 2
    assert slow_square.__name__ == "slow_square"


def test_memoize_treats_identically_serialized_arguments_as_one_entry():
    """A tuple and a list with the same items serialize the same way."""
    calls = []

    @memoize
    def total(values):
        calls.append(values)
        return sum(values)

    assert total((1, 2)) == 3
    assert total([1, 2]) == 3
    assert len(calls) == 1


def test_memoization_key_includes_kwargs_in_sorted_order():
    assert memoization_key((1,), {"b": 2, "a": 1}) == memoization_key((1,), {"a": 1, "b": 2})
    assert memoization_key((1,), {}) != memoization_key((1.0,), {})


def test_memoize_handles_unserializable_arguments():
    """Values JSON cannot encode fall back to their repr."""
    @memoize
    def ident(value):
        return value

    marker = object()
    assert ident(marker) is marker
    assert ident(marker) is marker
    assert len(ident.cache) == 1


def test_once_runs_only_first_call():
    calls = []

    @once
    def init(value):
        calls.append(value)
        return {"ready": value}

    first = init(1)
    second = init(2)

    assert first == {"ready": 1}
    assert second is first
    assert calls == [1]


def test_curry_accepts_arguments_in_steps():
    add = curry(lambda a, b, c: a + b + c)

    assert add(1, 2, 3) == 6
    assert add(1)(2, 3) == 6
    assert add(1, 2)(3) == 6
    assert add(1)(2)(3) == 6


def test_curry_ignores_defaulted_parameters_unless_arity_given():
    def scale(value, factor=2):
        return value * factor

    assert curry(scale)(5) == 10
    assert curry(scale, arity=2)(5)(3) == 15


def test_curry_rejects_negative_arity():
    with pytest.raises(ValidationError):
        curry(add_one, arity=-1)
