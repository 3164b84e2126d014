"""
Guard combinators.

A guard is any ``Callable[[Any], bool]``. The builders here (is_list_of,
has_key, is_one_of, ...) return new guards so checks can be composed::

    is_point = is_tuple_of(is_number, is_number)
    is_path = is_list_of(is_point)
    assert_type(value, is_path)
"""

from typing import Any, Callable, Iterable

from pocketkit.checks.predicates import is_list, is_string
from pocketkit.errors import TypeGuardError
from pocketkit.utils.base import get_type_name

Guard = Callable[[Any], bool]


def not_none(value: Any) -> bool:
    return value is not None


def is_truthy(value: Any) -> bool:
    return bool(value)


def is_non_empty_string(value: Any) -> bool:
    """String with at least one non-whitespace character."""
    return is_string(value) and len(value.strip()) > 0


def is_non_empty_list(value: Any) -> bool:
    return is_list(value) and len(value) > 0


def is_record(value: Any) -> bool:
    """A dict (the Python counterpart of a plain record object)."""
    return isinstance(value, dict)


def is_list_of(guard: Guard) -> Guard:
    """Guard accepting lists/tuples whose every element passes ``guard``."""
    return lambda value: is_list(value) and all(guard(item) for item in value)


def has_key(key: Any) -> Guard:
    """Guard accepting dicts that contain ``key``."""
    return lambda value: is_record(value) and key in value


def is_one_of(values: Iterable[Any]) -> Guard:
    """Guard accepting values equal to one of ``values``."""
    allowed = list(values)
    return lambda value: value in allowed


def is_tuple_of(*guards: Guard) -> Guard:
    """Guard accepting sequences of exactly len(guards) items, item i passing guard i."""

    def check(value: Any) -> bool:
        return (
            is_list(value)
            and len(value) == len(guards)
            and all(guard(item) for guard, item in zip(guards, value))
        )

    return check


def is_instance_of(cls: type) -> Guard:
    return lambda value: isinstance(value, cls)


def is_union(*guards: Guard) -> Guard:
    """Guard accepting values that pass at least one of ``guards``."""
    return lambda value: any(guard(value) for guard in guards)


def is_literal(expected: Any) -> Guard:
    return lambda value: value == expected and type(value) is type(expected)


def is_optional(guard: Guard) -> Guard:
    """Guard accepting None or anything ``guard`` accepts."""
    return lambda value: value is None or guard(value)


def assert_type(value: Any, guard: Guard) -> None:
    """
    Raise TypeGuardError unless ``guard(value)`` is true.

    The message names the detected type of the offending value, e.g.
    "Expected string to satisfy type guard".
    """
    if not guard(value):
        raise TypeGuardError(f"Expected {get_type_name(value)} to satisfy type guard")
