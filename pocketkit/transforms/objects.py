"""
Dict transforms: key/value remapping, deep merge, deep clone and picking.

"Plain object" in this module means a dict. deep_merge and deep_clone only
recurse into dicts (and, for cloning, lists and tuples); any other value is
treated as an opaque leaf.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple

from pocketkit.checks.predicates import is_dict
from pocketkit.errors import DuplicateKeyError


def object_map(
    obj: Dict[Any, Any],
    fn: Callable[[Any, Any], Optional[Tuple[Hashable, Any]]],
) -> Dict[Hashable, Any]:
    """
    Build a new dict from ``fn(key, value)`` for every entry of ``obj``.

    ``fn`` returns a ``(new_key, new_value)`` pair, or None to drop the entry.

    Raises:
        DuplicateKeyError: If two entries map to the same new key. Raised
            before anything is returned, so there is no partial result.

    Example:
        >>> object_map({"a": 1, "b": 2}, lambda k, v: (k.upper(), v * 10))
        {'A': 10, 'B': 20}
    """
    mapped = [entry for entry in (fn(key, value) for key, value in obj.items()) if entry is not None]

    result: Dict[Hashable, Any] = {}
    for new_key, new_value in mapped:
        if new_key in result:
            raise DuplicateKeyError(new_key)
        result[new_key] = new_value
    return result


def is_mergeable(value: Any) -> bool:
    """True for values deep_merge recurses into (dicts)."""
    return is_dict(value)


def deep_merge(target: Dict[Any, Any], source: Dict[Any, Any]) -> Dict[Any, Any]:
    """
    Recursively merge ``source`` into a copy of ``target``.

    **Rules**:
    - Keys only in target are kept; keys only in source are added.
    - When both sides hold a dict, the two dicts are merged recursively.
    - Anything else from source (lists included) replaces the target value
      wholesale.

    Neither input is mutated. Unmerged nested values are shared, not copied;
    use deep_clone on the result if full independence is needed.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}, "e": 4})
        {'a': 1, 'b': {'c': 2, 'd': 3}, 'e': 4}
    """
    output = dict(target)
    for key, source_value in source.items():
        if is_mergeable(source_value) and is_mergeable(target.get(key)):
            output[key] = deep_merge(target[key], source_value)
        else:
            output[key] = source_value
    return output


def deep_clone(value: Any) -> Any:
    """
    Recursively copy dicts, lists and tuples.

    Every other value (class instances, sets, datetimes, ...) is returned
    as-is and therefore shared with the original.
    """
    if is_dict(value):
        return {key: deep_clone(item) for key, item in value.items()}
    if isinstance(value, list):
        return [deep_clone(item) for item in value]
    if isinstance(value, tuple):
        return tuple(deep_clone(item) for item in value)
    return value


def object_pick(obj: Dict[Any, Any], keys: Iterable[Any], omit_none: bool = False) -> Dict[Any, Any]:
    """
    Sub-dict with only ``keys`` that exist in ``obj``.

    Args:
        obj: Source dict.
        keys: Keys to keep, in output order. Missing keys are skipped.
        omit_none: Also skip keys whose value is None.
    """
    picked = {}
    for key in keys:
        if key not in obj:
            continue
        if omit_none and obj[key] is None:
            continue
        picked[key] = obj[key]
    return picked


def clear_none(obj: Dict[Any, Any]) -> Dict[Any, Any]:
    """Delete None-valued keys from ``obj`` in place and return it."""
    for key in [key for key, value in obj.items() if value is None]:
        del obj[key]
    return obj


def has_own_key(obj: Any, key: Any) -> bool:
    """True when ``obj`` is a dict containing ``key``; False for None."""
    if obj is None:
        return False
    return is_dict(obj) and key in obj


def object_keys(obj: Dict[Any, Any]) -> List[Any]:
    return list(obj.keys())


def object_entries(obj: Dict[Any, Any]) -> List[Tuple[Any, Any]]:
    return list(obj.items())
