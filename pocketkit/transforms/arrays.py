"""
List transforms: grouping, de-duplication, chunking, zipping, counting,
flattening, partitioning, union and shuffling.

Inputs are never mutated; every function returns new lists. Functions that
need hashable keys (uniq, union, frequency) say so.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from pocketkit.errors import ValidationError

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Bucket ``items`` by ``key(item)``.

    Groups appear in first-seen key order and keep the original relative
    order of their members.

    Example:
        >>> group_by([{"age": 30, "name": "a"}, {"age": 25, "name": "b"},
        ...           {"age": 30, "name": "c"}], key=lambda p: p["age"])
        {30: [{'age': 30, 'name': 'a'}, {'age': 30, 'name': 'c'}], 25: [{'age': 25, 'name': 'b'}]}
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def uniq(items: Iterable[T], by: Optional[Callable[[T], Hashable]] = None) -> List[T]:
    """
    Drop repeated items, keeping the first occurrence.

    Args:
        items: Values to de-duplicate (must be hashable when ``by`` is None).
        by: Optional key function; items with equal keys count as duplicates.
    """
    seen = set()
    result = []
    for item in items:
        marker = by(item) if by is not None else item
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """
    Split ``items`` into consecutive lists of ``size``; the last may be shorter.

    chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]] and chunk([], 2) == [].

    Raises:
        ValidationError: If size is less than 1.
    """
    if size < 1:
        raise ValidationError(f"size must be a positive integer, got: {size}")
    items = list(items)
    return [items[i:i + size] for i in range(0, len(items), size)]


def zip_longest_lists(*lists: Sequence[Any]) -> List[List[Any]]:
    """
    Transpose ``lists`` into rows, padding shorter inputs with None.

    zip_longest_lists([1, 2], ["a"]) == [[1, "a"], [2, None]].
    """
    if not lists:
        return []
    longest = max(len(values) for values in lists)
    return [
        [values[i] if i < len(values) else None for values in lists]
        for i in range(longest)
    ]


def frequency(items: Iterable[T], key: Callable[[T], Hashable] = str) -> Dict[Hashable, int]:
    """
    Count occurrences of ``key(item)``; keys default to str(item).

    frequency([1, "1", 2]) == {"1": 2, "2": 1}.
    """
    counts: Dict[Hashable, int] = {}
    for item in items:
        marker = key(item)
        counts[marker] = counts.get(marker, 0) + 1
    return counts


def flatten_deep(items: Iterable[Any]) -> List[Any]:
    """Recursively flatten nested lists and tuples into one flat list."""
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(flatten_deep(item))
        else:
            flat.append(item)
    return flat


def take(items: Sequence[T], size: int) -> List[T]:
    """First ``size`` items (all of them when there are fewer)."""
    return list(items[:max(size, 0)])


def partition(items: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    """Split into (items passing predicate, items failing it), order preserved."""
    passed, failed = [], []
    for item in items:
        (passed if predicate(item) else failed).append(item)
    return passed, failed


def union(*lists: Iterable[T]) -> List[T]:
    """Distinct items across all inputs, in first-occurrence order."""
    return uniq(item for values in lists for item in values)


def shuffle(items: Sequence[T], seed: Optional[int] = None) -> List[T]:
    """
    Return a uniformly random permutation of ``items``.

    **Algorithm**: Fisher–Yates. Walk the copy from the last index down,
    swapping position i with a uniformly chosen position j in [0, i]. Each of
    the n! orderings is equally likely.

    The input sequence is left untouched.

    Args:
        items: Values to shuffle.
        seed: Random seed for reproducibility (None for random).

    Returns:
        A new list with the same elements in random order.
    """
    result = list(items)
    rng = np.random.default_rng(seed)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        result[i], result[j] = result[j], result[i]
    return result
