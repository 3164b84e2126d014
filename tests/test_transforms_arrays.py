"""
Tests for pocketkit/transforms/arrays.py
"""

import pytest

from pocketkit.errors import ValidationError
from pocketkit.transforms.arrays import (
    chunk,
    flatten_deep,
    frequency,
    group_by,
    partition,
    shuffle,
    take,
    union,
    uniq,
    zip_longest_lists,
)


def test_group_by_preserves_order_within_groups():
    """People keyed by age: each group keeps its original relative order."""
    a = {"age": 30, "name": "a"}
    b = {"age": 25, "name": "b"}
    c = {"age": 30, "name": "c"}

    groups = group_by([a, b, c], key=lambda person: person["age"])

    assert groups == {25: [b], 30: [a, c]}
    assert groups[30][0] is a and groups[30][1] is c


def test_uniq_plain_and_by_key():
    assert uniq([1, 2, 1, 3, 2]) == [1, 2, 3]
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]
    assert uniq(words, by=lambda w: w[0]) == ["apple", "banana", "cherry"]


def test_chunk():
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunk([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]
    assert chunk([], 2) == []
    assert chunk((1, 2, 3), 5) == [[1, 2, 3]]


@pytest.mark.parametrize("size", [0, -1])
def test_chunk_rejects_non_positive_size(size):
    with pytest.raises(ValidationError):
        chunk([1, 2], size)


def test_zip_longest_lists_pads_with_none():
    assert zip_longest_lists([1, 2, 3], ["a", "b"]) == [[1, "a"], [2, "b"], [3, None]]
    assert zip_longest_lists() == []


def test_frequency():
    assert frequency(["a", "b", "a"]) == {"a": 2, "b": 1}
    # Default key is str(), so 1 and "1" share a bucket
    assert frequency([1, "1", 2]) == {"1": 2, "2": 1}
    assert frequency([1, 2, 3, 4], key=lambda n: n % 2 == 0) == {False: 2, True: 2}


def test_flatten_deep():
    assert flatten_deep([1, [2, [3, (4, [5])]], 6]) == [1, 2, 3, 4, 5, 6]
    assert flatten_deep([]) == []


def test_take():
    assert take([1, 2, 3], 2) == [1, 2]
    assert take([1, 2], 5) == [1, 2]
    assert take([1, 2], -1) == []


def test_partition():
    evens, odds = partition([1, 2, 3, 4, 5], lambda n: n % 2 == 0)
    assert evens == [2, 4]
    assert odds == [1, 3, 5]


def test_union_keeps_first_occurrence_order():
    assert union([3, 1], [1, 2], [2, 4]) == [3, 1, 2, 4]


def test_shuffle_is_permutation_and_leaves_input_untouched():
    original = [1, 2, 3, 4, 5]
    result = shuffle(original)

    assert sorted(result) == [1, 2, 3, 4, 5]
    assert original == [1, 2, 3, 4, 5]
    assert result is not original


def test_shuffle_is_reproducible_with_seed():
    items = list(range(20))
    assert shuffle(items, seed=42) == shuffle(items, seed=42)


def test_shuffle_reaches_every_permutation_of_three():
    """Over many seeds all 3! orderings appear."""
    seen = {tuple(shuffle([1, 2, 3], seed=s)) for s in range(200)}
    assert len(seen) == 6


def test_shuffle_trivial_inputs():
    assert shuffle([]) == []
    assert shuffle([7]) == [7]
