"""Tests for the query functions."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from lodash_typed.collection import count_by, every, find, find_last, includes, partition, some

from tests.strategies import int_lists, int_predicates, key_functions


class TestFind:
    """Tests for find and find_last."""

    def test_find_first_match(self) -> None:
        assert find([1, 4, 6, 7], lambda x: x % 2 == 0) == 4

    def test_find_no_match(self) -> None:
        assert find([1, 3], lambda x: x > 5) is None

    def test_find_stops_at_first_match(self) -> None:
        calls: list[int] = []

        def check(x: int) -> bool:
            calls.append(x)
            return x == 2

        find([1, 2, 3, 4], check)
        assert calls == [1, 2]

    def test_find_last(self) -> None:
        assert find_last([1, 4, 6, 7], lambda x: x % 2 == 0) == 6
        assert find_last([], lambda x: True) is None


class TestPredicates:
    """Tests for includes, every and some."""

    def test_includes(self) -> None:
        assert includes([1, 2, 3], 2)
        assert not includes(['a'], 'b')

    def test_every(self) -> None:
        assert every([2, 4], lambda x: x % 2 == 0)
        assert not every([2, 3], lambda x: x % 2 == 0)

    def test_every_empty_is_true(self) -> None:
        assert every([], lambda x: False)

    def test_some(self) -> None:
        assert some([1, 2], lambda x: x > 1)
        assert not some([1, 2], lambda x: x > 2)

    def test_some_empty_is_false(self) -> None:
        assert not some([], lambda x: True)


class TestCountByPartition:
    """Tests for count_by and partition."""

    def test_count_by(self) -> None:
        assert count_by(['apple', 'avocado', 'banana'], lambda s: s[0]) == {'a': 2, 'b': 1}

    def test_count_by_key_order_is_first_seen(self) -> None:
        assert list(count_by([3, 1, 3, 2], lambda x: x)) == [3, 1, 2]

    def test_partition(self) -> None:
        assert partition([1, 2, 3, 4, 5], lambda x: x > 2) == ([3, 4, 5], [1, 2])

    def test_partition_empty(self) -> None:
        assert partition([], lambda x: True) == ([], [])


# --- Hypothesis Property Tests ---


@pytest.mark.hypothesis_property
@given(items=int_lists, predicate=int_predicates)
def test_property_partition_splits_everything(items: list[int], predicate: Any) -> None:
    """Property: partition halves rejoin to a permutation of the input, each half ordered."""
    truthy, falsy = partition(items, predicate)
    assert truthy == [x for x in items if predicate(x)]
    assert falsy == [x for x in items if not predicate(x)]


@pytest.mark.hypothesis_property
@given(items=int_lists, key=key_functions)
def test_property_count_by_totals(items: list[int], key: Any) -> None:
    """Property: count_by counts sum to the input length."""
    assert sum(count_by(items, key).values()) == len(items)


@pytest.mark.hypothesis_property
@given(items=int_lists, predicate=int_predicates)
def test_property_every_some_duality(items: list[int], predicate: Any) -> None:
    """Property: every(p) is the negation of some(not p)."""
    assert every(items, predicate) == (not some(items, lambda x: not predicate(x)))
