"""Iteration functions: each, map, filter and the folds.

All functions accept any iterable and walk it once, front to back, except
the ``*_right`` variants which walk a reversed copy.

Example:
    ```python
    assert map([1, 2, 3], lambda x: x * 2) == [2, 4, 6]
    assert reduce([1, 2, 3], lambda acc, x: acc + x, 0) == 6
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from lodash_typed.types import Iteratee, Predicate, Reducer

__all__ = [
    'each',
    'filter',
    'for_each',
    'for_each_right',
    'map',
    'reduce',
    'reduce_right',
]


def each[T](collection: Iterable[T], iteratee: Callable[[T], Any]) -> None:
    """Call ``iteratee`` once per element, in order. Return values are ignored."""
    for item in collection:
        iteratee(item)


for_each = each


def for_each_right[T](collection: Iterable[T], iteratee: Callable[[T], Any]) -> None:
    """Call ``iteratee`` once per element, last element first."""
    for item in reversed(list(collection)):
        iteratee(item)


def map[T, U](collection: Iterable[T], iteratee: Iteratee[T, U]) -> list[U]:  # noqa: A001
    """Return ``[iteratee(x) for x in collection]``."""
    return [iteratee(item) for item in collection]


def filter[T](collection: Iterable[T], predicate: Predicate[T]) -> list[T]:  # noqa: A001
    """Return the elements for which ``predicate`` is truthy, in order."""
    return [item for item in collection if predicate(item)]


def reduce[T, U](collection: Iterable[T], iteratee: Reducer[T, U], initial: U) -> U:
    """Left fold: ``iteratee(...iteratee(iteratee(initial, x0), x1)..., xn)``.

    Args:
        collection: Elements to fold.
        iteratee: Called as ``iteratee(accumulator, element)``.
        initial: Starting accumulator, returned as-is for empty input.

    Example:
        ```python
        assert reduce(['a', 'b'], lambda acc, s: acc + s, '>') == '>ab'
        ```
    """
    acc = initial
    for item in collection:
        acc = iteratee(acc, item)
    return acc


def reduce_right[T, U](collection: Iterable[T], iteratee: Reducer[T, U], initial: U) -> U:
    """Fold from the last element to the first."""
    return reduce(reversed(list(collection)), iteratee, initial)
