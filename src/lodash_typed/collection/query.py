"""Query functions: searching, membership, counting and partitioning."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable

from lodash_typed.types import Predicate

__all__ = [
    'count_by',
    'every',
    'find',
    'find_last',
    'includes',
    'partition',
    'some',
]


def find[T](collection: Iterable[T], predicate: Predicate[T]) -> T | None:
    """Return the first element matching ``predicate``, or None.

    Stops calling ``predicate`` at the first match.
    """
    for item in collection:
        if predicate(item):
            return item
    return None


def find_last[T](collection: Iterable[T], predicate: Predicate[T]) -> T | None:
    """Return the last element matching ``predicate``, or None."""
    return find(reversed(list(collection)), predicate)


def includes[T](collection: Iterable[T], value: T) -> bool:
    """True if any element compares equal to ``value``."""
    return any(item == value for item in collection)


def every[T](collection: Iterable[T], predicate: Predicate[T]) -> bool:
    """True if ``predicate`` holds for every element. Vacuously true when empty."""
    return all(predicate(item) for item in collection)


def some[T](collection: Iterable[T], predicate: Predicate[T]) -> bool:
    """True if ``predicate`` holds for at least one element."""
    return any(predicate(item) for item in collection)


def count_by[T, K: Hashable](collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, int]:
    """Count elements by the key ``iteratee`` returns.

    Keys appear in the order they were first produced.

    Example:
        ```python
        assert count_by([1, 2, 3, 4], lambda x: x % 2 == 0) == {False: 2, True: 2}
        ```
    """
    counts: dict[K, int] = {}
    for item in collection:
        key = iteratee(item)
        counts[key] = counts.get(key, 0) + 1
    return counts


def partition[T](collection: Iterable[T], predicate: Predicate[T]) -> tuple[list[T], list[T]]:
    """Split into ``(matching, not_matching)``, each in original order."""
    truthy: list[T] = []
    falsy: list[T] = []
    for item in collection:
        (truthy if predicate(item) else falsy).append(item)
    return truthy, falsy
