"""Transform functions: grouping, keying, method invocation and sorting.

Sorting is stable: elements with equal keys keep their original relative
order in both directions.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable, Iterable
from typing import Any

__all__ = [
    'group_by',
    'invoke',
    'key_by',
    'order_by',
    'sort_by',
]


def group_by[T, K: Hashable](collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group elements by the key ``iteratee`` returns.

    Groups are ordered by first appearance of their key; each group keeps the
    elements in input order.

    Example:
        ```python
        groups = group_by(['one', 'two', 'three'], len)
        assert groups == {3: ['one', 'two'], 5: ['three']}
        ```
    """
    groups: dict[K, list[T]] = {}
    for item in collection:
        groups.setdefault(iteratee(item), []).append(item)
    return groups


def key_by[T, K: Hashable](collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, T]:
    """Index elements by key. When keys collide the later element wins."""
    return {iteratee(item): item for item in collection}


def invoke[T](collection: Iterable[T], method: Callable[[T], Any] | str, *args: Any, **kwargs: Any) -> list[Any]:
    """Call ``method`` on every element and collect the results.

    Args:
        collection: Elements to invoke on.
        method: A callable taking the element, or the name of a method to
            look up on each element.
        *args: Extra positional arguments for a named method.
        **kwargs: Extra keyword arguments for a named method.

    Example:
        ```python
        assert invoke(['a', 'b'], 'upper') == ['A', 'B']
        assert invoke(['a-b', 'c-d'], 'split', '-') == [['a', 'b'], ['c', 'd']]
        ```
    """
    if isinstance(method, str):
        caller = operator.methodcaller(method, *args, **kwargs)
        return [caller(item) for item in collection]
    return [method(item) for item in collection]


def sort_by[T](collection: Iterable[T], iteratee: Callable[[T], Any]) -> list[T]:
    """Return a new list sorted ascending by ``iteratee(element)``."""
    return sorted(collection, key=iteratee)


def order_by[T](collection: Iterable[T], iteratee: Callable[[T], Any], ascending: bool = True) -> list[T]:
    """Return a new list sorted by ``iteratee(element)`` in either direction."""
    return sorted(collection, key=iteratee, reverse=not ascending)
