"""Callable shapes accepted by the collection functions."""

from collections.abc import Awaitable, Callable
from typing import Any

__all__ = [
    'AsyncIteratee',
    'AsyncPredicate',
    'AsyncReducer',
    'Iteratee',
    'Predicate',
    'Reducer',
]

type Iteratee[T, U] = Callable[[T], U]
"""Function applied to each element."""

type Predicate[T] = Callable[[T], Any]
"""Function whose truthiness decides whether an element matches."""

type Reducer[T, U] = Callable[[U, T], U]
"""Fold step taking the accumulator first, then the element."""

type AsyncIteratee[T, U] = Callable[[T], Awaitable[U] | U]
"""Iteratee that may return an awaitable."""

type AsyncPredicate[T] = Callable[[T], Awaitable[Any] | Any]
"""Predicate that may return an awaitable."""

type AsyncReducer[T, U] = Callable[[U, T], Awaitable[U] | U]
"""Reducer that may return an awaitable."""
