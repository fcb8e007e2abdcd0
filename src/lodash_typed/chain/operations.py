"""Deferred chain steps.

Each step is a frozen struct recorded by a chain builder call and applied
later by an executor. A chain owns its steps; they hold only a callable or a
count and carry no mutable state.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

__all__ = [
    'AsyncFilter',
    'AsyncMap',
    'AsyncOperation',
    'Filter',
    'Map',
    'Operation',
    'Reverse',
    'Skip',
    'Take',
    'apply_structural',
]


class Map(msgspec.Struct, frozen=True):
    """Replace every element with ``fn(element)``."""

    fn: Callable[[Any], Any]


class Filter(msgspec.Struct, frozen=True):
    """Keep the elements for which ``predicate`` is truthy."""

    predicate: Callable[[Any], Any]


class Take(msgspec.Struct, frozen=True, gc=False):
    """Keep the first ``n`` elements."""

    n: int


class Skip(msgspec.Struct, frozen=True, gc=False):
    """Drop the first ``n`` elements."""

    n: int


class Reverse(msgspec.Struct, frozen=True, gc=False):
    """Reverse the remaining elements."""


class AsyncMap(msgspec.Struct, frozen=True):
    """Replace every element with the awaited ``fn(element)``.

    Attributes:
        fn: Callable returning an awaitable (or a plain value).
        concurrency: None awaits one element at a time; N > 1 keeps up to N
            calls in flight.
    """

    fn: Callable[[Any], Any]
    concurrency: int | None = None


class AsyncFilter(msgspec.Struct, frozen=True):
    """Keep the elements whose awaited ``predicate`` is truthy."""

    predicate: Callable[[Any], Any]
    concurrency: int | None = None


type Operation = Map | Filter | Take | Skip | Reverse
type AsyncOperation = AsyncMap | AsyncFilter | Take | Skip | Reverse


def apply_structural(op: Take | Skip | Reverse, items: list[Any]) -> list[Any]:
    """Apply a step that only rearranges elements."""
    match op:
        case Take(n):
            return items[:n]
        case Skip(n):
            return items[n:]
        case Reverse():
            return items[::-1]
    raise TypeError(f'Not a structural chain step: {op!r}')
