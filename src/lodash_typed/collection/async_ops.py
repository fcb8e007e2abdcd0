"""Async counterparts of the collection functions.

``map_async``, ``filter_async`` and ``for_each_async`` fan out on an anyio
task group and accept an optional ``limit`` on calls in flight. The folds and
searches await one element at a time; the searches stop at the first element
that decides the answer.

Callables may return awaitables or plain values.

Example:
    ```python
    async def lookup(user_id: int) -> str:
        ...

    async def example():
        names = await map_async([1, 2, 3], lookup, limit=2)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from lodash_typed.async_.itertools import resolve, run_ordered
from lodash_typed.types import AsyncIteratee, AsyncPredicate, AsyncReducer

__all__ = [
    'every_async',
    'filter_async',
    'find_async',
    'for_each_async',
    'map_async',
    'reduce_async',
    'some_async',
]


async def map_async[T, U](
    collection: Iterable[T],
    iteratee: AsyncIteratee[T, U],
    *,
    limit: int | None = None,
) -> list[U]:
    """Apply ``iteratee`` concurrently; results come back in input order.

    Args:
        collection: Elements to map.
        iteratee: Called once per element.
        limit: Maximum calls in flight. None means unlimited.

    Raises:
        InvalidInputError: If ``limit`` is below 1.
    """
    return await run_ordered(iteratee, collection, limit=limit)


async def filter_async[T](
    collection: Iterable[T],
    predicate: AsyncPredicate[T],
    *,
    limit: int | None = None,
) -> list[T]:
    """Evaluate ``predicate`` concurrently and keep matching elements in order."""
    items = list(collection)
    keep = await run_ordered(predicate, items, limit=limit)
    return [item for item, flag in zip(items, keep, strict=True) if flag]


async def for_each_async[T](
    collection: Iterable[T],
    iteratee: Callable[[T], Awaitable[Any] | Any],
    *,
    limit: int | None = None,
) -> None:
    """Run ``iteratee`` concurrently for its side effects."""
    await run_ordered(iteratee, collection, limit=limit)


async def reduce_async[T, U](
    collection: Iterable[T],
    iteratee: AsyncReducer[T, U],
    initial: U,
) -> U:
    """Left fold, awaiting each step before the next."""
    acc = initial
    for item in collection:
        acc = await resolve(iteratee(acc, item))
    return acc


async def find_async[T](
    collection: Iterable[T],
    predicate: AsyncPredicate[T],
) -> T | None:
    """Return the first element whose awaited predicate is truthy, or None."""
    for item in collection:
        if await resolve(predicate(item)):
            return item
    return None


async def every_async[T](
    collection: Iterable[T],
    predicate: AsyncPredicate[T],
) -> bool:
    """True if every awaited predicate is truthy. Stops at the first falsy one."""
    for item in collection:
        if not await resolve(predicate(item)):
            return False
    return True


async def some_async[T](
    collection: Iterable[T],
    predicate: AsyncPredicate[T],
) -> bool:
    """True if any awaited predicate is truthy. Stops at the first truthy one."""
    for item in collection:
        if await resolve(predicate(item)):
            return True
    return False
