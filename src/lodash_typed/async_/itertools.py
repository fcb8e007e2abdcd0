"""Async execution helpers shared by the async functions and AsyncChain.

Fan-out runs on an anyio task group; an optional aiologic.CapacityLimiter
bounds how many calls are in flight. Results always come back in input
order, regardless of completion order.

Example:
    ```python
    async def fetch(item_id: int) -> dict:
        ...

    async def example():
        result = await execute_with_concurrency([1, 2, 3], fetch, 2)
        rows = result.unwrap()
    ```
"""

from __future__ import annotations

import contextlib
import inspect
from collections.abc import Awaitable, Callable, Iterable, Iterator
from typing import Any

import aiologic
import anyio

from lodash_typed.errors import InvalidInput, InvalidInputError
from lodash_typed.result import Err, Ok, Result

__all__ = [
    'execute_parallel',
    'execute_sequential',
    'execute_with_concurrency',
    'resolve',
    'run_ordered',
    'run_sequential',
]


async def resolve[R](value: Awaitable[R] | R) -> R:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


@contextlib.contextmanager
def _reraise_single_failure() -> Iterator[None]:
    """Surface a lone task failure as itself rather than an ExceptionGroup."""
    try:
        yield
    except BaseExceptionGroup as group:
        if len(group.exceptions) == 1:
            raise group.exceptions[0] from None
        raise


async def run_ordered[T, R](
    operation: Callable[[T], Awaitable[R] | R],
    items: Iterable[T],
    *,
    limit: int | None = None,
) -> list[R]:
    """Run ``operation`` over every item concurrently, keeping input order.

    Args:
        operation: Called once per item; may return an awaitable.
        items: Items to process. Materialized into a list up front.
        limit: Maximum number of calls in flight. None means unlimited.

    Returns:
        One result per item, in the order the items were given.

    Raises:
        InvalidInputError: If ``limit`` is below 1.
    """
    if limit is not None and limit < 1:
        raise InvalidInputError('Concurrency limit must be greater than 0')
    item_list = list(items)
    results: list[Any] = [None] * len(item_list)
    limiter = aiologic.CapacityLimiter(limit) if limit is not None else None

    async def run_one(i: int, item: T) -> None:
        if limiter is None:
            results[i] = await resolve(operation(item))
            return
        async with limiter:
            results[i] = await resolve(operation(item))

    with _reraise_single_failure():
        async with anyio.create_task_group() as tg:
            for i, item in enumerate(item_list):
                tg.start_soon(run_one, i, item)

    return results


async def run_sequential[T, R](
    operation: Callable[[T], Awaitable[R] | R],
    items: Iterable[T],
) -> list[R]:
    """Run ``operation`` over each item one at a time, in order."""
    results: list[R] = []
    for item in items:
        results.append(await resolve(operation(item)))
    return results


async def execute_parallel[T, R](
    items: Iterable[T],
    operation: Callable[[T], Awaitable[R] | R],
) -> Result[list[R], InvalidInput]:
    """Run ``operation`` over all items at once.

    Example:
        ```python
        async def double(n: int) -> int:
            return n * 2

        async def example():
            assert await execute_parallel([1, 2, 3], double) == Ok([2, 4, 6])
        ```
    """
    return Ok(await run_ordered(operation, items))


async def execute_sequential[T, R](
    items: Iterable[T],
    operation: Callable[[T], Awaitable[R] | R],
) -> Result[list[R], InvalidInput]:
    """Run ``operation`` over the items one after another."""
    return Ok(await run_sequential(operation, items))


async def execute_with_concurrency[T, R](
    items: Iterable[T],
    operation: Callable[[T], Awaitable[R] | R],
    concurrency: int,
) -> Result[list[R], InvalidInput]:
    """Run ``operation`` with at most ``concurrency`` calls in flight.

    Args:
        items: Items to process.
        operation: Called once per item; may return an awaitable.
        concurrency: Maximum simultaneous calls. Must be at least 1.

    Returns:
        Ok(results in input order), or Err(InvalidInput) when
        ``concurrency`` is below 1.
    """
    if concurrency < 1:
        return Err(InvalidInput('Concurrency must be greater than 0'))
    return Ok(await run_ordered(operation, items, limit=concurrency))
