"""Thread-pool variants of the collection functions.

Input is split into contiguous chunks, one per worker, and each chunk is
processed on a ``concurrent.futures.ThreadPoolExecutor``. Chunk results are
reassembled in input order, so ``map_parallel`` and ``filter_parallel`` return
exactly what their sequential counterparts would.

Inputs shorter than ``Config.min_parallel_size`` run in the calling thread.
Worker count comes from ``Config.max_workers``.

Example:
    ```python
    import lodash_typed

    lodash_typed.init(max_workers=4, min_parallel_size=0)
    assert map_parallel(range(10), lambda x: x * x) == [x * x for x in range(10)]
    ```
"""

from __future__ import annotations

import functools
import itertools
import math
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from lodash_typed._config import get_config
from lodash_typed._logging import get_logger
from lodash_typed.collection import iteration, query

__all__ = [
    'every_parallel',
    'filter_parallel',
    'find_parallel',
    'for_each_parallel',
    'map_parallel',
    'reduce_parallel',
    'some_parallel',
]

logger = get_logger(__name__)

_MISSING: Any = object()


def _run_chunked[T, R](name: str, items: list[T], chunk_fn: Callable[[list[T]], R]) -> list[R]:
    """Apply ``chunk_fn`` to contiguous chunks of ``items`` on a thread pool.

    Returns one result per chunk, in chunk order. Small inputs produce a
    single chunk evaluated in the calling thread. The first worker exception
    is re-raised unchanged.
    """
    config = get_config()
    if len(items) < 2 or len(items) < config.min_parallel_size or config.max_workers == 1:
        return [chunk_fn(items)]

    chunk_size = math.ceil(len(items) / config.max_workers)
    chunks = [list(chunk) for chunk in itertools.batched(items, chunk_size)]
    workers = min(config.max_workers, len(chunks))
    logger.debug('parallel.dispatch', function=name, size=len(items), workers=workers, chunks=len(chunks))

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='lodash_typed') as pool:
        return list(pool.map(chunk_fn, chunks))


def map_parallel[T, U](collection: Iterable[T], iteratee: Callable[[T], U]) -> list[U]:
    """Parallel ``map``; output order matches input order."""
    parts = _run_chunked('map_parallel', list(collection), lambda chunk: [iteratee(item) for item in chunk])
    return list(itertools.chain.from_iterable(parts))


def filter_parallel[T](collection: Iterable[T], predicate: Callable[[T], Any]) -> list[T]:
    """Parallel ``filter``; kept elements stay in input order."""
    parts = _run_chunked('filter_parallel', list(collection), lambda chunk: [item for item in chunk if predicate(item)])
    return list(itertools.chain.from_iterable(parts))


def for_each_parallel[T](collection: Iterable[T], iteratee: Callable[[T], Any]) -> None:
    """Call ``iteratee`` for every element across worker threads.

    Calls within a chunk run in order; chunks run concurrently.
    """
    _run_chunked('for_each_parallel', list(collection), lambda chunk: iteration.each(chunk, iteratee))


def reduce_parallel[T, U](
    collection: Iterable[T],
    iteratee: Callable[[U, T], U],
    initial: U,
    *,
    combine: Callable[[U, U], U] | None = None,
) -> U:
    """Fold the collection, in parallel when partial results can be merged.

    Without ``combine`` this is a plain left fold in the calling thread: a
    general ``iteratee`` has no way to merge partial accumulators.

    With ``combine``, every chunk is folded from ``initial`` and the partial
    results are merged left to right with ``combine``. ``initial`` must be an
    identity for ``combine`` and ``combine`` must be associative for the
    result to equal the sequential fold.

    Example:
        ```python
        total = reduce_parallel(range(10_000), lambda acc, x: acc + x, 0, combine=lambda a, b: a + b)
        assert total == sum(range(10_000))
        ```
    """
    items = list(collection)
    if combine is None:
        return iteration.reduce(items, iteratee, initial)
    partials = _run_chunked('reduce_parallel', items, lambda chunk: iteration.reduce(chunk, iteratee, initial))
    return functools.reduce(combine, partials)


def _first_match[T](chunk: list[T], predicate: Callable[[T], Any]) -> Any:
    for item in chunk:
        if predicate(item):
            return item
    return _MISSING


def find_parallel[T](collection: Iterable[T], predicate: Callable[[T], Any]) -> T | None:
    """Return the first matching element in input order, or None.

    Each chunk stops at its own first match; the earliest chunk with a match
    wins.
    """
    parts = _run_chunked('find_parallel', list(collection), lambda chunk: _first_match(chunk, predicate))
    for part in parts:
        if part is not _MISSING:
            return part
    return None


def every_parallel[T](collection: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """Parallel ``every``; true for empty input."""
    return all(_run_chunked('every_parallel', list(collection), lambda chunk: query.every(chunk, predicate)))


def some_parallel[T](collection: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """Parallel ``some``; false for empty input."""
    return any(_run_chunked('some_parallel', list(collection), lambda chunk: query.some(chunk, predicate)))
