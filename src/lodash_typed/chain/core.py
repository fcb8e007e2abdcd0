"""Fluent chains: Chain and AsyncChain.

A chain copies its source, records steps, and evaluates them on demand.
Every builder call hands its steps to a new chain and consumes the
receiver; a consumed chain raises ChainConsumedError if touched again.

Example:
    ```python
    from lodash_typed import chain

    result = (
        chain([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
        .filter(lambda x: x % 2 == 0)
        .map(lambda x: x * 3)
        .take(3)
        .value()
    )
    assert result == [6, 12, 18]
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator, Iterable
from enum import Enum
from typing import Any

from lodash_typed.chain.executor import AsyncChainExecutor, ChainExecutor
from lodash_typed.chain.operations import (
    AsyncFilter,
    AsyncMap,
    AsyncOperation,
    Filter,
    Map,
    Operation,
    Reverse,
    Skip,
    Take,
)
from lodash_typed.collection.core import Collection
from lodash_typed.errors import ChainConsumedError, InvalidInputError, InvalidPredicateError

__all__ = [
    'AsyncChain',
    'Chain',
    'ChainState',
    'chain',
    'chain_async',
]


class ChainState(Enum):
    """Lifecycle of a chain value."""

    BUILDING = 'building'
    CONSUMED = 'consumed'


def _check_callable(fn: object, role: str) -> None:
    if not callable(fn):
        raise InvalidPredicateError(f'{role} must be callable, got {type(fn).__name__}')


def _check_count(n: object, step: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError(f'{step}() count must be an int, got {type(n).__name__}')
    if n < 0:
        raise InvalidInputError(f'{step}() count must be non-negative, got {n}')
    return n


def _check_concurrency(concurrency: int | None) -> int | None:
    if concurrency is not None and concurrency < 1:
        raise InvalidInputError(f'concurrency must be at least 1, got {concurrency}')
    return concurrency


class _Consumable:
    """Single-use state shared by both chain kinds."""

    __slots__ = ('_items', '_state')

    _items: list[Any]
    _state: ChainState

    @property
    def state(self) -> ChainState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_consumed(self) -> bool:
        """True once a builder or terminal method has taken this chain."""
        return self._state is ChainState.CONSUMED

    def _consume(self) -> list[Any]:
        """Mark consumed and hand over the items.

        Raises:
            ChainConsumedError: If the chain was already consumed.
        """
        if self._state is ChainState.CONSUMED:
            raise ChainConsumedError(type(self).__name__)
        self._state = ChainState.CONSUMED
        return self._items


class Chain[T](_Consumable):
    """Deferred, ordered steps over a copy of a source sequence.

    Attributes:
        operations: The recorded steps, in append order.
    """

    __slots__ = ('_operations',)

    def __init__(self, source: Iterable[T]) -> None:
        self._items = list(source)
        self._operations: tuple[Operation, ...] = ()
        self._state = ChainState.BUILDING

    @classmethod
    def _from_parts(cls, items: list[Any], operations: tuple[Operation, ...]) -> Chain[Any]:
        new = cls.__new__(cls)
        new._items = items
        new._operations = operations
        new._state = ChainState.BUILDING
        return new

    @property
    def operations(self) -> tuple[Operation, ...]:
        return self._operations

    def _extend(self, op: Operation) -> Chain[Any]:
        operations = self._operations
        return Chain._from_parts(self._consume(), (*operations, op))

    def map[U](self, fn: Callable[[T], U]) -> Chain[U]:
        """Append a step replacing each element with ``fn(element)``."""
        _check_callable(fn, 'map() iteratee')
        return self._extend(Map(fn))

    def filter(self, predicate: Callable[[T], Any]) -> Chain[T]:
        """Append a step keeping elements for which ``predicate`` is truthy."""
        _check_callable(predicate, 'filter() predicate')
        return self._extend(Filter(predicate))

    def take(self, n: int) -> Chain[T]:
        """Append a step keeping the first ``n`` elements."""
        return self._extend(Take(_check_count(n, 'take')))

    def skip(self, n: int) -> Chain[T]:
        """Append a step dropping the first ``n`` elements."""
        return self._extend(Skip(_check_count(n, 'skip')))

    def reverse(self) -> Chain[T]:
        """Append a step reversing element order."""
        return self._extend(Reverse())

    def value(self) -> list[T]:
        """Evaluate every step in order and return the resulting list.

        Consumes the chain. Exceptions raised by user callables propagate
        unchanged.
        """
        operations = self._operations
        return ChainExecutor(self._consume(), operations).execute()

    def collect[U](self, into: Callable[[T], U] | None = None) -> list[U]:
        """Evaluate the chain, optionally converting each element with ``into``."""
        values = self.value()
        if into is None:
            return values  # type: ignore[return-value]
        return [into(item) for item in values]

    def into_collection(self) -> Collection[T]:
        """Evaluate the chain and wrap the result in a Collection."""
        return Collection.from_list(self.value())

    def __repr__(self) -> str:
        steps = ', '.join(type(op).__name__ for op in self._operations)
        return f'Chain(items={len(self._items)}, operations=[{steps}], state={self._state.value})'


class AsyncChain[T](_Consumable):
    """Deferred, ordered async steps over a copy of a source sequence.

    Map and filter callables may return awaitables. By default each element
    is awaited before the next one starts; pass ``concurrency`` to a step to
    keep several calls in flight while preserving element order.

    Await the chain (or its ``value()``) to evaluate it.

    Example:
        ```python
        async def double(x: int) -> int:
            return x * 2

        async def example():
            assert await chain_async([1, 2, 3]).map(double).reverse() == [6, 4, 2]
        ```
    """

    __slots__ = ('_operations',)

    def __init__(self, source: Iterable[T]) -> None:
        self._items = list(source)
        self._operations: tuple[AsyncOperation, ...] = ()
        self._state = ChainState.BUILDING

    @classmethod
    def _from_parts(cls, items: list[Any], operations: tuple[AsyncOperation, ...]) -> AsyncChain[Any]:
        new = cls.__new__(cls)
        new._items = items
        new._operations = operations
        new._state = ChainState.BUILDING
        return new

    @property
    def operations(self) -> tuple[AsyncOperation, ...]:
        return self._operations

    def _extend(self, op: AsyncOperation) -> AsyncChain[Any]:
        operations = self._operations
        return AsyncChain._from_parts(self._consume(), (*operations, op))

    def map[U](
        self,
        fn: Callable[[T], Awaitable[U] | U],
        *,
        concurrency: int | None = None,
    ) -> AsyncChain[U]:
        """Append a step replacing each element with the awaited ``fn(element)``.

        Args:
            fn: Callable returning an awaitable (plain values are accepted).
            concurrency: Keep up to this many calls in flight. None (the
                default) awaits elements one at a time.
        """
        _check_callable(fn, 'map() iteratee')
        return self._extend(AsyncMap(fn, _check_concurrency(concurrency)))

    def filter(
        self,
        predicate: Callable[[T], Awaitable[Any] | Any],
        *,
        concurrency: int | None = None,
    ) -> AsyncChain[T]:
        """Append a step keeping elements whose awaited predicate is truthy."""
        _check_callable(predicate, 'filter() predicate')
        return self._extend(AsyncFilter(predicate, _check_concurrency(concurrency)))

    def take(self, n: int) -> AsyncChain[T]:
        """Append a step keeping the first ``n`` elements."""
        return self._extend(Take(_check_count(n, 'take')))

    def skip(self, n: int) -> AsyncChain[T]:
        """Append a step dropping the first ``n`` elements."""
        return self._extend(Skip(_check_count(n, 'skip')))

    def reverse(self) -> AsyncChain[T]:
        """Append a step reversing element order."""
        return self._extend(Reverse())

    async def value(self) -> list[T]:
        """Evaluate every step in order and return the resulting list."""
        operations = self._operations
        return await AsyncChainExecutor(self._consume(), operations).execute()

    async def collect[U](self, into: Callable[[T], U] | None = None) -> list[U]:
        """Evaluate the chain, optionally converting each element with ``into``."""
        values = await self.value()
        if into is None:
            return values  # type: ignore[return-value]
        return [into(item) for item in values]

    async def into_collection(self) -> Collection[T]:
        """Evaluate the chain and wrap the result in a Collection."""
        return Collection.from_list(await self.value())

    def __await__(self) -> Generator[Any, None, list[T]]:
        """Support ``await chain``."""
        return self.value().__await__()

    def __repr__(self) -> str:
        steps = ', '.join(type(op).__name__ for op in self._operations)
        return f'AsyncChain(items={len(self._items)}, operations=[{steps}], state={self._state.value})'


def chain[T](source: Iterable[T]) -> Chain[T]:
    """Start a chain over a copy of ``source``."""
    return Chain(source)


def chain_async[T](source: Iterable[T]) -> AsyncChain[T]:
    """Start an async chain over a copy of ``source``."""
    return AsyncChain(source)
