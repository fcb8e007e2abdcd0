"""Collection: an owned list with the library's functions as methods.

Example:
    ```python
    from lodash_typed import Collection

    numbers = Collection([3, 1, 2])
    assert numbers.sort_by(lambda x: x) == [1, 2, 3]
    assert numbers.try_get(5).is_err()
    assert numbers.chain().map(lambda x: x + 1).value() == [4, 2, 3]
    ```
"""

from __future__ import annotations

import random
from collections.abc import Awaitable, Callable, Hashable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

from lodash_typed.collection import async_ops, iteration, operation, query, transform
from lodash_typed.errors import EmptyCollection, IndexOutOfBounds
from lodash_typed.result import Err, Ok, Result

if TYPE_CHECKING:
    from lodash_typed.chain.core import AsyncChain, Chain

__all__ = ['Collection']


class Collection[T]:
    """A list of elements owned by the collection.

    The constructor copies its input; ``data`` exposes the underlying list
    for in-place edits.

    Attributes:
        data: The owned list.
    """

    __slots__ = ('_data',)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[T] = list(items)

    @classmethod
    def empty(cls) -> Collection[T]:
        """Create a collection with no elements."""
        return cls()

    @classmethod
    def from_list(cls, items: list[T]) -> Collection[T]:
        """Wrap ``items`` without copying it."""
        new = cls.__new__(cls)
        new._data = items
        return new

    # --- access -----------------------------------------------------------

    @property
    def data(self) -> list[T]:
        return self._data

    def len(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def get(self, index: int) -> T | None:
        """Element at a non-negative ``index``, or None when out of range."""
        if 0 <= index < len(self._data):
            return self._data[index]
        return None

    def first(self) -> T | None:
        return self._data[0] if self._data else None

    def last(self) -> T | None:
        return self._data[-1] if self._data else None

    def try_get(self, index: int) -> Result[T, IndexOutOfBounds]:
        """Element at ``index`` as a Result.

        Returns:
            Ok(element), or Err(IndexOutOfBounds) when ``index`` is negative
            or past the end.
        """
        if 0 <= index < len(self._data):
            return Ok(self._data[index])
        return Err(IndexOutOfBounds(index=index, size=len(self._data)))

    def try_first(self) -> Result[T, EmptyCollection]:
        if not self._data:
            return Err(EmptyCollection())
        return Ok(self._data[0])

    def try_last(self) -> Result[T, EmptyCollection]:
        if not self._data:
            return Err(EmptyCollection())
        return Ok(self._data[-1])

    def to_list(self) -> list[T]:
        """A shallow copy of the elements."""
        return list(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Collection[T]: ...

    def __getitem__(self, index: int | slice) -> T | Collection[T]:
        if isinstance(index, slice):
            return Collection.from_list(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[index] = value

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._data == other._data
        if isinstance(other, list):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Collection({self._data!r})'

    # --- chains -----------------------------------------------------------

    def chain(self) -> Chain[T]:
        """Start a chain over a copy of the elements."""
        from lodash_typed.chain.core import Chain

        return Chain(self._data)

    def chain_async(self) -> AsyncChain[T]:
        """Start an async chain over a copy of the elements."""
        from lodash_typed.chain.core import AsyncChain

        return AsyncChain(self._data)

    # --- iteration --------------------------------------------------------

    def each(self, iteratee: Callable[[T], Any]) -> None:
        iteration.each(self._data, iteratee)

    def for_each(self, iteratee: Callable[[T], Any]) -> None:
        iteration.for_each(self._data, iteratee)

    def for_each_right(self, iteratee: Callable[[T], Any]) -> None:
        iteration.for_each_right(self._data, iteratee)

    def map[U](self, iteratee: Callable[[T], U]) -> list[U]:
        return iteration.map(self._data, iteratee)

    def filter(self, predicate: Callable[[T], Any]) -> list[T]:
        return iteration.filter(self._data, predicate)

    def reduce[U](self, iteratee: Callable[[U, T], U], initial: U) -> U:
        return iteration.reduce(self._data, iteratee, initial)

    def reduce_right[U](self, iteratee: Callable[[U, T], U], initial: U) -> U:
        return iteration.reduce_right(self._data, iteratee, initial)

    # --- query ------------------------------------------------------------

    def find(self, predicate: Callable[[T], Any]) -> T | None:
        return query.find(self._data, predicate)

    def find_last(self, predicate: Callable[[T], Any]) -> T | None:
        return query.find_last(self._data, predicate)

    def includes(self, value: T) -> bool:
        return query.includes(self._data, value)

    def every(self, predicate: Callable[[T], Any]) -> bool:
        return query.every(self._data, predicate)

    def some(self, predicate: Callable[[T], Any]) -> bool:
        return query.some(self._data, predicate)

    def count_by[K: Hashable](self, iteratee: Callable[[T], K]) -> dict[K, int]:
        return query.count_by(self._data, iteratee)

    def partition(self, predicate: Callable[[T], Any]) -> tuple[list[T], list[T]]:
        return query.partition(self._data, predicate)

    # --- transform --------------------------------------------------------

    def group_by[K: Hashable](self, iteratee: Callable[[T], K]) -> dict[K, list[T]]:
        return transform.group_by(self._data, iteratee)

    def key_by[K: Hashable](self, iteratee: Callable[[T], K]) -> dict[K, T]:
        return transform.key_by(self._data, iteratee)

    def invoke(self, method: Callable[[T], Any] | str, *args: Any, **kwargs: Any) -> list[Any]:
        return transform.invoke(self._data, method, *args, **kwargs)

    def sort_by(self, iteratee: Callable[[T], Any]) -> list[T]:
        return transform.sort_by(self._data, iteratee)

    def order_by(self, iteratee: Callable[[T], Any], ascending: bool = True) -> list[T]:
        return transform.order_by(self._data, iteratee, ascending)

    # --- operation --------------------------------------------------------

    def size(self) -> int:
        return operation.size(self._data)

    def shuffle(self, *, rng: random.Random | None = None) -> list[T]:
        return operation.shuffle(self._data, rng=rng)

    def sample(self, *, rng: random.Random | None = None) -> T | None:
        return operation.sample(self._data, rng=rng)

    def sample_size(self, n: int, *, rng: random.Random | None = None) -> list[T]:
        return operation.sample_size(self._data, n, rng=rng)

    # --- async ------------------------------------------------------------

    async def map_async[U](self, iteratee: Callable[[T], Awaitable[U] | U], *, limit: int | None = None) -> list[U]:
        return await async_ops.map_async(self._data, iteratee, limit=limit)

    async def filter_async(self, predicate: Callable[[T], Any], *, limit: int | None = None) -> list[T]:
        return await async_ops.filter_async(self._data, predicate, limit=limit)

    async def for_each_async(self, iteratee: Callable[[T], Any], *, limit: int | None = None) -> None:
        await async_ops.for_each_async(self._data, iteratee, limit=limit)

    async def reduce_async[U](self, iteratee: Callable[[U, T], Awaitable[U] | U], initial: U) -> U:
        return await async_ops.reduce_async(self._data, iteratee, initial)

    async def find_async(self, predicate: Callable[[T], Any]) -> T | None:
        return await async_ops.find_async(self._data, predicate)

    async def every_async(self, predicate: Callable[[T], Any]) -> bool:
        return await async_ops.every_async(self._data, predicate)

    async def some_async(self, predicate: Callable[[T], Any]) -> bool:
        return await async_ops.some_async(self._data, predicate)

    # --- parallel ---------------------------------------------------------

    def map_parallel[U](self, iteratee: Callable[[T], U]) -> list[U]:
        from lodash_typed import parallel

        return parallel.map_parallel(self._data, iteratee)

    def filter_parallel(self, predicate: Callable[[T], Any]) -> list[T]:
        from lodash_typed import parallel

        return parallel.filter_parallel(self._data, predicate)

    def for_each_parallel(self, iteratee: Callable[[T], Any]) -> None:
        from lodash_typed import parallel

        parallel.for_each_parallel(self._data, iteratee)

    def reduce_parallel[U](
        self,
        iteratee: Callable[[U, T], U],
        initial: U,
        *,
        combine: Callable[[U, U], U] | None = None,
    ) -> U:
        from lodash_typed import parallel

        return parallel.reduce_parallel(self._data, iteratee, initial, combine=combine)

    def find_parallel(self, predicate: Callable[[T], Any]) -> T | None:
        from lodash_typed import parallel

        return parallel.find_parallel(self._data, predicate)

    def every_parallel(self, predicate: Callable[[T], Any]) -> bool:
        from lodash_typed import parallel

        return parallel.every_parallel(self._data, predicate)

    def some_parallel(self, predicate: Callable[[T], Any]) -> bool:
        from lodash_typed import parallel

        return parallel.some_parallel(self._data, predicate)
