"""Tests for the async collection functions."""

from __future__ import annotations

import anyio
import pytest
from lodash_typed import InvalidInputError
from lodash_typed.collection import (
    every_async,
    filter_async,
    find_async,
    for_each_async,
    map_async,
    reduce_async,
    some_async,
)


async def double(x: int) -> int:
    await anyio.sleep(0)
    return x * 2


async def is_even(x: int) -> bool:
    return x % 2 == 0


class TestMapAsync:
    """Tests for map_async."""

    async def test_results_in_input_order(self) -> None:
        async def reversed_delay(x: int) -> int:
            await anyio.sleep(0.001 * (5 - x))
            return x * 10

        assert await map_async(range(5), reversed_delay) == [0, 10, 20, 30, 40]

    async def test_runs_concurrently(self) -> None:
        started = anyio.Event()
        count = 0

        async def wait_for_all(x: int) -> int:
            nonlocal count
            count += 1
            if count == 3:
                started.set()
            with anyio.fail_after(1):
                await started.wait()
            return x

        assert await map_async([1, 2, 3], wait_for_all) == [1, 2, 3]

    async def test_limit_caps_in_flight(self) -> None:
        active = 0
        peak = 0

        async def track(x: int) -> int:
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await anyio.sleep(0.005)
            active -= 1
            return x

        await map_async(range(12), track, limit=2)
        assert peak <= 2

    async def test_zero_limit_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            await map_async([1], double, limit=0)

    async def test_single_failure_unwrapped(self) -> None:
        async def fail_on_two(x: int) -> int:
            if x == 2:
                raise KeyError(x)
            return x

        with pytest.raises(KeyError):
            await map_async([1, 2, 3], fail_on_two)

    async def test_empty(self) -> None:
        assert await map_async([], double) == []


class TestFilterForEach:
    """Tests for filter_async and for_each_async."""

    async def test_filter_keeps_order(self) -> None:
        assert await filter_async([5, 4, 3, 2], is_even) == [4, 2]

    async def test_filter_with_limit(self) -> None:
        assert await filter_async(range(10), is_even, limit=3) == [0, 2, 4, 6, 8]

    async def test_for_each_visits_all(self) -> None:
        seen: list[int] = []

        async def record(x: int) -> None:
            seen.append(x)

        assert await for_each_async([1, 2, 3], record) is None
        assert sorted(seen) == [1, 2, 3]


class TestSequentialAsync:
    """Tests for the sequential async functions."""

    async def test_reduce(self) -> None:
        async def add(acc: int, x: int) -> int:
            return acc + x

        assert await reduce_async([1, 2, 3], add, 10) == 16

    async def test_reduce_is_ordered(self) -> None:
        async def concat(acc: str, x: str) -> str:
            await anyio.sleep(0)
            return acc + x

        assert await reduce_async('abc', concat, '') == 'abc'

    async def test_find(self) -> None:
        assert await find_async([1, 3, 4, 6], is_even) == 4
        assert await find_async([1, 3], is_even) is None

    async def test_find_short_circuits(self) -> None:
        calls: list[int] = []

        async def check(x: int) -> bool:
            calls.append(x)
            return x == 2

        await find_async([1, 2, 3], check)
        assert calls == [1, 2]

    async def test_every_and_some(self) -> None:
        assert await every_async([2, 4], is_even)
        assert not await every_async([2, 3], is_even)
        assert await every_async([], is_even)
        assert await some_async([1, 2], is_even)
        assert not await some_async([], is_even)

    async def test_every_short_circuits(self) -> None:
        calls: list[int] = []

        async def check(x: int) -> bool:
            calls.append(x)
            return x < 2

        assert not await every_async([1, 2, 3], check)
        assert calls == [1, 2]
