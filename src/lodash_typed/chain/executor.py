"""Chain evaluation.

Executors walk a chain's steps in the order they were appended. Each step
produces a fresh list that feeds the next one; steps are never reordered or
fused.
"""

from __future__ import annotations

from typing import Any

from lodash_typed._logging import get_logger
from lodash_typed.async_.itertools import run_ordered, run_sequential
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
    apply_structural,
)

__all__ = ['AsyncChainExecutor', 'ChainExecutor']

logger = get_logger(__name__)


class ChainExecutor:
    """Evaluates synchronous chain steps over a list."""

    __slots__ = ('_items', '_operations')

    def __init__(self, items: list[Any], operations: tuple[Operation, ...]) -> None:
        self._items = items
        self._operations = operations

    def execute(self) -> list[Any]:
        """Apply every step in order and return the final list."""
        result = self._items
        for op in self._operations:
            match op:
                case Map(fn):
                    result = [fn(item) for item in result]
                case Filter(predicate):
                    result = [item for item in result if predicate(item)]
                case Take() | Skip() | Reverse():
                    result = apply_structural(op, result)
                case _:
                    raise TypeError(f'Unsupported chain step: {op!r}')

        logger.debug(
            'chain.evaluated',
            kind='Chain',
            operations=len(self._operations),
            input_size=len(self._items),
            output_size=len(result),
        )
        return result


class AsyncChainExecutor:
    """Evaluates async chain steps over a list.

    Map and filter steps await one element at a time unless the step carries
    a concurrency limit, in which case elements fan out and results are
    reassembled in input order.
    """

    __slots__ = ('_items', '_operations')

    def __init__(self, items: list[Any], operations: tuple[AsyncOperation, ...]) -> None:
        self._items = items
        self._operations = operations

    async def execute(self) -> list[Any]:
        """Apply every step in order and return the final list."""
        result = self._items
        for op in self._operations:
            match op:
                case AsyncMap(fn, concurrency):
                    result = await _run_step(fn, result, concurrency)
                case AsyncFilter(predicate, concurrency):
                    keep = await _run_step(predicate, result, concurrency)
                    result = [item for item, flag in zip(result, keep, strict=True) if flag]
                case Take() | Skip() | Reverse():
                    result = apply_structural(op, result)
                case _:
                    raise TypeError(f'Unsupported async chain step: {op!r}')

        logger.debug(
            'chain.evaluated',
            kind='AsyncChain',
            operations=len(self._operations),
            input_size=len(self._items),
            output_size=len(result),
        )
        return result


async def _run_step(fn: Any, items: list[Any], concurrency: int | None) -> list[Any]:
    if concurrency is None or concurrency == 1:
        return await run_sequential(fn, items)
    return await run_ordered(fn, items, limit=concurrency)
