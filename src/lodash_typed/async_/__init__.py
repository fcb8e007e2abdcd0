"""Async execution helpers with ordered fan-out and concurrency limits."""

from lodash_typed.async_.itertools import (
    execute_parallel,
    execute_sequential,
    execute_with_concurrency,
    resolve,
    run_ordered,
    run_sequential,
)

__all__ = [
    'execute_parallel',
    'execute_sequential',
    'execute_with_concurrency',
    'resolve',
    'run_ordered',
    'run_sequential',
]
