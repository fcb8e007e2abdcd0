"""Collection type and the lodash-style functions over iterables."""

from lodash_typed.collection.async_ops import (
    every_async,
    filter_async,
    find_async,
    for_each_async,
    map_async,
    reduce_async,
    some_async,
)
from lodash_typed.collection.iteration import each, filter, for_each, for_each_right, map, reduce, reduce_right
from lodash_typed.collection.operation import sample, sample_size, shuffle, size
from lodash_typed.collection.query import count_by, every, find, find_last, includes, partition, some
from lodash_typed.collection.transform import group_by, invoke, key_by, order_by, sort_by
from lodash_typed.collection.core import Collection  # noqa: I001

__all__ = [
    'Collection',
    'count_by',
    'each',
    'every',
    'every_async',
    'filter',
    'filter_async',
    'find',
    'find_async',
    'find_last',
    'for_each',
    'for_each_async',
    'for_each_right',
    'group_by',
    'includes',
    'invoke',
    'key_by',
    'map',
    'map_async',
    'order_by',
    'partition',
    'reduce',
    'reduce_async',
    'reduce_right',
    'sample',
    'sample_size',
    'shuffle',
    'size',
    'some',
    'some_async',
    'sort_by',
]
