"""lodash-typed: lodash-style collection utilities with lazy chains.

Flat imports (preferred):
    from lodash_typed import chain, chain_async, Collection
    from lodash_typed import map, filter, group_by, sort_by
    from lodash_typed import Ok, Err, Result

Submodule imports (for organization):
    from lodash_typed.chain import Chain, AsyncChain
    from lodash_typed.collection import Collection
    from lodash_typed.parallel import map_parallel
    from lodash_typed.errors import InvalidInputError
"""

from lodash_typed._config import Config, get_config, init, reset
from lodash_typed._logging import configure_logging, get_logger

# Async helpers
from lodash_typed.async_ import execute_parallel, execute_sequential, execute_with_concurrency

# Chains
from lodash_typed.chain import AsyncChain, Chain, ChainState, chain, chain_async

# Collection and functions
from lodash_typed.collection import (
    Collection,
    count_by,
    each,
    every,
    every_async,
    filter,
    filter_async,
    find,
    find_async,
    find_last,
    for_each,
    for_each_async,
    for_each_right,
    group_by,
    includes,
    invoke,
    key_by,
    map,
    map_async,
    order_by,
    partition,
    reduce,
    reduce_async,
    reduce_right,
    sample,
    sample_size,
    shuffle,
    size,
    some,
    some_async,
    sort_by,
)

# Errors
from lodash_typed.errors import (
    ChainConsumed,
    ChainConsumedError,
    Custom,
    CustomError,
    EmptyCollection,
    EmptyCollectionError,
    IndexOutOfBounds,
    IndexOutOfBoundsError,
    InvalidInput,
    InvalidInputError,
    InvalidPredicate,
    InvalidPredicateError,
    LodashError,
    TypeConversion,
    TypeConversionError,
)

# Parallel
from lodash_typed.parallel import (
    every_parallel,
    filter_parallel,
    find_parallel,
    for_each_parallel,
    map_parallel,
    reduce_parallel,
    some_parallel,
)
from lodash_typed.result import Err, Ok, Result, collect, into_error, safe
from lodash_typed.types import AsyncIteratee, AsyncPredicate, AsyncReducer, Iteratee, Predicate, Reducer
from lodash_typed.utils import safe_convert, to_key, to_string

__version__ = '0.1.0'

__all__ = [
    'AsyncChain',
    'AsyncIteratee',
    'AsyncPredicate',
    'AsyncReducer',
    'Chain',
    'ChainConsumed',
    'ChainConsumedError',
    'ChainState',
    'Collection',
    'Config',
    'Custom',
    'CustomError',
    'EmptyCollection',
    'EmptyCollectionError',
    'Err',
    'IndexOutOfBounds',
    'IndexOutOfBoundsError',
    'InvalidInput',
    'InvalidInputError',
    'InvalidPredicate',
    'InvalidPredicateError',
    'Iteratee',
    'LodashError',
    'Ok',
    'Predicate',
    'Reducer',
    'Result',
    'TypeConversion',
    'TypeConversionError',
    '__version__',
    'chain',
    'chain_async',
    'collect',
    'configure_logging',
    'count_by',
    'each',
    'every',
    'every_async',
    'every_parallel',
    'execute_parallel',
    'execute_sequential',
    'execute_with_concurrency',
    'filter',
    'filter_async',
    'filter_parallel',
    'find',
    'find_async',
    'find_last',
    'find_parallel',
    'for_each',
    'for_each_async',
    'for_each_parallel',
    'for_each_right',
    'get_config',
    'get_logger',
    'group_by',
    'includes',
    'init',
    'into_error',
    'invoke',
    'key_by',
    'map',
    'map_async',
    'map_parallel',
    'order_by',
    'partition',
    'reduce',
    'reduce_async',
    'reduce_parallel',
    'reduce_right',
    'reset',
    'safe',
    'safe_convert',
    'sample',
    'sample_size',
    'shuffle',
    'size',
    'some',
    'some_async',
    'some_parallel',
    'sort_by',
    'to_key',
    'to_string',
]
