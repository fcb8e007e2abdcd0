"""Lazy fluent chains over sequences."""

from lodash_typed.chain.core import AsyncChain, Chain, ChainState, chain, chain_async
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

__all__ = [
    'AsyncChain',
    'AsyncChainExecutor',
    'AsyncFilter',
    'AsyncMap',
    'AsyncOperation',
    'Chain',
    'ChainExecutor',
    'ChainState',
    'Filter',
    'Map',
    'Operation',
    'Reverse',
    'Skip',
    'Take',
    'chain',
    'chain_async',
]
