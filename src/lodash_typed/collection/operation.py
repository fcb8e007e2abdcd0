"""Size and random sampling.

Pass ``rng`` (a ``random.Random``) for reproducible results; otherwise the
module-level generator is used.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sized

from lodash_typed.errors import InvalidInputError

__all__ = ['sample', 'sample_size', 'shuffle', 'size']


def size(collection: Iterable[object]) -> int:
    """Number of elements."""
    if isinstance(collection, Sized):
        return len(collection)
    return sum(1 for _ in collection)


def shuffle[T](collection: Iterable[T], *, rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy; the input is left untouched."""
    items = list(collection)
    (rng or random).shuffle(items)
    return items


def sample[T](collection: Iterable[T], *, rng: random.Random | None = None) -> T | None:
    """Return one random element, or None for an empty collection."""
    items = list(collection)
    if not items:
        return None
    return (rng or random).choice(items)


def sample_size[T](collection: Iterable[T], n: int, *, rng: random.Random | None = None) -> list[T]:
    """Return up to ``n`` elements drawn from distinct positions.

    Raises:
        InvalidInputError: If ``n`` is negative.
    """
    if n < 0:
        raise InvalidInputError(f'sample_size() count must be non-negative, got {n}')
    items = list(collection)
    return (rng or random).sample(items, min(n, len(items)))
