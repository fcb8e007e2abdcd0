"""Error types: dual struct+exception for Result and raise-based code.

Struct variants are what checked APIs place inside ``Err``; exception
variants are what builder misuse raises. Each converts into the other.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'ChainConsumed',
    'ChainConsumedError',
    'Custom',
    'CustomError',
    'EmptyCollection',
    'EmptyCollectionError',
    'IndexOutOfBounds',
    'IndexOutOfBoundsError',
    'InvalidInput',
    'InvalidInputError',
    'InvalidPredicate',
    'InvalidPredicateError',
    'LodashError',
    'TypeConversion',
    'TypeConversionError',
]


class LodashError(Exception):
    """Base class for every exception raised by lodash_typed."""


# --- Input Errors ---


class InvalidInput(msgspec.Struct, frozen=True, gc=False):
    """Argument rejected - struct variant for Result[T, InvalidInput]."""

    message: str

    def to_exception(self) -> InvalidInputError:
        """Convert to exception for raise-based code."""
        return InvalidInputError(self.message)


class InvalidInputError(LodashError):
    """Argument rejected - exception variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f'Invalid input: {message}')

    def to_struct(self) -> InvalidInput:
        """Convert to struct for Result-based code."""
        return InvalidInput(self.message)


class InvalidPredicate(msgspec.Struct, frozen=True, gc=False):
    """Iteratee or predicate is unusable - struct variant."""

    message: str

    def to_exception(self) -> InvalidPredicateError:
        """Convert to exception for raise-based code."""
        return InvalidPredicateError(self.message)


class InvalidPredicateError(LodashError):
    """Iteratee or predicate is unusable - exception variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f'Invalid predicate function: {message}')

    def to_struct(self) -> InvalidPredicate:
        """Convert to struct for Result-based code."""
        return InvalidPredicate(self.message)


class TypeConversion(msgspec.Struct, frozen=True, gc=False):
    """Value could not be converted - struct variant for Result[T, TypeConversion]."""

    source: str
    target: str

    def to_exception(self) -> TypeConversionError:
        """Convert to exception for raise-based code."""
        return TypeConversionError(self.source, self.target)


class TypeConversionError(LodashError):
    """Value could not be converted - exception variant."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f'Type conversion failed: {source} -> {target}')

    def to_struct(self) -> TypeConversion:
        """Convert to struct for Result-based code."""
        return TypeConversion(self.source, self.target)


# --- Access Errors ---


class IndexOutOfBounds(msgspec.Struct, frozen=True, gc=False):
    """Index past the end - struct variant for Result[T, IndexOutOfBounds]."""

    index: int
    size: int

    def to_exception(self) -> IndexOutOfBoundsError:
        """Convert to exception for raise-based code."""
        return IndexOutOfBoundsError(self.index, self.size)


class IndexOutOfBoundsError(LodashError, IndexError):
    """Index past the end - exception variant."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f'Index {index} is out of bounds for collection of size {size}')

    def to_struct(self) -> IndexOutOfBounds:
        """Convert to struct for Result-based code."""
        return IndexOutOfBounds(self.index, self.size)


class EmptyCollection(msgspec.Struct, frozen=True, gc=False):
    """Operation needs at least one element - struct variant."""

    def to_exception(self) -> EmptyCollectionError:
        """Convert to exception for raise-based code."""
        return EmptyCollectionError()


class EmptyCollectionError(LodashError):
    """Operation needs at least one element - exception variant."""

    def __init__(self) -> None:
        super().__init__('Operation requires non-empty collection')

    def to_struct(self) -> EmptyCollection:
        """Convert to struct for Result-based code."""
        return EmptyCollection()


# --- Chain Errors ---


class ChainConsumed(msgspec.Struct, frozen=True, gc=False):
    """Chain was already consumed - struct variant."""

    kind: str = 'Chain'

    def to_exception(self) -> ChainConsumedError:
        """Convert to exception for raise-based code."""
        return ChainConsumedError(self.kind)


class ChainConsumedError(LodashError):
    """Chain was already consumed - exception variant.

    Raised when a builder or terminal method is called on a chain that has
    already been extended or evaluated.
    """

    def __init__(self, kind: str = 'Chain') -> None:
        self.kind = kind
        super().__init__(f'{kind} has already been consumed and cannot be reused')

    def to_struct(self) -> ChainConsumed:
        """Convert to struct for Result-based code."""
        return ChainConsumed(self.kind)


# --- Wrapped Errors ---


class Custom(msgspec.Struct, frozen=True, gc=False):
    """Error carried over from user code - struct variant."""

    message: str

    def to_exception(self) -> CustomError:
        """Convert to exception for raise-based code."""
        return CustomError(self.message)


class CustomError(LodashError):
    """Error carried over from user code - exception variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f'Custom error: {message}')

    def to_struct(self) -> Custom:
        """Convert to struct for Result-based code."""
        return Custom(self.message)
