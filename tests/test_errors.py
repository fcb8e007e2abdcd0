"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest
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

STRUCTS = [
    InvalidInput('negative count'),
    InvalidPredicate('not callable'),
    TypeConversion('str', 'int'),
    IndexOutOfBounds(index=5, size=3),
    EmptyCollection(),
    ChainConsumed('AsyncChain'),
    Custom('boom'),
]


class TestMessages:
    """Tests for exception messages."""

    def test_invalid_input(self) -> None:
        assert str(InvalidInputError('test message')) == 'Invalid input: test message'

    def test_type_conversion(self) -> None:
        assert str(TypeConversionError('String', 'i32')) == 'Type conversion failed: String -> i32'

    def test_index_out_of_bounds(self) -> None:
        assert str(IndexOutOfBoundsError(5, 3)) == 'Index 5 is out of bounds for collection of size 3'

    def test_empty_collection(self) -> None:
        assert str(EmptyCollectionError()) == 'Operation requires non-empty collection'

    def test_invalid_predicate(self) -> None:
        assert str(InvalidPredicateError('x')) == 'Invalid predicate function: x'

    def test_chain_consumed(self) -> None:
        assert str(ChainConsumedError()) == 'Chain has already been consumed and cannot be reused'

    def test_custom(self) -> None:
        assert str(CustomError('oops')) == 'Custom error: oops'


class TestHierarchy:
    """Tests for exception base classes."""

    @pytest.mark.parametrize('struct', STRUCTS)
    def test_all_derive_from_lodash_error(self, struct: object) -> None:
        assert isinstance(struct.to_exception(), LodashError)  # type: ignore[attr-defined]

    def test_index_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            raise IndexOutOfBoundsError(1, 0)


class TestConversion:
    """Tests for struct <-> exception conversion."""

    @pytest.mark.parametrize('struct', STRUCTS)
    def test_struct_round_trips_through_exception(self, struct: object) -> None:
        assert struct.to_exception().to_struct() == struct  # type: ignore[attr-defined]

    def test_structs_are_frozen(self) -> None:
        err = InvalidInput('x')
        with pytest.raises(AttributeError):
            err.message = 'y'  # type: ignore[misc]
