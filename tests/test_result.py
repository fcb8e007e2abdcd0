"""Tests for Result, collect, into_error and safe."""

from __future__ import annotations

import pytest
from hypothesis import given
from lodash_typed import (
    Custom,
    EmptyCollection,
    EmptyCollectionError,
    Err,
    InvalidInput,
    InvalidInputError,
    Ok,
    collect,
    into_error,
    safe,
)

from tests.strategies import small_ints


class TestOk:
    """Tests for the Ok variant."""

    def test_predicates(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_unwrap(self) -> None:
        assert Ok(3).unwrap() == 3
        assert Ok(3).unwrap_or(0) == 3
        assert Ok(3).expect('never') == 3

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(RuntimeError, match='unwrap_err on Ok'):
            Ok(3).unwrap_err()

    def test_map_and_then(self) -> None:
        assert Ok(2).map(lambda x: x * 5) == Ok(10)
        assert Ok(2).map_err(str) == Ok(2)
        assert Ok(2).and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert Ok(2).and_then(lambda x: Err(Custom('no'))) == Err(Custom('no'))


class TestErr:
    """Tests for the Err variant."""

    def test_predicates(self) -> None:
        assert Err(EmptyCollection()).is_err()
        assert not Err(EmptyCollection()).is_ok()

    def test_unwrap_raises_matching_exception(self) -> None:
        with pytest.raises(EmptyCollectionError):
            Err(EmptyCollection()).unwrap()

    def test_unwrap_foreign_payload_raises_runtime_error(self) -> None:
        with pytest.raises(RuntimeError, match='unwrap on Err'):
            Err('plain').unwrap()

    def test_unwrap_or_and_err(self) -> None:
        assert Err(EmptyCollection()).unwrap_or(7) == 7
        assert Err(EmptyCollection()).unwrap_err() == EmptyCollection()

    def test_expect_raises_with_message(self) -> None:
        with pytest.raises(RuntimeError, match='needed a value'):
            Err(EmptyCollection()).expect('needed a value')

    def test_map_and_then_skip(self) -> None:
        err = Err(InvalidInput('x'))
        assert err.map(lambda v: v + 1) is err
        assert err.and_then(lambda v: Ok(v)) is err
        assert err.map_err(lambda e: Custom(e.message)) == Err(Custom('x'))


class TestCollect:
    """Tests for collect()."""

    def test_all_ok(self) -> None:
        assert collect([Ok(1), Ok(2)]) == Ok([1, 2])

    def test_first_err_wins(self) -> None:
        assert collect([Ok(1), Err(Custom('a')), Err(Custom('b'))]) == Err(Custom('a'))

    def test_empty(self) -> None:
        assert collect([]) == Ok([])


class TestIntoError:
    """Tests for into_error()."""

    def test_library_exception_maps_to_struct(self) -> None:
        assert into_error(InvalidInputError('bad')) == InvalidInput('bad')

    def test_foreign_exception_becomes_custom(self) -> None:
        assert into_error(ValueError('nope')) == Custom('nope')

    def test_empty_message_uses_type_name(self) -> None:
        assert into_error(KeyboardInterrupt()) == Custom('KeyboardInterrupt')


class TestSafe:
    """Tests for the safe decorator."""

    def test_bare_decorator(self) -> None:
        @safe
        def parse(s: str) -> int:
            return int(s)

        assert parse('42') == Ok(42)
        result = parse('x')
        assert result.is_err()
        assert isinstance(result.unwrap_err(), Custom)

    def test_library_errors_keep_their_struct(self) -> None:
        @safe
        def reject() -> None:
            raise InvalidInputError('no')

        assert reject() == Err(InvalidInput('no'))

    def test_restricted_exceptions(self) -> None:
        @safe(exceptions=(ValueError,))
        def fail(kind: str) -> None:
            if kind == 'value':
                raise ValueError('v')
            raise TypeError('t')

        assert fail('value') == Err(Custom('v'))
        with pytest.raises(TypeError):
            fail('type')

    def test_preserves_metadata(self) -> None:
        @safe
        def documented() -> int:
            """Docs."""
            return 1

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docs.'


# --- Hypothesis Property Tests ---


@pytest.mark.hypothesis_property
@given(value=small_ints)
def test_property_ok_map_composes(value: int) -> None:
    """Property: mapping twice equals mapping the composition."""
    f = lambda x: x + 3  # noqa: E731
    g = lambda x: x * 2  # noqa: E731
    assert Ok(value).map(f).map(g) == Ok(value).map(lambda x: g(f(x)))
