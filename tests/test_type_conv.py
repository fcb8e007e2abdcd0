"""Tests for the conversion helpers."""

from __future__ import annotations

import pytest
from lodash_typed import Err, Ok, TypeConversion, TypeConversionError
from lodash_typed.utils import safe_convert, to_key, to_string


class TestToKey:
    """Tests for to_key()."""

    @pytest.mark.parametrize(
        ('value', 'expected'),
        [
            ('hello', 'hello'),
            (42, '42'),
            (-7, '-7'),
            (True, 'true'),
            (False, 'false'),
            (3.0, '3'),
            (2.5, '2.5'),
        ],
    )
    def test_keys(self, value: object, expected: str) -> None:
        assert to_key(value) == expected

    def test_int_and_integral_float_share_key(self) -> None:
        assert to_key(1) == to_key(1.0) == to_key('1')


class TestToString:
    """Tests for to_string()."""

    def test_uses_str(self) -> None:
        assert to_string(12) == '12'
        assert to_string([1]) == '[1]'


class TestSafeConvert:
    """Tests for safe_convert()."""

    def test_string_to_int(self) -> None:
        assert safe_convert('42', int) == Ok(42)

    def test_string_to_float(self) -> None:
        assert safe_convert('2.5', float) == Ok(2.5)

    def test_int_to_str(self) -> None:
        assert safe_convert(42, str) == Ok('42')

    def test_failure(self) -> None:
        assert safe_convert('abc', int) == Err(TypeConversion(source='str', target='int'))

    def test_failure_unwrap_raises(self) -> None:
        with pytest.raises(TypeConversionError, match='Type conversion failed: str -> int'):
            safe_convert('abc', int).unwrap()
