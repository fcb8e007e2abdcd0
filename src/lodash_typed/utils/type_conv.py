"""Key and string conversion helpers.

Example:
    ```python
    assert to_key(True) == 'true'
    assert safe_convert('42', int) == Ok(42)
    assert safe_convert('abc', int).is_err()
    ```
"""

from __future__ import annotations

from typing import Any

import msgspec

from lodash_typed.errors import TypeConversion
from lodash_typed.result import Err, Ok, Result

__all__ = ['safe_convert', 'to_key', 'to_string']


def to_key(value: Any) -> str:
    """Render ``value`` as a string key for grouping or indexing.

    Booleans become ``'true'``/``'false'`` and integral floats drop their
    fractional part, so ``1``, ``1.0`` and ``'1'`` share a key.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_string(value: Any) -> str:
    """``str(value)``."""
    return str(value)


def safe_convert[U](value: Any, target: type[U]) -> Result[U, TypeConversion]:
    """Parse the string form of ``value`` as ``target``.

    Uses msgspec's lax conversion, so numeric and boolean strings parse into
    ``int``, ``float`` and ``bool``.

    Args:
        value: Anything with a string form.
        target: The type to produce.

    Returns:
        Ok(converted value), or Err(TypeConversion) naming both types.
    """
    try:
        return Ok(msgspec.convert(str(value), target, strict=False))
    except (msgspec.ValidationError, TypeError):
        return Err(TypeConversion(source=type(value).__name__, target=getattr(target, '__name__', repr(target))))
