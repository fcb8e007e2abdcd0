"""Result type: Ok[T] | Err[E] for library-level errors.

Checked helpers such as ``Collection.try_get`` and ``safe_convert`` return a
Result instead of raising. Error payloads are the structs from
``lodash_typed.errors``; ``unwrap`` on an Err raises the matching exception.

Example:
    ```python
    from lodash_typed import Collection

    items = Collection([1, 2, 3])
    items.try_get(1)  # Ok(value=2)
    items.try_get(9)  # Err(error=IndexOutOfBounds(index=9, size=3))
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec
import wrapt

from lodash_typed.errors import Custom, LodashError

__all__ = ['Err', 'Ok', 'Result', 'collect', 'into_error', 'safe']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(21).map(lambda x: x * 2)
        Ok(value=42)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to unwrap.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a Result-returning function to the contained value."""
        return f(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> from lodash_typed.errors import EmptyCollection
        >>> Err(EmptyCollection()).unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the exception variant of the contained error.

        Raises:
            LodashError: When the error is a lodash_typed error struct.
            RuntimeError: For any other error payload.
        """
        to_exception = getattr(self.error, 'to_exception', None)
        if to_exception is not None:
            raise to_exception()
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self


type Result[T, E] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def into_error(exc: BaseException) -> Any:
    """Convert an exception into an error struct.

    lodash_typed exceptions map back to their own struct; anything else is
    wrapped as ``Custom`` carrying the exception's message.
    """
    if isinstance(exc, LodashError) and hasattr(exc, 'to_struct'):
        return exc.to_struct()
    return Custom(str(exc) or type(exc).__name__)


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that turns raised exceptions into ``Err`` values.

    The library itself never applies this to user callbacks; it is an opt-in
    for callers who prefer Result values over exceptions.

    Can be used with or without arguments:
        @safe
        def parse(s: str) -> int: ...

        @safe(exceptions=(ValueError,))
        def parse_strict(s: str) -> int: ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function returning Ok(value) or Err(error struct).

    Example:
        ```python
        @safe
        def parse(s: str) -> int:
            return int(s)

        parse('42')  # Ok(value=42)
        parse('x')   # Err(error=Custom(message="invalid literal ..."))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            return Err(into_error(e))

    if func is not None:
        return wrapper(func)
    return wrapper
