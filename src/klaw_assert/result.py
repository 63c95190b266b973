"""Ok/Err outcome values for guarded calls.

A guarded call never lets an exception escape: it hands back either
``Ok(value)`` for a normal return or ``Err(exception)`` for an abnormal one.

Example:
    ```python
    from klaw_assert.guard import guarded

    guarded(int, '42')
    # Ok(value=42)

    guarded(int, 'forty-two')
    # Err(error=ValueError("invalid literal for int() with base 10: 'forty-two'"))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeGuard

__all__ = ['Err', 'Ok', 'Result', 'is_err', 'is_ok']


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """A call that returned normally.

    Attributes:
        value: The value the call returned.
    """

    value: T
    __match_args__ = ('value',)

    def is_ok(self) -> bool:
        """Return True, indicating a normal return."""
        return True

    def is_err(self) -> bool:
        """Return False, indicating no exception was captured."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the returned value.

        Args:
            f: A callable applied to the value.

        Returns:
            Ok[U]: A new Ok holding ``f(value)``.
        """
        return Ok(f(self.value))

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the contained value; ``default`` is unused for Ok."""
        return self.value

    def unwrap_err(self) -> BaseException:
        """Raise, since an Ok holds no exception.

        Raises:
            ValueError: Always.
        """
        msg = f'Called unwrap_err on Ok: {self.value!r}'
        raise ValueError(msg)

    def ok(self) -> T | None:
        """Return the contained value."""
        return self.value

    def err(self) -> BaseException | None:
        """Return None, since an Ok holds no exception."""
        return None

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'


@dataclass(slots=True, frozen=True)
class Err[E: BaseException]:
    """A call that raised.

    Attributes:
        error: The exception the call raised.
    """

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> bool:
        """Return False, indicating the call did not return normally."""
        return False

    def is_err(self) -> bool:
        """Return True, indicating an exception was captured."""
        return True

    def map[U](self, f: Callable[[Any], U]) -> Err[E]:
        """Return self unchanged; there is no value to transform."""
        return self

    def unwrap(self) -> Any:
        """Re-raise the captured exception.

        Raises:
            E: Always raises the contained error.
        """
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        """Return ``default`` in place of the missing value."""
        return default

    def unwrap_err(self) -> E:
        """Return the captured exception."""
        return self.error

    def ok(self) -> Any | None:
        """Return None, since an Err holds no value."""
        return None

    def err(self) -> E | None:
        """Return the captured exception."""
        return self.error

    def __repr__(self) -> str:
        return f'Err({self.error!r})'


type Result[T, E: BaseException] = Ok[T] | Err[E]


def is_ok[T, E: BaseException](r: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard narrowing a Result to Ok."""
    return isinstance(r, Ok)


def is_err[T, E: BaseException](r: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard narrowing a Result to Err."""
    return isinstance(r, Err)
