"""Assertion error types: dual struct+exception for records and raise-based code.

Two disjoint categories:

- ``Failure`` / ``FailureError``: the checked predicate did not hold. The
  struct is what reporters record; the exception is what ends the test.
- ``Misuse`` / ``MisuseError``: the assertion itself was called with a
  structurally invalid argument. Always raised at once, never reported.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'Failure',
    'FailureError',
    'Misuse',
    'MisuseError',
]


# --- Assertion failures ---


class Failure(msgspec.Struct, frozen=True, gc=False):
    """A failed assertion - struct variant for recording."""

    operation: str
    message: str
    location: str | None = None

    def to_exception(self) -> FailureError:
        """Convert to exception for raise-based code."""
        return FailureError(self.message, operation=self.operation, location=self.location)


class FailureError(AssertionError):
    """A failed assertion - exception variant.

    ``str(err)`` is the full single-line failure message.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        location: str | None = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.location = location
        super().__init__(message)

    def to_struct(self) -> Failure:
        """Convert to struct for recording."""
        return Failure(self.operation or '', self.message, self.location)


# --- Usage errors ---


class Misuse(msgspec.Struct, frozen=True, gc=False):
    """An assertion called with an invalid argument - struct variant."""

    operation: str
    reason: str

    def to_exception(self) -> MisuseError:
        """Convert to exception for raise-based code."""
        return MisuseError(self.operation, self.reason)


class MisuseError(TypeError):
    """An assertion called with an invalid argument - exception variant."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f'{operation} called with {reason}')

    def to_struct(self) -> Misuse:
        """Convert to struct for recording."""
        return Misuse(self.operation, self.reason)
