"""Failure reporters: the test context an assertion reports to.

A reporter has one job, ``fatal(message)``: record the failure and stop the
current test. Assertions accept any of:

    - an object with a ``fatal(message)`` method (a ``FailureReporter``)
    - a ``unittest.TestCase``, adapted through ``TestCase.fail``
    - ``None``, meaning the configured default (``RaisingReporter`` or
      ``PytestReporter``)

A reporter that also has ``report(failure)`` (a ``StructuredReporter``) is
given the whole ``Failure`` struct instead, location included.

Every reporter here stops the test with an exception the guarded region
does not capture, either ``FailureError`` or pytest's own outcome exception,
so a failed nested assertion is never mistaken for a panic.
"""

from __future__ import annotations

import threading
import unittest
from typing import NoReturn, Protocol, runtime_checkable

from klaw_assert._config import ReporterKind, get_config
from klaw_assert.errors import Failure, FailureError, MisuseError

__all__ = [
    'FailureReporter',
    'PytestReporter',
    'RaisingReporter',
    'RecordingReporter',
    'StructuredReporter',
    'TestCaseReporter',
    'TestContext',
    'resolve_reporter',
]


@runtime_checkable
class FailureReporter(Protocol):
    """Protocol for anything that can fail the current test."""

    def fatal(self, message: str) -> NoReturn:
        """Report ``message`` as a fatal failure and stop the current test.

        Must not return normally.
        """
        ...


@runtime_checkable
class StructuredReporter(Protocol):
    """A FailureReporter that accepts the full Failure record."""

    def fatal(self, message: str) -> NoReturn: ...

    def report(self, failure: Failure) -> NoReturn:
        """Report ``failure`` and stop the current test. Must not return normally."""
        ...


class RaisingReporter:
    """Raise ``FailureError``; works under any runner that treats AssertionError as a failure."""

    def fatal(self, message: str) -> NoReturn:
        raise FailureError(message)

    def report(self, failure: Failure) -> NoReturn:
        raise failure.to_exception()

    def __repr__(self) -> str:
        return 'RaisingReporter()'


class PytestReporter:
    """Fail through ``pytest.fail`` without pytest's own traceback."""

    def fatal(self, message: str) -> NoReturn:
        import pytest

        pytest.fail(message, pytrace=False)

    def __repr__(self) -> str:
        return 'PytestReporter()'


class TestCaseReporter:
    """Adapt a ``unittest.TestCase`` to the FailureReporter protocol.

    The failure goes through ``TestCase.fail`` so the case's own
    ``failureException`` is what gets raised first; it is re-raised as a
    chained ``FailureError``, which is still an ``AssertionError`` and so
    still a failure to unittest.
    """

    __test__ = False  # not a test class, despite the name

    def __init__(self, case: unittest.TestCase) -> None:
        self.case = case

    def fatal(self, message: str) -> NoReturn:
        self.report(Failure(operation=_operation_of(message), message=message))

    def report(self, failure: Failure) -> NoReturn:
        try:
            self.case.fail(failure.message)
        except self.case.failureException as e:
            raise failure.to_exception() from e
        raise failure.to_exception()

    def __repr__(self) -> str:
        return f'TestCaseReporter({self.case.id()})'


class RecordingReporter:
    """Record each failure as a ``Failure`` struct, then raise ``FailureError``.

    Safe for concurrent use.

    Example:
        ```python
        t = RecordingReporter()
        with pytest.raises(FailureError):
            assert_equal(t, 1, 2)
        t.messages
        # ['assert_equal failed, expected = 1, got = 2']
        ```
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._failures: list[Failure] = []

    def fatal(self, message: str) -> NoReturn:
        self.report(Failure(operation=_operation_of(message), message=message))

    def report(self, failure: Failure) -> NoReturn:
        self.record(failure)
        raise failure.to_exception()

    def record(self, failure: Failure) -> None:
        """Store ``failure`` without raising."""
        with self._lock:
            self._failures.append(failure)

    @property
    def failures(self) -> list[Failure]:
        """Recorded failures, oldest first."""
        with self._lock:
            return list(self._failures)

    @property
    def messages(self) -> list[str]:
        """Recorded failure messages, oldest first."""
        return [f.message for f in self.failures]

    def clear(self) -> None:
        """Forget every recorded failure."""
        with self._lock:
            self._failures.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._failures)

    def __repr__(self) -> str:
        return f'RecordingReporter(failures={len(self)})'


def _operation_of(message: str) -> str:
    """Pull ``assert_xxx`` out of ``"[file:line: ]assert_xxx failed, ..."``."""
    head = message.split(' failed', 1)[0]
    return head.rsplit(': ', 1)[-1]


type TestContext = FailureReporter | unittest.TestCase | None


def resolve_reporter(t: object, operation: str) -> FailureReporter:
    """Turn the ``t`` argument of an assertion into a FailureReporter.

    Raises:
        MisuseError: If ``t`` is neither a reporter, a TestCase, nor None.
    """
    if t is None:
        if get_config().reporter is ReporterKind.PYTEST:
            return PytestReporter()
        return RaisingReporter()
    if isinstance(t, unittest.TestCase):
        return TestCaseReporter(t)
    if isinstance(t, FailureReporter):
        return t
    raise MisuseError(operation, f'test context of type {type(t).__name__} without a fatal() method')
