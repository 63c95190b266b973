"""Tests for the Failure/Misuse struct and exception pairs."""

from __future__ import annotations

import msgspec
import pytest

from klaw_assert import Failure, FailureError, Misuse, MisuseError


class TestFailure:
    """Tests for Failure and FailureError."""

    def test_exception_is_assertion_error(self) -> None:
        assert issubclass(FailureError, AssertionError)

    def test_str_is_message(self) -> None:
        err = FailureError('assert_ failed', operation='assert_')
        assert str(err) == 'assert_ failed'
        assert err.operation == 'assert_'
        assert err.location is None

    def test_struct_round_trip(self) -> None:
        failure = Failure('assert_equal', 'x.py:3: assert_equal failed', 'x.py:3')
        err = failure.to_exception()
        assert isinstance(err, FailureError)
        assert err.to_struct() == failure

    def test_struct_without_operation(self) -> None:
        assert FailureError('boom').to_struct() == Failure('', 'boom')

    def test_struct_is_frozen(self) -> None:
        failure = Failure('assert_', 'assert_ failed')
        with pytest.raises(AttributeError):
            failure.message = 'changed'  # type: ignore[misc]

    def test_struct_serializes(self) -> None:
        failure = Failure('assert_', 'assert_ failed')
        data = msgspec.json.encode(failure)
        assert msgspec.json.decode(data, type=Failure) == failure


class TestMisuse:
    """Tests for Misuse and MisuseError."""

    def test_exception_is_type_error(self) -> None:
        assert issubclass(MisuseError, TypeError)
        assert not issubclass(MisuseError, AssertionError)

    def test_message(self) -> None:
        err = MisuseError('assert_near', 'got of type str')
        assert str(err) == 'assert_near called with got of type str'
        assert err.operation == 'assert_near'
        assert err.reason == 'got of type str'

    def test_struct_round_trip(self) -> None:
        misuse = Misuse('assert_match', 'pattern of type int')
        assert misuse.to_exception().to_struct() == misuse
