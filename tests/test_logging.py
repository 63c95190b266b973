"""Tests for structured logging and log hooks."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

import pytest

from klaw_assert import (
    FailureError,
    MisuseError,
    RecordingReporter,
    add_log_hook,
    assert_between,
    assert_equal,
    clear_log_hooks,
    configure,
    configure_logging,
    remove_log_hook,
)
from klaw_assert._logging import LOGGER_NAME, get_logger


@pytest.fixture(autouse=True)
def restore_library_logger() -> Iterator[None]:
    """Undo configure_logging() changes to the library logger."""
    lib_logger = logging.getLogger(LOGGER_NAME)
    handlers = list(lib_logger.handlers)
    level = lib_logger.level
    propagate = lib_logger.propagate
    yield
    lib_logger.handlers[:] = handlers
    lib_logger.setLevel(level)
    lib_logger.propagate = propagate


@pytest.fixture
def events() -> list[dict[str, Any]]:
    """Event dicts seen by a registered log hook."""
    seen: list[dict[str, Any]] = []
    add_log_hook(seen.append)
    return seen


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_level_and_handler(self) -> None:
        configure_logging('DEBUG')
        lib_logger = logging.getLogger(LOGGER_NAME)
        assert lib_logger.level == logging.DEBUG
        assert len(lib_logger.handlers) == 1
        assert lib_logger.propagate is False

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging('DEBUG')
        configure_logging('WARNING', json_output=False)
        lib_logger = logging.getLogger(LOGGER_NAME)
        assert lib_logger.level == logging.WARNING
        assert len(lib_logger.handlers) == 1

    def test_configure_with_log_level(self) -> None:
        config = configure(log_level='DEBUG')
        assert config.log_level == 'DEBUG'
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('DEBUG')
        get_logger('klaw_assert.test').info('hello', answer=42)
        entry = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert entry['event'] == 'hello'
        assert entry['answer'] == 42
        assert entry['level'] == 'info'

    def test_silent_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger().warning('quiet')
        assert capsys.readouterr().err == ''


class TestAssertionEvents:
    """Tests for the events assertions log."""

    def test_failure_event_at_debug(self, events: list[dict[str, Any]]) -> None:
        configure_logging('DEBUG')
        with pytest.raises(FailureError):
            assert_equal(RecordingReporter(), 1, 2)
        failed = [e for e in events if e['event'] == 'assertion_failed']
        assert len(failed) == 1
        assert failed[0]['operation'] == 'assert_equal'
        assert failed[0]['location'] is None
        assert failed[0]['level'] == 'debug'

    def test_failure_event_carries_location(self, events: list[dict[str, Any]]) -> None:
        configure(caller_location=True, log_level='DEBUG')
        with pytest.raises(FailureError):
            assert_equal(RecordingReporter(), 1, 2)
        failed = [e for e in events if e['event'] == 'assertion_failed']
        assert failed[0]['location'].startswith('test_logging.py:')

    def test_failure_event_filtered_at_info(self, events: list[dict[str, Any]]) -> None:
        configure_logging('INFO')
        with pytest.raises(FailureError):
            assert_equal(RecordingReporter(), 1, 2)
        assert not [e for e in events if e['event'] == 'assertion_failed']

    def test_misuse_event_at_warning(self, events: list[dict[str, Any]]) -> None:
        configure_logging('WARNING')
        with pytest.raises(MisuseError):
            assert_between(RecordingReporter(), 'a', 'z', 'm')
        misuse = [e for e in events if e['event'] == 'assertion_misuse']
        assert len(misuse) == 1
        assert misuse[0]['operation'] == 'assert_between'
        assert misuse[0]['reason'].startswith('min of type str')


class TestLogHooks:
    """Tests for log hook registration."""

    def test_remove_hook(self) -> None:
        seen: list[dict[str, Any]] = []
        add_log_hook(seen.append)
        remove_log_hook(seen.append)
        configure_logging('DEBUG')
        get_logger().info('ignored')
        assert seen == []

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(print)

    def test_clear_hooks(self, events: list[dict[str, Any]]) -> None:
        clear_log_hooks()
        configure_logging('DEBUG')
        get_logger().info('ignored')
        assert events == []

    def test_hook_receives_copy(self, events: list[dict[str, Any]]) -> None:
        def vandal(entry: dict[str, Any]) -> None:
            entry['event'] = 'changed'

        add_log_hook(vandal)
        configure_logging('DEBUG')
        get_logger().info('original')
        assert events[-1]['event'] == 'original'

    def test_failing_hook_does_not_break_logging(self, events: list[dict[str, Any]]) -> None:
        def broken(entry: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        add_log_hook(broken)
        add_log_hook(events.append)
        configure_logging('DEBUG')
        get_logger().info('still logged')
        assert [e['event'] for e in events] == ['still logged', 'still logged']
