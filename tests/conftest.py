"""Pytest configuration and shared fixtures for klaw-assert tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from klaw_assert import RecordingReporter, clear_log_hooks, reset_config


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from the environment defaults, with no log hooks."""
    monkeypatch.delenv('KLAW_ASSERT_CALLER_LOCATION', raising=False)
    monkeypatch.delenv('KLAW_ASSERT_REPORTER', raising=False)
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def t() -> RecordingReporter:
    """A reporter that records failures and raises FailureError."""
    return RecordingReporter()
