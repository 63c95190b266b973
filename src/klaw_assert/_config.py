"""Assertion configuration: ReporterKind, AssertConfig, and configure()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from klaw_assert._logging import configure_logging

__all__ = [
    'AssertConfig',
    'ReporterKind',
    'configure',
    'get_config',
    'reset_config',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})


class ReporterKind(Enum):
    """Reporter used when an assertion is given no test context."""

    RAISE = 'raise'
    PYTEST = 'pytest'


@dataclass(frozen=True)
class AssertConfig:
    """Configuration shared by every assertion.

    Attributes:
        caller_location: Prefix failure messages with the caller's "file:line".
        reporter: Default reporter for calls made with ``t=None``.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    caller_location: bool = False
    reporter: ReporterKind = ReporterKind.RAISE
    log_level: str | None = None


# Active configuration (set by configure())
_config: AssertConfig | None = None


def _detect_caller_location() -> bool:
    """Read KLAW_ASSERT_CALLER_LOCATION; unknown values mean off."""
    raw = os.environ.get('KLAW_ASSERT_CALLER_LOCATION', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw not in _FALSY:
        logging.getLogger(__name__).warning(
            "Unknown KLAW_ASSERT_CALLER_LOCATION value '%s', defaulting to off", raw
        )
    return False


def _detect_reporter() -> ReporterKind:
    """Detect the default reporter from environment.

    Priority:
    1. KLAW_ASSERT_REPORTER environment variable ("raise" or "pytest")
    2. Default to RAISE
    """
    env_reporter = os.environ.get('KLAW_ASSERT_REPORTER', '').strip().lower()
    if not env_reporter:
        return ReporterKind.RAISE
    try:
        return ReporterKind(env_reporter)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Unknown KLAW_ASSERT_REPORTER value '%s', defaulting to raise", env_reporter
        )
        return ReporterKind.RAISE


def configure(
    caller_location: bool | None = None,
    reporter: ReporterKind | str | None = None,
    log_level: str | None = None,
) -> AssertConfig:
    """Set the process-wide assertion configuration.

    Args:
        caller_location: Prefix failures with the caller's location.
            Read from KLAW_ASSERT_CALLER_LOCATION if None.
        reporter: Default reporter for ``t=None`` calls, as ReporterKind or
            string ("raise", "pytest"). Read from KLAW_ASSERT_REPORTER if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The AssertConfig that was set.

    Example:
        ```python
        from klaw_assert import configure

        # Everything from the environment
        configure()

        # Explicit configuration
        configure(caller_location=True, reporter='pytest', log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if caller_location is None:
        resolved_location = _detect_caller_location()
    else:
        resolved_location = caller_location

    if reporter is None:
        resolved_reporter = _detect_reporter()
    elif isinstance(reporter, str):
        resolved_reporter = ReporterKind(reporter.lower())
    else:
        resolved_reporter = reporter

    _config = AssertConfig(
        caller_location=resolved_location,
        reporter=resolved_reporter,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> AssertConfig:
    """Get the active configuration, reading the environment on first use.

    Returns:
        The current AssertConfig.
    """
    if _config is None:
        return configure()
    return _config


def reset_config() -> None:
    """Forget the active configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
