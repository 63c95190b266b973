"""klaw-assert: assertion helpers for test suites.

Each ``assert_*`` function takes a test context first (a reporter with a
``fatal(message)`` method, a ``unittest.TestCase``, or ``None`` for the
configured default), checks one predicate, and on failure reports a single
line such as ``assert_equal failed, expected = 2, got = 3``.

Flat imports (preferred):
    from klaw_assert import assert_equal, assert_panic, RecordingReporter
    from klaw_assert import deep_equal, numerically_equal, configure

Submodule imports (for organization):
    from klaw_assert.assertions import assert_slice_contain
    from klaw_assert.equality import NumericKind, numeric_kind
    from klaw_assert.guard import guarded, safe

Example:
    ```python
    from klaw_assert import assert_between, assert_match

    def test_user():
        assert_between(None, 0, 255, 128)
        assert_match(None, r'^\\w+@\\w+\\.com$', 'user@example.com')
    ```
"""

# Configuration
from klaw_assert._config import AssertConfig, ReporterKind, configure, get_config, reset_config

# Logging
from klaw_assert._logging import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook

# Assertions
from klaw_assert.assertions import (
    assert_,
    assert_between,
    assert_eq,
    assert_equal,
    assert_false,
    assert_file_exists,
    assert_file_not_exists,
    assert_implements,
    assert_map_contain,
    assert_map_contain_key,
    assert_map_contain_value,
    assert_map_not_contain,
    assert_map_not_contain_key,
    assert_map_not_contain_value,
    assert_match,
    assert_match_string,
    assert_ne,
    assert_near,
    assert_nil,
    assert_not_between,
    assert_not_equal,
    assert_not_nil,
    assert_not_panic,
    assert_not_zero,
    assert_panic,
    assert_same_type,
    assert_slice_contain,
    assert_slice_not_contain,
    assert_true,
    assert_zero,
)

# Equality
from klaw_assert.equality import (
    NumericKind,
    canonical_text,
    deep_equal,
    is_zero,
    loose_equal,
    numeric_kind,
    numerically_equal,
    zero_value,
)

# Errors
from klaw_assert.errors import Failure, FailureError, Misuse, MisuseError

# Collaborators
from klaw_assert.filesystem import Filesystem, LocalFilesystem

# Guarded region
from klaw_assert.guard import guarded, safe
from klaw_assert.reporter import (
    FailureReporter,
    PytestReporter,
    RaisingReporter,
    RecordingReporter,
    StructuredReporter,
    TestCaseReporter,
    TestContext,
    resolve_reporter,
)
from klaw_assert.result import Err, Ok, Result

__all__ = [
    # Configuration
    'AssertConfig',
    # Outcomes
    'Err',
    # Errors
    'Failure',
    'FailureError',
    # Collaborators
    'FailureReporter',
    'Filesystem',
    'LocalFilesystem',
    'Misuse',
    'MisuseError',
    # Equality
    'NumericKind',
    'Ok',
    'PytestReporter',
    'RaisingReporter',
    'RecordingReporter',
    'ReporterKind',
    'Result',
    'StructuredReporter',
    'TestCaseReporter',
    'TestContext',
    # Logging
    'add_log_hook',
    # Assertions
    'assert_',
    'assert_between',
    'assert_eq',
    'assert_equal',
    'assert_false',
    'assert_file_exists',
    'assert_file_not_exists',
    'assert_implements',
    'assert_map_contain',
    'assert_map_contain_key',
    'assert_map_contain_value',
    'assert_map_not_contain',
    'assert_map_not_contain_key',
    'assert_map_not_contain_value',
    'assert_match',
    'assert_match_string',
    'assert_ne',
    'assert_near',
    'assert_nil',
    'assert_not_between',
    'assert_not_equal',
    'assert_not_nil',
    'assert_not_panic',
    'assert_not_zero',
    'assert_panic',
    'assert_same_type',
    'assert_slice_contain',
    'assert_slice_not_contain',
    'assert_true',
    'assert_zero',
    'canonical_text',
    'clear_log_hooks',
    'configure',
    'configure_logging',
    'deep_equal',
    'get_config',
    # Guarded region
    'guarded',
    'is_zero',
    'loose_equal',
    'numeric_kind',
    'numerically_equal',
    'remove_log_hook',
    'reset_config',
    'resolve_reporter',
    'safe',
    'zero_value',
]
