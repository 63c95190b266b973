"""Assertion functions: every assert_* takes the test context first."""

from klaw_assert.assertions.basic import (
    assert_,
    assert_between,
    assert_eq,
    assert_equal,
    assert_false,
    assert_implements,
    assert_ne,
    assert_near,
    assert_nil,
    assert_not_between,
    assert_not_equal,
    assert_not_nil,
    assert_not_zero,
    assert_same_type,
    assert_true,
    assert_zero,
)
from klaw_assert.assertions.containers import (
    assert_map_contain,
    assert_map_contain_key,
    assert_map_contain_value,
    assert_map_not_contain,
    assert_map_not_contain_key,
    assert_map_not_contain_value,
    assert_slice_contain,
    assert_slice_not_contain,
)
from klaw_assert.assertions.files import assert_file_exists, assert_file_not_exists
from klaw_assert.assertions.match import assert_match, assert_match_string
from klaw_assert.assertions.panic import assert_not_panic, assert_panic

__all__ = [
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
]
