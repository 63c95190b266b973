"""Sequence and mapping membership assertions.

Membership is a linear scan with ``deep_equal`` per element, so
``assert_slice_contain(t, [1, 2], 2.0)`` fails. Passing something that is
not a sequence (or a mapping, for the ``assert_map_*`` family) raises
``MisuseError`` at once; it is never reported as a test failure.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from klaw_assert.assertions._report import assertion, describe, fail
from klaw_assert.equality import deep_equal
from klaw_assert.errors import MisuseError
from klaw_assert.result import Err, Ok

__all__ = [
    'assert_map_contain',
    'assert_map_contain_key',
    'assert_map_contain_value',
    'assert_map_not_contain',
    'assert_map_not_contain_key',
    'assert_map_not_contain_value',
    'assert_slice_contain',
    'assert_slice_not_contain',
]


def _require_sequence(operation: str, seq: Any) -> Sequence[Any]:
    # str is a Sequence of str, which makes element membership ambiguous
    if not isinstance(seq, Sequence) or isinstance(seq, str):
        raise MisuseError(operation, f'non-sequence value of type {type(seq).__name__}')
    return seq


def _require_mapping(operation: str, m: Any) -> Mapping[Any, Any]:
    if not isinstance(m, Mapping):
        raise MisuseError(operation, f'non-mapping value of type {type(m).__name__}')
    return m


def _contains(seq: Sequence[Any], elem: Any) -> bool:
    return any(deep_equal(item, elem) for item in seq)


def _lookup(m: Mapping[Any, Any], key: Any) -> Ok[Any] | Err[KeyError]:
    """Value stored under a key deep-equal to ``key``."""
    for k, v in m.items():
        if deep_equal(k, key):
            return Ok(v)
    return Err(KeyError(key))


# --- Sequences ---


@assertion
def assert_slice_contain(t: object, seq: Any, elem: Any, *args: object) -> None:
    """Fail unless some element of ``seq`` is deep-equal to ``elem``.

    Raises:
        MisuseError: If ``seq`` is not a sequence.
    """
    if not _contains(_require_sequence('assert_slice_contain', seq), elem):
        fail(t, 'assert_slice_contain', describe(slice=seq, elem=elem), args)


@assertion
def assert_slice_not_contain(t: object, seq: Any, elem: Any, *args: object) -> None:
    """Fail if some element of ``seq`` is deep-equal to ``elem``.

    Raises:
        MisuseError: If ``seq`` is not a sequence.
    """
    if _contains(_require_sequence('assert_slice_not_contain', seq), elem):
        fail(t, 'assert_slice_not_contain', describe(slice=seq, elem=elem), args)


# --- Mappings ---


@assertion
def assert_map_contain(t: object, m: Any, key: Any, elem: Any, *args: object) -> None:
    """Fail unless ``m`` maps ``key`` to a value deep-equal to ``elem``.

    Raises:
        MisuseError: If ``m`` is not a mapping.
    """
    found = _lookup(_require_mapping('assert_map_contain', m), key)
    if not (found.is_ok() and deep_equal(found.unwrap(), elem)):
        fail(t, 'assert_map_contain', describe(map=m, key=key, elem=elem), args)


@assertion
def assert_map_not_contain(t: object, m: Any, key: Any, elem: Any, *args: object) -> None:
    """Fail if ``m`` maps ``key`` to a value deep-equal to ``elem``.

    The same key holding a different value passes.

    Raises:
        MisuseError: If ``m`` is not a mapping.
    """
    found = _lookup(_require_mapping('assert_map_not_contain', m), key)
    if found.is_ok() and deep_equal(found.unwrap(), elem):
        fail(t, 'assert_map_not_contain', describe(map=m, key=key, elem=elem), args)


@assertion
def assert_map_contain_key(t: object, m: Any, key: Any, *args: object) -> None:
    """Fail unless ``m`` has a key deep-equal to ``key``.

    Raises:
        MisuseError: If ``m`` is not a mapping.
    """
    if _lookup(_require_mapping('assert_map_contain_key', m), key).is_err():
        fail(t, 'assert_map_contain_key', describe(map=m, key=key), args)


@assertion
def assert_map_not_contain_key(t: object, m: Any, key: Any, *args: object) -> None:
    """Fail if ``m`` has a key deep-equal to ``key``.

    Raises:
        MisuseError: If ``m`` is not a mapping.
    """
    if _lookup(_require_mapping('assert_map_not_contain_key', m), key).is_ok():
        fail(t, 'assert_map_not_contain_key', describe(map=m, key=key), args)


@assertion
def assert_map_contain_value(t: object, m: Any, elem: Any, *args: object) -> None:
    """Fail unless some value of ``m`` is deep-equal to ``elem``.

    Raises:
        MisuseError: If ``m`` is not a mapping.
    """
    if not _contains(list(_require_mapping('assert_map_contain_value', m).values()), elem):
        fail(t, 'assert_map_contain_value', describe(map=m, elem=elem), args)


@assertion
def assert_map_not_contain_value(t: object, m: Any, elem: Any, *args: object) -> None:
    """Fail if some value of ``m`` is deep-equal to ``elem``.

    Raises:
        MisuseError: If ``m`` is not a mapping.
    """
    if _contains(list(_require_mapping('assert_map_not_contain_value', m).values()), elem):
        fail(t, 'assert_map_not_contain_value', describe(map=m, elem=elem), args)
