"""Regular expression assertions.

Matching is unanchored (``re.search``); anchor with ``^``/``$`` in the
pattern. A pattern that does not compile fails the assertion with the
compile error in the message, distinct from a plain non-match.
"""

from __future__ import annotations

import re
from typing import Any

from klaw_assert.assertions._report import assertion, describe, fail
from klaw_assert.errors import MisuseError
from klaw_assert.guard import safe
from klaw_assert.result import Err, Ok

__all__ = ['assert_match', 'assert_match_string']

_BYTES_LIKE = (bytes, bytearray, memoryview)


@safe(exceptions=(re.error,))
def _compile(pattern: str | bytes) -> re.Pattern[Any]:
    return re.compile(pattern)


def _search(pattern: str | bytes, got: str | bytes) -> Ok[bool] | Err[re.error]:
    """Ok(matched) or Err(compile error)."""
    return _compile(pattern).map(lambda compiled: compiled.search(got) is not None)


def _check(t: object, operation: str, pattern: str | bytes, got: Any, args: tuple[object, ...]) -> None:
    outcome = _search(pattern, got)
    match outcome:
        case Err(error):
            fail(t, operation, f'{describe(expected=pattern, got=got)}, err = {error}', args)
        case Ok(False):
            fail(t, operation, describe(expected=pattern, got=got), args)


@assertion
def assert_match(t: object, pattern: str | bytes, got: Any, *args: object) -> None:
    """Fail unless ``pattern`` matches somewhere in ``got``.

    ``got`` may be ``bytes``, ``bytearray``, ``memoryview`` or ``str``. A
    ``str`` pattern is UTF-8 encoded to match bytes input, and a ``bytes``
    pattern is decoded to match ``str`` input.

    Raises:
        MisuseError: If ``pattern`` or ``got`` is not text or bytes, or the
            pattern cannot be converted to the type of ``got``.
    """
    if not isinstance(pattern, (str, bytes)):
        raise MisuseError('assert_match', f'pattern of type {type(pattern).__name__}')
    if isinstance(got, _BYTES_LIKE):
        data: str | bytes = bytes(got)
    elif isinstance(got, str):
        data = got
    else:
        raise MisuseError('assert_match', f'value of type {type(got).__name__}, expected bytes or str')
    try:
        if isinstance(data, bytes) and isinstance(pattern, str):
            pattern = pattern.encode()
        elif isinstance(data, str) and isinstance(pattern, bytes):
            pattern = pattern.decode()
    except UnicodeError as e:
        raise MisuseError('assert_match', f'pattern {pattern!r} that is not valid UTF-8 ({e})') from e
    _check(t, 'assert_match', pattern, data, args)


@assertion
def assert_match_string(t: object, pattern: str, got: str, *args: object) -> None:
    """Fail unless ``pattern`` matches somewhere in the string ``got``.

    Raises:
        MisuseError: If ``pattern`` or ``got`` is not a str.
    """
    if not isinstance(pattern, str):
        raise MisuseError('assert_match_string', f'pattern of type {type(pattern).__name__}')
    if not isinstance(got, str):
        raise MisuseError('assert_match_string', f'value of type {type(got).__name__}, expected str')
    _check(t, 'assert_match_string', pattern, got, args)
