"""Panic assertions: did a callable raise?

The callable runs once, synchronously, inside the guarded region
(``klaw_assert.guard.guarded``), which turns a raised ``Exception`` into
``Err(exception)``. A failure from an assertion made inside the callable is
not a panic and propagates as the test's own failure, as do
``KeyboardInterrupt``, ``SystemExit`` and other non-``Exception`` signals.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_assert.assertions._report import assertion, fail
from klaw_assert.errors import MisuseError
from klaw_assert.guard import guarded
from klaw_assert.result import Err, Ok

__all__ = ['assert_not_panic', 'assert_panic']


def _require_callable(operation: str, fn: Any) -> Callable[[], Any]:
    if not callable(fn):
        raise MisuseError(operation, f'non-callable value of type {type(fn).__name__}')
    return fn


@assertion
def assert_panic(t: object, fn: Callable[[], Any], *args: object) -> None:
    """Fail unless calling ``fn()`` raises.

    Raises:
        MisuseError: If ``fn`` is not callable.
    """
    match guarded(_require_callable('assert_panic', fn)):
        case Ok(value):
            fail(t, 'assert_panic', f'fn = {_name_of(fn)}, returned = {value!r}', args)
        case Err(_):
            pass


@assertion
def assert_not_panic(t: object, fn: Callable[[], Any], *args: object) -> None:
    """Fail if calling ``fn()`` raises; the message carries the exception.

    Raises:
        MisuseError: If ``fn`` is not callable.
    """
    match guarded(_require_callable('assert_not_panic', fn)):
        case Err(error):
            fail(t, 'assert_not_panic', f'fn = {_name_of(fn)}, panic = {error!r}', args)
        case Ok(_):
            pass


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, '__qualname__', None) or repr(fn)
