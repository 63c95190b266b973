"""Failure message formatting and the @assertion decorator.

Message layout, one line:

    [<file>:<line>: ]<operation> failed[, <name> = <repr>, ...][, <annotation>]

The annotation is the caller's extra arguments joined with no separator,
``str(a)`` each, so ``('id=', 7)`` becomes ``'id=7'``.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from typing import Any, NoReturn

import wrapt

from klaw_assert._config import get_config
from klaw_assert._logging import get_logger
from klaw_assert.errors import Failure, MisuseError
from klaw_assert.reporter import StructuredReporter, resolve_reporter

__all__ = ['annotation', 'assertion', 'caller_location', 'describe', 'fail']

# Frames from these top-level packages are never the caller.
_SKIPPED = frozenset({__name__.partition('.')[0], 'wrapt'})

logger = get_logger(__name__)


def annotation(args: tuple[object, ...]) -> str:
    """Concatenate the extra message arguments positionally, no separator."""
    return ''.join(str(a) for a in args)


def describe(**values: Any) -> str:
    """Render ``name = repr(value)`` pairs, in call order."""
    return ', '.join(f'{name.rstrip("_")} = {value!r}' for name, value in values.items())


def caller_location() -> str | None:
    """``"file:line"`` of the first frame outside this package."""
    frame = sys._getframe(1)  # noqa: SLF001
    while frame is not None and frame.f_globals.get('__name__', '').partition('.')[0] in _SKIPPED:
        frame = frame.f_back
    if frame is None:
        return None
    return f'{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}'


def fail(t: object, operation: str, detail: str, args: tuple[object, ...]) -> NoReturn:
    """Format the failure message and hand it to the test context.

    A StructuredReporter receives the Failure record, any other reporter the
    message. Never returns: if the reporter comes back, FailureError is
    raised here instead.
    """
    message = f'{operation} failed'
    if detail:
        message = f'{message}, {detail}'
    note = annotation(args)
    if note:
        message = f'{message}, {note}'

    location = caller_location() if get_config().caller_location else None
    if location is not None:
        message = f'{location}: {message}'

    failure = Failure(operation=operation, message=message, location=location)
    logger.debug('assertion_failed', operation=operation, location=location)
    reporter = resolve_reporter(t, operation)
    if isinstance(reporter, StructuredReporter):
        reporter.report(failure)
    else:
        reporter.fatal(message)
    raise failure.to_exception()


def _context_of(args: tuple[Any, ...], kwargs: dict[str, Any]) -> object:
    if args:
        return args[0]
    return kwargs.get('t')


@wrapt.decorator
def assertion(
    wrapped: Callable[..., None],
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> None:
    """Decorator for ``assert_*`` functions.

    Checks the test context before the predicate runs, so a bad context is a
    misuse even when the assertion would pass, and logs every misuse.
    """
    try:
        resolve_reporter(_context_of(args, kwargs), wrapped.__name__)
        wrapped(*args, **kwargs)
    except MisuseError as e:
        logger.warning('assertion_misuse', operation=e.operation, reason=e.reason)
        raise
