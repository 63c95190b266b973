"""Guarded region: run a callable and capture how it ended.

``safe`` turns a function into one that returns ``Ok(value)`` on a normal
return and ``Err(exception)`` when it raises. ``guarded`` is the one-shot
form used by the panic assertions.

A failure raised by a nested assertion is never captured: it belongs to the
test, not to the callable under test.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from klaw_assert.errors import FailureError
from klaw_assert.result import Err, Ok

__all__ = ['guarded', 'safe']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[..., Any]], Callable[..., Ok[Any] | Err[E]]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Ok[Any] | Err[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(OSError,))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except FailureError:
            raise
        except catch as e:
            return Err(e)
        return Ok(result)

    if func is not None:
        return wrapper(func)
    return wrapper


def guarded[T](func: Callable[..., T], /, *args: Any, **kwargs: Any) -> Ok[T] | Err[Exception]:
    """Call ``func`` once inside the guarded region.

    Returns:
        Ok(return value) if the call returned, Err(exception) if it raised.
    """
    return safe(func)(*args, **kwargs)
