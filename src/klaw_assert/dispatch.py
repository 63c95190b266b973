"""@dispatch decorator: pick an implementation by the first argument's type.

Used by the equality and zero-value logic, which must treat records,
containers and numbers differently without a chain of isinstance checks.

Lookup order for a value ``v``:
    1. an instance registered for ``type(v)`` exactly
    2. the first predicate instance whose predicate accepts ``v``
    3. an instance registered for a base class in ``type(v).__mro__``
    4. the decorated function itself (the fallback)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['Dispatch', 'dispatch']

F = TypeVar('F', bound=Callable[..., Any])


class Dispatch(wrapt.ObjectProxy, Generic[F]):
    """A function with per-type implementations.

    Example:
        ```python
        @dispatch
        def describe(value) -> str:
            return 'something'

        @describe.instance(int)
        def describe_int(value: int) -> str:
            return 'an int'

        @describe.when(dataclasses.is_dataclass)
        def describe_record(value) -> str:
            return 'a record'

        describe(1)
        # 'an int'
        describe(None)
        # 'something'
        ```
    """

    def __init__(self, fallback: F) -> None:
        super().__init__(fallback)
        self._self_name = fallback.__name__
        self._self_fallback = fallback
        self._self_instances: dict[type, Callable[..., Any]] = {}
        self._self_predicates: list[tuple[Callable[[Any], bool], Callable[..., Any]]] = []

    def instance(self, *types: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for one or more types (and their subclasses)."""

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for type_ in types:
                self._self_instances[type_] = fn
            return fn

        return decorator

    def when(self, predicate: Callable[[Any], bool]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for values accepted by ``predicate``.

        Predicates are tried in registration order, after exact type matches
        and before base-class matches.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_predicates.append((predicate, fn))
            return fn

        return decorator

    def resolve(self, value: Any) -> Callable[..., Any]:
        """Return the implementation that would handle ``value``."""
        value_type = type(value)

        if value_type in self._self_instances:
            return self._self_instances[value_type]

        for predicate, fn in self._self_predicates:
            if predicate(value):
                return fn

        for base in value_type.__mro__[1:]:
            if base in self._self_instances:
                return self._self_instances[base]

        return self._self_fallback

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')
        return self.resolve(args[0])(*args, **kwargs)

    def __repr__(self) -> str:
        count = len(self._self_instances) + len(self._self_predicates)
        return f'<dispatch {self._self_name} with {count} instances>'


def dispatch(fn: F) -> Dispatch[F]:
    """Decorator turning ``fn`` into the fallback of a Dispatch."""
    return Dispatch(fn)
