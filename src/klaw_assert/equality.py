"""Deep equality, numeric classification and zero values.

``deep_equal`` is strict: two values of different exact types are never
equal, so ``1`` and ``1.0`` differ, as do ``[1]`` and ``(1,)``. Containers
and records are compared recursively.

``numerically_equal`` is the loose path: any two numbers whose canonical
decimal text matches are equal, whatever their width or kind. The text key
is exact, so two floats that print the same compare equal even if their
unprinted low-order bits differ, and ``nan`` equals ``nan``.

Example:
    ```python
    deep_equal({'a': [1, 2]}, {'a': [1, 2]})
    # True
    deep_equal(5, 5.0)
    # False
    numerically_equal(5, 5.0)
    # True
    numeric_kind(True)
    # <NumericKind.NOT_NUMBER: 'not_number'>
    ```
"""

from __future__ import annotations

import dataclasses
import math
import numbers
import types
from collections.abc import Callable, Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

import msgspec
import wrapt

from klaw_assert.dispatch import dispatch
from klaw_assert.errors import MisuseError

__all__ = [
    'NumericKind',
    'canonical_text',
    'deep_equal',
    'is_zero',
    'loose_equal',
    'numeric_kind',
    'numerically_equal',
    'zero_value',
]

# Compared with their own __eq__ rather than element by element.
_ATOMIC_SEQUENCES = (str, bytes, bytearray, memoryview, range)


def _is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _is_struct(value: Any) -> bool:
    return isinstance(value, msgspec.Struct)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _ATOMIC_SEQUENCES)


def _record_fields(value: Any) -> tuple[str, ...]:
    if _is_struct(value):
        return value.__struct_fields__
    return tuple(f.name for f in dataclasses.fields(value))


def _state(value: Any) -> dict[str, Any]:
    """Instance attributes of a plain object, from __dict__ and __slots__."""
    state = dict(getattr(value, '__dict__', {}))
    for cls in type(value).__mro__:
        for name in getattr(cls, '__slots__', ()):
            if name in ('__dict__', '__weakref__') or name in state:
                continue
            try:
                state[name] = getattr(value, name)
            except AttributeError:
                continue  # unset slot
    return state


# ---------------------------------------------------------------------
# Deep equality
# ---------------------------------------------------------------------


def deep_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` and ``b`` are structurally equal.

    Rules:
        - different exact types are unequal, at every depth
        - sequences: same length, element-wise deep equality
        - mappings: deep-equal keys with deep-equal values
        - sets: every element deep-equal to a distinct element of the other
        - dataclasses and msgspec Structs: field-wise deep equality
        - exceptions: same args and attributes
        - functions, classes and modules: identity (bound methods use their
          own ``__eq__``)
        - other objects: their own ``__eq__`` if they define one, otherwise
          their attributes; objects with no attributes at all (iterators,
          locks, bare ``object()``) fall back to identity
        - floats follow IEEE, so ``nan`` is not equal to ``nan``

    Cyclic containers are handled: a pair already under comparison counts as
    equal.
    """
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    if type(a) is not type(b):
        return False
    return _compare(a, b, visited)


@wrapt.decorator
def _cycle_safe(
    wrapped: Callable[..., bool],
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> bool:
    """Short-circuit identical values and pairs already under comparison."""
    a, b, visited = args
    if a is b:
        return True
    key = (id(a), id(b))
    if key in visited:
        return True
    visited.add(key)
    try:
        return wrapped(a, b, visited)
    finally:
        visited.discard(key)


@dispatch
def _compare(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    if type(a).__eq__ is not object.__eq__:
        return bool(a == b)
    if not _state(a) and not _state(b):
        return a is b
    return _compare_state(a, b, visited)


@_cycle_safe
def _compare_state(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    sa, sb = _state(a), _state(b)
    if sa.keys() != sb.keys():
        return False
    return all(_deep_equal(sa[k], sb[k], visited) for k in sa)


@_compare.instance(types.FunctionType, types.ModuleType, type)
def _compare_identity(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    return a is b


@_compare.instance(float)
def _compare_float(a: float, b: float, visited: set[tuple[int, int]]) -> bool:
    return a == b


@_compare.instance(BaseException)
def _compare_exception(a: BaseException, b: BaseException, visited: set[tuple[int, int]]) -> bool:
    return _deep_equal(a.args, b.args, visited) and _compare_state(a, b, visited)


@_compare.when(_is_record)
@_compare.when(_is_struct)
@_cycle_safe
def _compare_record(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    return all(_deep_equal(getattr(a, name), getattr(b, name), visited) for name in _record_fields(a))


@_compare.when(_is_sequence)
@_cycle_safe
def _compare_sequence(a: Sequence[Any], b: Sequence[Any], visited: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    return all(_deep_equal(x, y, visited) for x, y in zip(a, b, strict=True))


def _find_match(item: Any, candidates: list[Any], visited: set[tuple[int, int]]) -> Any:
    """Pop and return the first candidate deep-equal to ``item``, or _MISSING."""
    for i, candidate in enumerate(candidates):
        if _deep_equal(item, candidate, visited):
            return candidates.pop(i)
    return _MISSING


@_compare.when(lambda v: isinstance(v, Mapping))
@_cycle_safe
def _compare_mapping(a: Mapping[Any, Any], b: Mapping[Any, Any], visited: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    unmatched = list(b)
    for ka, va in a.items():
        kb = _find_match(ka, unmatched, visited)
        if kb is _MISSING or not _deep_equal(va, b[kb], visited):
            return False
    return True


@_compare.when(lambda v: isinstance(v, Set))
@_cycle_safe
def _compare_set(a: Set[Any], b: Set[Any], visited: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    unmatched = list(b)
    return all(_find_match(x, unmatched, visited) is not _MISSING for x in a)


_MISSING = object()


# ---------------------------------------------------------------------
# Numeric classification
# ---------------------------------------------------------------------


class NumericKind(Enum):
    """Runtime numeric category of a value."""

    INT = 'int'
    UINT = 'uint'
    FLOAT = 'float'
    COMPLEX = 'complex'
    NOT_NUMBER = 'not_number'


_DTYPE_KINDS = {
    'i': NumericKind.INT,
    'u': NumericKind.UINT,
    'f': NumericKind.FLOAT,
    'c': NumericKind.COMPLEX,
}


@dispatch
def numeric_kind(value: Any) -> NumericKind:
    """Classify ``value`` as INT, UINT, FLOAT, COMPLEX or NOT_NUMBER.

    ``bool`` is not a number. Array scalars (anything with a ``dtype.kind``
    and ``ndim == 0``) are classified by their dtype, which is the only way
    to get UINT.
    """
    kind = getattr(getattr(value, 'dtype', None), 'kind', None)
    if isinstance(kind, str) and getattr(value, 'ndim', None) == 0:
        return _DTYPE_KINDS.get(kind, NumericKind.NOT_NUMBER)
    if isinstance(value, bool):
        return NumericKind.NOT_NUMBER
    if isinstance(value, numbers.Integral):
        return NumericKind.INT
    if isinstance(value, numbers.Real):
        return NumericKind.FLOAT
    if isinstance(value, numbers.Complex):
        return NumericKind.COMPLEX
    return NumericKind.NOT_NUMBER


@numeric_kind.instance(bool)
def _bool_kind(value: bool) -> NumericKind:
    return NumericKind.NOT_NUMBER


@numeric_kind.instance(int)
def _int_kind(value: int) -> NumericKind:
    return NumericKind.INT


@numeric_kind.instance(float, Decimal, Fraction)
def _float_kind(value: Any) -> NumericKind:
    return NumericKind.FLOAT


@numeric_kind.instance(complex)
def _complex_kind(value: complex) -> NumericKind:
    return NumericKind.COMPLEX


def _real_text(value: Any) -> str:
    try:
        f = float(value)
    except OverflowError:
        return str(value)
    if math.isnan(f):
        return 'NaN'
    if math.isinf(f):
        return '+Inf' if f > 0 else '-Inf'
    text = repr(f)
    return text.removesuffix('.0')


def canonical_text(value: Any) -> str:
    """Decimal text used as the numeric equality key.

    Integers print as ``str(int(v))``. Reals print as the shortest
    round-trip float text with a trailing ``.0`` dropped, so ``5.0`` and ``5``
    share the key ``"5"``. Complex numbers print as ``(re+imi)``.

    Raises:
        MisuseError: If ``value`` is not a number.
    """
    kind = numeric_kind(value)
    if kind in (NumericKind.INT, NumericKind.UINT):
        return str(int(value))
    if kind is NumericKind.FLOAT:
        return _real_text(value)
    if kind is NumericKind.COMPLEX:
        c = complex(value)
        imag = _real_text(c.imag)
        if not imag.startswith(('-', '+')):
            imag = '+' + imag
        return f'({_real_text(c.real)}{imag}i)'
    raise MisuseError('canonical_text', f'non-numeric value of type {type(value).__name__}')


def numerically_equal(a: Any, b: Any) -> bool:
    """True iff both values are numbers with the same canonical text."""
    if numeric_kind(a) is NumericKind.NOT_NUMBER or numeric_kind(b) is NumericKind.NOT_NUMBER:
        return False
    return canonical_text(a) == canonical_text(b)


def loose_equal(a: Any, b: Any) -> bool:
    """Numeric equality for two numbers, deep equality otherwise."""
    if numeric_kind(a) is not NumericKind.NOT_NUMBER and numeric_kind(b) is not NumericKind.NOT_NUMBER:
        return numerically_equal(a, b)
    return deep_equal(a, b)


# ---------------------------------------------------------------------
# Zero values
# ---------------------------------------------------------------------


@dispatch
def zero_value(value: Any) -> Any:
    """Return the zero-initialised value of ``type(value)``.

    Raises:
        MisuseError: If the type cannot be built without arguments.
    """
    try:
        return type(value)()
    except TypeError as e:
        raise MisuseError('zero_value', f'type {type(value).__name__} with no zero value') from e


@zero_value.instance(type(None))
def _zero_none(value: None) -> None:
    return None


@zero_value.when(_is_record)
def _zero_record(value: Any) -> Any:
    changes = {f.name: zero_value(getattr(value, f.name)) for f in dataclasses.fields(value) if f.init}
    return dataclasses.replace(value, **changes)


@zero_value.when(_is_struct)
def _zero_struct(value: msgspec.Struct) -> msgspec.Struct:
    changes = {name: zero_value(getattr(value, name)) for name in value.__struct_fields__}
    return msgspec.structs.replace(value, **changes)


@dispatch
def is_zero(value: Any) -> bool:
    """True if ``value`` deep-equals the zero value of its own type."""
    return deep_equal(zero_value(value), value)


@is_zero.instance(type(None))
def _none_is_zero(value: None) -> bool:
    return True


@is_zero.when(_is_record)
@is_zero.when(_is_struct)
def _record_is_zero(value: Any) -> bool:
    return all(is_zero(getattr(value, name)) for name in _record_fields(value))
