"""Truth, equality, proximity, range, nil, zero and type assertions."""

from __future__ import annotations

from typing import Any

from klaw_assert.assertions._report import assertion, describe, fail
from klaw_assert.equality import NumericKind, deep_equal, is_zero, loose_equal, numeric_kind
from klaw_assert.errors import MisuseError

__all__ = [
    'assert_',
    'assert_between',
    'assert_eq',
    'assert_equal',
    'assert_false',
    'assert_implements',
    'assert_ne',
    'assert_near',
    'assert_nil',
    'assert_not_between',
    'assert_not_equal',
    'assert_not_nil',
    'assert_not_zero',
    'assert_same_type',
    'assert_true',
    'assert_zero',
]

_REAL_KINDS = (NumericKind.INT, NumericKind.UINT, NumericKind.FLOAT)


def _require_numbers(operation: str, *, real: bool, **values: Any) -> None:
    for name, value in values.items():
        kind = numeric_kind(value)
        if kind is NumericKind.NOT_NUMBER or (real and kind not in _REAL_KINDS):
            expected = 'a real number' if real else 'a number'
            raise MisuseError(operation, f'{name.rstrip("_")} of type {type(value).__name__}, expected {expected}')


def _distance(a: Any, b: Any) -> Any:
    try:
        return abs(a - b)
    except TypeError:
        # e.g. Decimal and float do not mix
        if NumericKind.COMPLEX in (numeric_kind(a), numeric_kind(b)):
            return abs(complex(a) - complex(b))
        return abs(float(a) - float(b))


# --- Truth ---


@assertion
def assert_(t: object, condition: Any, *args: object) -> None:
    """Fail unless ``condition`` is truthy."""
    if not condition:
        fail(t, 'assert_', '', args)


@assertion
def assert_true(t: object, condition: Any, *args: object) -> None:
    """Fail unless ``condition`` is the ``True`` singleton."""
    if condition is not True:
        fail(t, 'assert_true', describe(condition=condition), args)


@assertion
def assert_false(t: object, condition: Any, *args: object) -> None:
    """Fail unless ``condition`` is the ``False`` singleton."""
    if condition is not False:
        fail(t, 'assert_false', describe(condition=condition), args)


# --- Equality ---


@assertion
def assert_equal(t: object, expected: Any, got: Any, *args: object) -> None:
    """Fail unless ``expected`` and ``got`` are deep-equal (same types throughout)."""
    if not deep_equal(expected, got):
        fail(t, 'assert_equal', describe(expected=expected, got=got), args)


@assertion
def assert_not_equal(t: object, expected: Any, got: Any, *args: object) -> None:
    """Fail if ``expected`` and ``got`` are deep-equal."""
    if deep_equal(expected, got):
        fail(t, 'assert_not_equal', describe(expected=expected, got=got), args)


@assertion
def assert_eq(t: object, expected: Any, got: Any, *args: object) -> None:
    """Like assert_equal, but two numbers only need the same decimal text.

    ``assert_eq(t, 5, 5.0)`` passes where ``assert_equal`` fails.
    """
    if not loose_equal(expected, got):
        fail(t, 'assert_eq', describe(expected=expected, got=got), args)


@assertion
def assert_ne(t: object, expected: Any, got: Any, *args: object) -> None:
    """Negation of assert_eq."""
    if loose_equal(expected, got):
        fail(t, 'assert_ne', describe(expected=expected, got=got), args)


# --- Proximity and ranges ---


@assertion
def assert_near(t: object, expected: Any, got: Any, abs_: Any, *args: object) -> None:
    """Fail unless ``|expected - got| <= abs_``.

    Raises:
        MisuseError: If an argument is not a number, or ``abs_`` is not real.
    """
    _require_numbers('assert_near', real=False, expected=expected, got=got)
    _require_numbers('assert_near', real=True, abs_=abs_)
    if not _distance(expected, got) <= abs_:
        fail(t, 'assert_near', describe(expected=expected, got=got, abs_=abs_), args)


@assertion
def assert_between(t: object, min_: Any, max_: Any, val: Any, *args: object) -> None:
    """Fail unless ``min_ <= val <= max_`` (both ends inclusive).

    Fails only when ``val < min_`` or ``val > max_``. Every comparison with
    NaN is false, so a NaN ``val`` passes both this and assert_not_between.

    Raises:
        MisuseError: If an argument is not a real number.
    """
    _require_numbers('assert_between', real=True, min_=min_, max_=max_, val=val)
    if val < min_ or max_ < val:
        fail(t, 'assert_between', describe(min_=min_, max_=max_, val=val), args)


@assertion
def assert_not_between(t: object, min_: Any, max_: Any, val: Any, *args: object) -> None:
    """Fail if ``min_ <= val <= max_``.

    A NaN ``val`` is never inside the range, so it passes (as it also does
    for assert_between).

    Raises:
        MisuseError: If an argument is not a real number.
    """
    _require_numbers('assert_not_between', real=True, min_=min_, max_=max_, val=val)
    if min_ <= val <= max_:
        fail(t, 'assert_not_between', describe(min_=min_, max_=max_, val=val), args)


# --- Nil ---


@assertion
def assert_nil(t: object, val: Any, *args: object) -> None:
    """Fail unless ``val`` is None.

    An exception passed as ``val`` also shows its text as ``err``.
    """
    if val is not None:
        detail = describe(val=val)
        if isinstance(val, BaseException):
            detail = f'{detail}, err = {val}'
        fail(t, 'assert_nil', detail, args)


@assertion
def assert_not_nil(t: object, val: Any, *args: object) -> None:
    """Fail if ``val`` is None."""
    if val is None:
        fail(t, 'assert_not_nil', describe(val=val), args)


# --- Zero values ---


@assertion
def assert_zero(t: object, val: Any, *args: object) -> None:
    """Fail unless ``val`` equals the zero value of its own type.

    Raises:
        MisuseError: If the type has no zero value.
    """
    if not is_zero(val):
        fail(t, 'assert_zero', describe(val=val), args)


@assertion
def assert_not_zero(t: object, val: Any, *args: object) -> None:
    """Fail if ``val`` equals the zero value of its own type.

    Raises:
        MisuseError: If the type has no zero value.
    """
    if is_zero(val):
        fail(t, 'assert_not_zero', describe(val=val), args)


# --- Types ---


def _type_name(tp: Any) -> str:
    if isinstance(tp, tuple):
        return '(' + ', '.join(_type_name(x) for x in tp) + ')'
    return getattr(tp, '__qualname__', None) or repr(tp)


@assertion
def assert_implements(t: object, val: Any, iface: Any, *args: object) -> None:
    """Fail unless ``val`` is an instance of ``iface``.

    ``iface`` may be a class, an ABC, a runtime-checkable Protocol, a union or
    a tuple of these.

    Raises:
        MisuseError: If ``iface`` cannot be used with isinstance.
    """
    try:
        implemented = isinstance(val, iface)
    except TypeError as e:
        raise MisuseError('assert_implements', f'iface {iface!r} ({e})') from e
    if not implemented:
        detail = f'{describe(val=val)}, type = {_type_name(type(val))}, iface = {_type_name(iface)}'
        fail(t, 'assert_implements', detail, args)


@assertion
def assert_same_type(t: object, a: Any, b: Any, *args: object) -> None:
    """Fail unless ``type(a) is type(b)``."""
    if type(a) is not type(b):
        detail = f'{describe(a=a, b=b)}, types = {_type_name(type(a))} != {_type_name(type(b))}'
        fail(t, 'assert_same_type', detail, args)
