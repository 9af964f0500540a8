"""Runtime type predicates used to validate inputs at the API boundary.

Every predicate accepts any value and returns a plain ``bool``. The two
absence markers are ``None`` ("no value") and ``msgspec.UNSET`` ("not yet
assigned"); both count as *missing*.

Examples:
    >>> is_missing(None), is_missing(msgspec.UNSET), is_missing(0)
    (True, True, False)
    >>> is_array_of([1, 2.5], is_number)
    True
    >>> is_one_of(True, [1, 2, 3])
    False
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from numbers import Real
from typing import Any, TypeIs

import msgspec

__all__ = [
    "is_array",
    "is_array_empty",
    "is_array_of",
    "is_function",
    "is_missing",
    "is_null",
    "is_number",
    "is_object",
    "is_one_of",
    "is_present",
    "is_string",
    "is_undefined",
]


def is_undefined(value: Any) -> bool:
    """Return True if ``value`` is the ``msgspec.UNSET`` marker."""
    return value is msgspec.UNSET


def is_null(value: Any) -> TypeIs[None]:
    """Return True if ``value`` is ``None``."""
    return value is None


def is_missing(value: Any) -> bool:
    """Return True if ``value`` is either ``None`` or ``msgspec.UNSET``."""
    return value is None or value is msgspec.UNSET


def is_present(value: Any) -> bool:
    """Return True unless ``value`` is missing."""
    return not is_missing(value)


def is_function(value: Any) -> TypeIs[Callable[..., Any]]:
    """Return True if ``value`` can be invoked as a callback."""
    return callable(value)


def is_string(value: Any) -> TypeIs[str]:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Return True for real numbers. ``bool`` is not treated as a number."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_object(value: Any) -> bool:
    """Return True if ``value`` is a keyed record.

    Mappings and ``msgspec.Struct`` instances qualify. Sequences, scalars,
    callables and the absence markers do not.
    """
    return isinstance(value, Mapping | msgspec.Struct)


def is_array(value: Any) -> TypeIs[list[Any] | tuple[Any, ...]]:
    """Return True if ``value`` is a ``list`` or ``tuple``."""
    return isinstance(value, list | tuple)


def is_array_empty(array: Any) -> bool:
    """Return True if ``array`` is a ``list`` or ``tuple`` with no items."""
    return is_array(array) and len(array) == 0


def is_array_of(array: Any, check: Callable[[Any], bool]) -> bool:
    """Return True if ``array`` is a sequence whose items all satisfy ``check``.

    An empty sequence satisfies any ``check``.

    Args:
        array: Value to inspect.
        check: Per-item predicate.
    """
    return is_array(array) and all(check(item) for item in array)


_SCALARS = (str, bytes, int, float, complex)


def _strict_equal(left: Any, right: Any) -> bool:
    if left is right:
        return True
    # containers and records only match themselves
    if not (isinstance(left, _SCALARS) and isinstance(right, _SCALARS)):
        return False
    # True == 1 in Python; a flag never matches a number here
    if isinstance(left, bool) is not isinstance(right, bool):
        return False
    return bool(left == right)


def is_one_of(value: Any, options: Iterable[Any]) -> bool:
    """Return True if one of ``options`` is strictly equal to ``value``.

    Scalars (strings, bytes and numbers) compare by value, with flags never
    equal to numbers. Anything else matches only the identical object.

    Args:
        value: Value to look up.
        options: Candidate values. An empty collection never matches.
    """
    return any(_strict_equal(option, value) for option in options)
