"""Fault types: dual struct+exception for Result and raise-based code.

Misuse of the Option/Result API raises one of two exceptions:

- ``InvalidArgumentError``: a non-callable handler, a missing payload for a
  success variant, or a non-Option/non-Result value given to a guard.
- ``IllegalStateError``: a variant-specific accessor (``unwrap``,
  ``unwrap_err``) called on the variant that does not hold the payload.

Each exception has a frozen struct twin that can travel inside an ``Err``.
"""

from __future__ import annotations

from typing import Any

import msgspec

from fallible._config import get_config
from fallible._logging import get_logger
from fallible.predicates import is_function, is_missing

__all__ = [
    "FallibleError",
    "IllegalState",
    "IllegalStateError",
    "InvalidArgument",
    "InvalidArgumentError",
    "describe",
    "illegal_state",
    "invalid_argument",
    "require_callable",
    "require_present",
]


class FallibleError(Exception):
    """Base class for faults raised by fallible."""


# --- Invalid argument ---


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """Argument rejected by an operation - struct variant for Result[T, InvalidArgument]."""

    operation: str
    argument: str
    expected: str
    actual: str | None = None

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.operation, self.argument, self.expected, self.actual)


class InvalidArgumentError(FallibleError, ValueError):
    """Argument rejected by an operation - exception variant."""

    def __init__(
        self,
        operation: str,
        argument: str,
        expected: str,
        actual: str | None = None,
    ) -> None:
        self.operation = operation
        self.argument = argument
        self.expected = expected
        self.actual = actual
        msg = f"{operation} expected @{argument} to be {expected}"
        if actual:
            msg = f"{msg}, got {actual}"
        super().__init__(msg)

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for Result-based code."""
        return InvalidArgument(self.operation, self.argument, self.expected, self.actual)


# --- Illegal state ---


class IllegalState(msgspec.Struct, frozen=True, gc=False):
    """Accessor called on the wrong variant - struct variant for Result[T, IllegalState]."""

    operation: str
    reason: str

    def to_exception(self) -> IllegalStateError:
        """Convert to exception for raise-based code."""
        return IllegalStateError(self.operation, self.reason)


class IllegalStateError(FallibleError, RuntimeError):
    """Accessor called on the wrong variant - exception variant."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")

    def to_struct(self) -> IllegalState:
        """Convert to struct for Result-based code."""
        return IllegalState(self.operation, self.reason)


# --- Raising helpers ---


def _log_fault(event: str, fault: msgspec.Struct) -> None:
    if get_config().log_level is None:
        return
    get_logger(__name__).debug(event, **msgspec.structs.asdict(fault))


def invalid_argument(
    operation: str,
    argument: str,
    expected: str,
    actual: str | None = None,
) -> InvalidArgumentError:
    """Build (and log, when enabled) an InvalidArgumentError for ``raise``.

    Args:
        operation: Qualified operation name, e.g. ``"Some.map(handler)"``.
        argument: Name of the rejected argument.
        expected: What the argument should have been.
        actual: Short description of the rejected value.
    """
    fault = InvalidArgument(operation, argument, expected, actual)
    _log_fault("invalid_argument", fault)
    return fault.to_exception()


def illegal_state(operation: str, reason: str) -> IllegalStateError:
    """Build (and log, when enabled) an IllegalStateError for ``raise``."""
    fault = IllegalState(operation, reason)
    _log_fault("illegal_state", fault)
    return fault.to_exception()


def describe(value: Any) -> str:
    """Name a rejected value for an error message."""
    if value is None:
        return "None"
    if value is msgspec.UNSET:
        return "UNSET"
    return type(value).__name__


def require_callable(operation: str, argument: str, value: Any) -> None:
    """Raise InvalidArgumentError unless ``value`` is callable."""
    if not is_function(value):
        raise invalid_argument(operation, argument, "callable", describe(value))


def require_present(operation: str, argument: str, value: Any) -> None:
    """Raise InvalidArgumentError if ``value`` is missing."""
    if is_missing(value):
        raise invalid_argument(operation, argument, "present", describe(value))
