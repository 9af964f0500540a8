"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from fallible.errors import describe, illegal_state, invalid_argument, require_callable, require_present

__all__ = [
    "Err",
    "Ok",
    "Result",
    "err",
    "is_err",
    "is_ok",
    "is_result",
    "ok",
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a present value of type T.

    Ok represents the successful outcome of an operation. Like Some, it
    refuses a missing value.

    Examples:
        >>> res = Ok(42)
        >>> res.unwrap()
        42
        >>> res.map(lambda x: x * 2)
        Ok(value=84)
        >>> res.match(ok=str, err=lambda e: "failed")
        '42'
    """

    value: T

    def __post_init__(self) -> None:
        require_present("Ok(value)", "value", self.value)

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, handler: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            handler: Function to apply to the Ok value. Its result must be
                present.

        Returns:
            Ok containing the result of applying handler to the value.

        Raises:
            InvalidArgumentError: If handler is not callable, or returns a
                missing value.
        """
        require_callable("Ok.map(handler)", "handler", handler)
        mapped = handler(self.value)
        require_present("Ok.map(handler)", "handler result", mapped)
        return Ok(mapped)

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Invoke ``ok`` with the contained value and return its result."""
        require_callable("Ok.match(handler)", "handler.ok", ok)
        return ok(self.value)

    def match_ok(self, handler: Callable[[T], object]) -> None:
        """Call handler with the contained value for its side effect."""
        require_callable("Ok.match_ok(handler)", "handler", handler)
        handler(self.value)

    def match_err(self, handler: Callable[[Any], object]) -> None:  # noqa: ARG002
        """Do nothing since this is Ok."""

    def or_(self, other: Result[Any, Any]) -> Ok[T]:  # noqa: ARG002
        """Return self since this is Ok."""
        return self

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def and_then[U, E](self, handler: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            handler: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by handler.
        """
        require_callable("Ok.and_then(handler)", "handler", handler)
        return handler(self.value)

    def or_else(self, handler: Callable[[Any], Result[Any, Any]]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok. handler is never called."""
        return self

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error.

        Raises:
            IllegalStateError: Always.
        """
        raise illegal_state("Ok.unwrap_err()", "cannot unwrap the error of a successful result")


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. Any payload is
    accepted, including ``None`` and empty values.

    Examples:
        >>> res = Err("something went wrong")
        >>> res.is_err()
        True
        >>> res.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def map(self, handler: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def match[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Invoke ``err`` with the contained error and return its result."""
        require_callable("Err.match(handler)", "handler.err", err)
        return err(self.error)

    def match_ok(self, handler: Callable[[Any], object]) -> None:  # noqa: ARG002
        """Do nothing since this is Err."""

    def match_err(self, handler: Callable[[E], object]) -> None:
        """Call handler with the contained error for its side effect."""
        require_callable("Err.match_err(handler)", "handler", handler)
        handler(self.error)

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since this is Err."""
        return other

    def and_(self, other: Result[Any, Any]) -> Err[E]:  # noqa: ARG002
        """Return self since this is Err."""
        return self

    def and_then(self, handler: Callable[[Any], Result[Any, E]]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err. handler is never called."""
        return self

    def or_else[T, F](self, handler: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            handler: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by handler.
        """
        require_callable("Err.or_else(handler)", "handler", handler)
        return handler(self.error)

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value to unwrap.

        Raises:
            IllegalStateError: Always.
        """
        raise illegal_state("Err.unwrap()", "cannot unwrap a failed result")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Wrap a present value in Ok.

    Raises:
        InvalidArgumentError: If value is None or msgspec.UNSET.
    """
    require_present("ok(value)", "value", value)
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Wrap any error payload in Err."""
    return Err(error)


def is_result(value: Any) -> TypeIs[Result[Any, Any]]:
    """Return True if value is an Ok or Err instance."""
    return isinstance(value, Ok | Err)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if result is Ok.

    Raises:
        InvalidArgumentError: If result is not a Result at all.
    """
    if not is_result(result):
        raise invalid_argument("is_ok(value)", "value", "a Result", describe(result))
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if result is Err.

    Raises:
        InvalidArgumentError: If result is not a Result at all.
    """
    if not is_result(result):
        raise invalid_argument("is_err(value)", "value", "a Result", describe(result))
    return isinstance(result, Err)
