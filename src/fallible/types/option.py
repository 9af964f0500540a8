"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from fallible.errors import describe, illegal_state, invalid_argument, require_callable, require_present

__all__ = [
    "Nothing",
    "NothingType",
    "Option",
    "Some",
    "is_none",
    "is_option",
    "is_some",
    "none",
    "some",
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a present value of type T.

    Some represents the presence of a value. The value can never be
    missing: wrapping ``None`` or ``msgspec.UNSET`` raises
    ``InvalidArgumentError``.

    Examples:
        >>> opt = Some(42)
        >>> opt.unwrap()
        42
        >>> opt.map(lambda x: x * 2)
        Some(value=84)
        >>> opt.match(some=lambda x: x + 1, none=lambda: -1)
        43
    """

    value: T

    def __post_init__(self) -> None:
        require_present("Some(value)", "value", self.value)

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def map[U](self, handler: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            handler: Function to apply to the Some value. Its result must
                be present.

        Returns:
            Some containing the result of applying handler to the value.

        Raises:
            InvalidArgumentError: If handler is not callable, or returns a
                missing value.
        """
        require_callable("Some.map(handler)", "handler", handler)
        mapped = handler(self.value)
        require_present("Some.map(handler)", "handler result", mapped)
        return Some(mapped)

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        """Invoke ``some`` with the contained value and return its result.

        Only the ``some`` handler is validated; ``none`` is never called.
        """
        require_callable("Some.match(handler)", "handler.some", some)
        return some(self.value)

    def match_some(self, handler: Callable[[T], object]) -> None:
        """Call handler with the contained value for its side effect."""
        require_callable("Some.match_some(handler)", "handler", handler)
        handler(self.value)

    def match_none(self, handler: Callable[[], object]) -> None:  # noqa: ARG002
        """Do nothing since this is Some."""

    def or_(self, other: Option[Any]) -> Some[T]:  # noqa: ARG002
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def and_then[U](self, handler: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            handler: Function that takes T and returns Option[U].

        Returns:
            The Option returned by handler.
        """
        require_callable("Some.and_then(handler)", "handler", handler)
        return handler(self.value)

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant (or `none()`) instead
    of instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> Nothing.match(some=lambda x: x + 1, none=lambda: -1)
        -1
    """

    def __repr__(self) -> str:
        return "Nothing"

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def map(self, handler: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to map. handler is never called."""
        return self

    def match[U](self, *, some: Callable[[Any], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        """Invoke ``none`` and return its result.

        Only the ``none`` handler is validated; ``some`` is never called.
        """
        require_callable("Nothing.match(handler)", "handler.none", none)
        return none()

    def match_some(self, handler: Callable[[Any], object]) -> None:  # noqa: ARG002
        """Do nothing since this is Nothing."""

    def match_none(self, handler: Callable[[], object]) -> None:
        """Call handler for its side effect."""
        require_callable("Nothing.match_none(handler)", "handler", handler)
        handler()

    def or_[U](self, other: Option[U]) -> Option[U]:
        """Return other since self is Nothing."""
        return other

    def and_(self, other: Option[Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since self is Nothing."""
        return self

    def and_then(self, handler: Callable[[Any], Option[Any]]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to bind. handler is never called."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Raises:
            IllegalStateError: Always.
        """
        raise illegal_state("Nothing.unwrap()", "cannot unwrap an absent optional")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Wrap a present value in Some.

    Raises:
        InvalidArgumentError: If value is None or msgspec.UNSET.
    """
    require_present("some(value)", "value", value)
    return Some(value)


def none() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def is_option(value: Any) -> TypeIs[Option[Any]]:
    """Return True if value is a Some or Nothing instance."""
    return isinstance(value, Some | NothingType)


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Return True if option is Some.

    Raises:
        InvalidArgumentError: If option is not an Option at all.
    """
    if not is_option(option):
        raise invalid_argument("is_some(value)", "value", "an Option", describe(option))
    return isinstance(option, Some)


def is_none[T](option: Option[T]) -> TypeIs[NothingType]:
    """Return True if option is Nothing.

    Raises:
        InvalidArgumentError: If option is not an Option at all.
    """
    if not is_option(option):
        raise invalid_argument("is_none(value)", "value", "an Option", describe(option))
    return isinstance(option, NothingType)
