"""Option: a present-or-absent value.

``Some[T] | Nothing[T]`` is a tagged union of frozen dataclasses. It keeps the
present/absent distinction type-checked instead of overloading Python's None,
so ``Some(None)`` is a legitimate present value.

The union is pattern-matchable via match/case::

    match opt:
        case Some(value=v):
            ...
        case Nothing():
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class OptionError(Exception):
    """Errors from Option access."""


class UnwrapError(OptionError):
    """unwrap() was called on Nothing."""

    def __init__(self) -> None:
        super().__init__("cannot unwrap Nothing: option has no value")


@dataclass(frozen=True, slots=True)
class Some[T]:
    """A present value."""

    value: T

    def is_none(self) -> bool:
        return False

    def is_some(self) -> bool:
        return True

    def clone(self) -> Some[T]:
        return Some(self.value)

    def unwrap(self) -> T:
        return self.value

    def unsafe_unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T, /) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Nothing[T]:
    """An absent value. All instances compare equal."""

    def is_none(self) -> bool:
        return True

    def is_some(self) -> bool:
        return False

    def clone(self) -> Nothing[T]:
        return self

    def unwrap(self) -> T:
        """Checked access.

        Raises:
            UnwrapError: always, there is no value.
        """
        raise UnwrapError

    def unsafe_unwrap(self) -> T:
        """Unchecked access. Callers must have checked is_none() first.

        Calling this on Nothing is a precondition violation and fails fast.
        """
        msg = "unsafe_unwrap() called on Nothing"
        raise AssertionError(msg)

    def unwrap_or(self, default: T, /) -> T:
        return default


type Option[T] = Some[T] | Nothing[T]

NOTHING: Nothing[Any] = Nothing()


def some[T](value: T) -> Option[T]:
    """Wrap a value as present."""
    return Some(value)


def nothing() -> Option[Any]:
    """Return the absent option."""
    return NOTHING


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable Python value: None -> Nothing, anything else -> Some."""
    if value is None:
        return NOTHING
    return Some(value)
