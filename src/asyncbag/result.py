"""Result type: Ok[T] | Err[E], the tagged form of a settled entry."""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True):
    """Success variant: the entry produced ``value``.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.outcome()
        42
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok carries no error.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def outcome(self) -> T:
        """Return the untagged outcome, the value itself."""
        return self.value


class Err[E](msgspec.Struct, frozen=True):
    """Failure variant: the entry raised ``error``.

    Settled entries always carry an exception; container accessors also use
    Err with the struct errors from ``asyncbag.errors``.

    Examples:
        >>> err = Err(ValueError('boom'))
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Re-raise the captured error.

        Raises:
            E: The captured error, if it is an exception.
            RuntimeError: If the error is a plain value.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_err(self) -> E:
        """Return the captured error."""
        return self.error

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the captured error."""
        return Err(f(self.error))

    def outcome(self) -> E:
        """Return the untagged outcome, the error object itself."""
        return self.error


type Result[T, E = Exception] = Ok[T] | Err[E]
