"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec

from resultchain.errors import MalformedResultError, UnwrapError

__all__ = [
    "Err",
    "Ok",
    "Result",
    "break_result",
    "collect",
    "ensure_result",
    "error",
    "is_result",
    "ok",
]


class Ok[T](msgspec.Struct, frozen=True, gc=False, tag="ok"):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_error(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def break_result(self) -> T:
        """Alias for unwrap()."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_error[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False, tag="err"):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated. Building
    an Err never raises; it only describes a failure.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_error()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_error(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_error(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        The error is fatal: it is not folded back into Err by AsyncResult
        and reaches the caller's top-level handler.

        Raises:
            UnwrapError: Always. Chained from the payload when the payload
                is itself an exception.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(self.error) from cause

    def break_result(self) -> NoReturn:
        """Alias for unwrap()."""
        self.unwrap()

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the contained error."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(self.error, msg) from cause

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Build the success variant."""
    return Ok(value)


def error[E](err: E) -> Err[E]:
    """Build the failure variant. Never raises."""
    return Err(err)


def is_result(obj: object) -> TypeIs[Ok[Any] | Err[Any]]:
    """Return True if obj is one of the two Result variants."""
    return isinstance(obj, Ok | Err)


def ensure_result[T, E](obj: Ok[T] | Err[E] | object) -> Ok[T] | Err[E]:
    """Return obj unchanged if it is a Result.

    Raises:
        MalformedResultError: If obj is neither Ok nor Err.
    """
    if not is_result(obj):
        raise MalformedResultError(obj)
    return obj  # type: ignore[return-value]


def break_result[T](result: Ok[T] | Err[Any]) -> T:
    """Return the Ok value of result, escaping the Result discipline.

    Use at trust boundaries only, where a failure is unrecoverable.

    Raises:
        UnwrapError: If result is Err.
        MalformedResultError: If result is not a Result at all.

    Examples:
        >>> break_result(Ok(1))
        1
    """
    match result:
        case Ok(value=value):
            return value
        case Err():
            return result.unwrap()
        case _:
            raise MalformedResultError(result)


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(ensure_result(result), Err):
            return result  # type: ignore[return-value]
        values.append(result.value)
    return Ok(values)
