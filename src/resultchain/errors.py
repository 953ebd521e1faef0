"""Error types: fatal errors that escape the Result discipline, and Rejected."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConsumedError",
    "FatalResultError",
    "MalformedResultError",
    "Rejected",
    "UnwrapError",
]


# --- Fatal Errors ---


class FatalResultError(RuntimeError):
    """Base for errors that are never folded into Err.

    AsyncResult normalization catches ordinary exceptions and turns them into
    Err values. Subclasses of this class are re-raised instead, so they reach
    the host's top-level error handling.
    """


class UnwrapError(FatalResultError):
    """Raised when the Ok value is requested from an Err."""

    def __init__(self, error: Any, message: str | None = None) -> None:
        self.error = error
        if message is None:
            message = f"Called unwrap on Err: {error!r}"
        else:
            message = f"{message}: {error!r}"
        super().__init__(message)


class MalformedResultError(FatalResultError):
    """Raised when an object that is neither Ok nor Err is used as a Result."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Malformed result: expected Ok or Err, got {type(value).__name__} {value!r}")


class ConsumedError(FatalResultError):
    """Raised when a combinator is called on an AsyncResult after extraction."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"AsyncResult already consumed; cannot call {operation}()")


# --- Rejection Transport ---


class Rejected(Exception):  # noqa: N818
    """Reject an AsyncResult producer with an arbitrary payload.

    Raising ``Rejected(payload)`` inside a producer settles the AsyncResult to
    ``Err(payload)`` rather than ``Err(Rejected(...))``. This lets a producer
    fail with a value that is not an exception.

    Examples:
        >>> async def lookup() -> int:
        ...     raise Rejected(404)
        >>> await AsyncResult(lookup())
        Err(error=404)
    """

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        super().__init__(payload)
