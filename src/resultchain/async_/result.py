"""AsyncResult type for chaining asynchronous Result-producing operations.

AsyncResult wraps an awaitable producer and normalizes whatever it settles to
into a Result[T, E]. Failure is data: the producer may settle to a raw value,
an Ok/Err, another AsyncResult or another awaitable, or it may raise, and in
every case awaiting the AsyncResult yields exactly one Ok or Err.

Example:
    ```python
    async def fetch_user(id: int) -> User:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .and_then(validate_user)
        .map(format_response)
        .or_else(lambda e: AsyncResult.ok(ANONYMOUS))
    )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Generator
from typing import Any

from anyio.lowlevel import checkpoint

from resultchain._config import get_config
from resultchain._logging import get_logger
from resultchain.async_._outcome import Outcome
from resultchain.errors import ConsumedError, FatalResultError, Rejected
from resultchain.types.result import Err, Ok, Result, ensure_result

__all__ = ["AsyncResult"]

logger = get_logger(__name__)


async def _adopt(settled: Any) -> Result[Any, Any]:
    """Turn whatever a producer settled to into a Result."""
    while True:
        if isinstance(settled, AsyncResult):
            return await settled._settle()
        if isinstance(settled, Ok | Err):
            return settled
        if inspect.isawaitable(settled):
            settled = await settled
            continue
        return Ok(settled)


async def _normalize(producer: Awaitable[Any]) -> Result[Any, Any]:
    """Await producer once, folding every ordinary failure into Err."""
    try:
        return await _adopt(await producer)
    except FatalResultError as exc:
        logger.debug("fatal error escaping chain", error=repr(exc))
        raise
    except Rejected as exc:
        logger.debug("producer rejected", payload=repr(exc.payload))
        return Err(exc.payload)
    except Exception as exc:
        logger.debug("producer raised", error=repr(exc))
        return Err(exc)


async def _stage[T, E](source: Outcome[T, E]) -> Result[T, E]:
    """Wait for the previous stage, then yield before the next one runs.

    Combinators pass their receiver's cell as it is when the stage runs, so
    a tap attached after a branch was derived is still observed.
    """
    result = ensure_result(await source.get())
    if get_config().checkpoint:
        await checkpoint()
    return result


class AsyncResult[T, E]:
    """Chainable wrapper around an asynchronous computation that settles to a Result.

    The constructor accepts any awaitable. Once it settles the outcome is
    normalized:

    1. an AsyncResult is joined (its own Result is adopted);
    2. an Ok or Err is adopted unchanged;
    3. any other awaitable is awaited and normalized in turn;
    4. a raw value becomes Ok(value);
    5. raising ``Rejected(payload)`` becomes Err(payload);
    6. raising any other Exception becomes Err(exception).

    Errors derived from FatalResultError, and cancellation, are never folded.

    Every combinator except the tap family returns a new AsyncResult. Stages
    run strictly in chain order, each one starting after the previous one has
    settled. Nothing runs until the chain is awaited.

    Note:
        Awaiting an AsyncResult (or calling to_awaitable()) consumes it:
        further combinator calls raise ConsumedError. Awaiting it again
        returns the same memoized Result.

    Attributes:
        _outcome: Memoizing cell holding the normalized Result.
        _consumed: Whether the terminal awaitable has been handed out.

    Example:
        ```python
        async def main():
            result = await AsyncResult.ok(5).map(lambda x: x * 2)
            assert result == Ok(10)
        ```
    """

    __slots__ = ("_consumed", "_outcome")

    def __init__(self, producer: Awaitable[Any]) -> None:
        """Create an AsyncResult from an awaitable producer.

        Args:
            producer: An awaitable settling to a raw value, a Result,
                an AsyncResult or another awaitable.

        Raises:
            TypeError: If producer is not awaitable.
        """
        if not inspect.isawaitable(producer):
            msg = f"AsyncResult expects an awaitable, got {type(producer).__name__}"
            raise TypeError(msg)
        self._outcome: Outcome[T, E] = Outcome(_normalize(producer))
        self._consumed = False

    # --- Factories ---

    @classmethod
    def ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult that settles to Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def error(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult that settles to Err(error)."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult from a synchronous Result."""
        ensure_result(result)

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    # --- Terminal extraction ---

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Await the chain and return its Result, consuming this instance.

        Example:
            ```python
            async def example():
                result = await AsyncResult.ok(42)
                assert result == Ok(42)
            ```
        """
        self._consumed = True
        return self._outcome.get().__await__()

    def to_awaitable(self) -> Awaitable[Result[T, E]]:
        """Consume the AsyncResult, exposing an awaitable of its Result.

        The awaitable never raises for domain failures; those arrive as Err.

        Raises:
            ConsumedError: If this instance was already consumed.
        """
        self._ensure_live("to_awaitable")
        self._consumed = True
        return self._outcome.get()

    async def unwrap_or(self, default: T) -> T:
        """Consume the AsyncResult, returning the Ok value or default."""
        self._ensure_live("unwrap_or")
        self._consumed = True
        return (await self._outcome.get()).unwrap_or(default)

    @property
    def consumed(self) -> bool:
        """True once the terminal awaitable has been handed out."""
        return self._consumed

    # --- Combinators ---

    def and_then[U](self, f: Callable[[T], Any]) -> AsyncResult[U, E]:
        """Chain a dependent computation on the Ok value.

        If the receiver settles to Ok(v), calls f(v) and adopts whatever it
        returns: an AsyncResult, a Result, an awaitable or a raw value.
        If it settles to Err(e), f is never called and the Err passes through.

        Args:
            f: Function taking T and typically returning AsyncResult[U, E].

        Returns:
            New AsyncResult with the chained outcome.

        Example:
            ```python
            def validate(x: int) -> AsyncResult[int, str]:
                return AsyncResult.ok(x) if x > 0 else AsyncResult.error("not positive")

            async def example():
                result = await AsyncResult.ok(5).and_then(validate)
                assert result == Ok(5)
            ```
        """
        self._ensure_live("and_then")

        async def _chained() -> Any:
            result = await _stage(self._outcome)
            if isinstance(result, Ok):
                return f(result.value)
            logger.debug("stage skipped", operation="and_then")
            return result

        return AsyncResult(_chained())

    def or_else[F](self, f: Callable[[E], Any]) -> AsyncResult[T, F]:
        """Recover from an Err.

        If the receiver settles to Err(e), calls f(e) and adopts its outcome.
        Useful for providing a fallback value. Ok passes through untouched.

        Args:
            f: Function taking E and typically returning AsyncResult[T, F].

        Returns:
            New AsyncResult with the recovery outcome.
        """
        self._ensure_live("or_else")

        async def _recovered() -> Any:
            result = await _stage(self._outcome)
            if isinstance(result, Err):
                return f(result.error)
            logger.debug("stage skipped", operation="or_else")
            return result

        return AsyncResult(_recovered())

    def map[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a function to the Ok value.

        The return value of f is wrapped in Ok as-is, never adopted.

        Example:
            ```python
            async def example():
                result = await AsyncResult.ok(5).map(lambda x: x * 2)
                assert result == Ok(10)
            ```
        """
        self._ensure_live("map")

        async def _mapped() -> Result[U, E]:
            result = await _stage(self._outcome)
            return result.map(f)

        return AsyncResult(_mapped())

    def map_error[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a function to the Err value.

        Useful for converting errors emitted by libraries into domain errors.
        """
        self._ensure_live("map_error")

        async def _mapped() -> Result[T, F]:
            result = await _stage(self._outcome)
            return result.map_error(f)

        return AsyncResult(_mapped())

    def tap_any(self, f: Callable[[Result[T, E]], Any]) -> AsyncResult[T, E]:
        """Observe the settled Result without changing it.

        Replaces this instance's outcome in place with one that calls f
        exactly once, then returns this same instance. If f returns an
        awaitable it is awaited before the Result is forwarded.

        An exception raised by f (or by the awaitable it returns) is logged
        at debug level and discarded: the observed Result is forwarded
        unchanged. Only FatalResultError escapes.
        """
        self._ensure_live("tap_any")
        source = self._outcome

        async def _tapped() -> Result[T, E]:
            result = await _stage(source)
            try:
                observed = f(result)
                if inspect.isawaitable(observed):
                    await observed
            except FatalResultError:
                raise
            except Exception as exc:
                logger.debug("observer raised", error=repr(exc))
            return result

        self._outcome = Outcome(_tapped())
        return self

    def tap(self, f: Callable[[T], Any]) -> AsyncResult[T, E]:
        """Observe the Ok value. Like map where the value is returned unmodified."""

        def _on_ok(result: Result[T, E]) -> Any:
            if isinstance(result, Ok):
                return f(result.value)
            return None

        return self.tap_any(_on_ok)

    def tap_error(self, f: Callable[[E], Any]) -> AsyncResult[T, E]:
        """Observe the Err value."""

        def _on_err(result: Result[T, E]) -> Any:
            if isinstance(result, Err):
                return f(result.error)
            return None

        return self.tap_any(_on_err)

    def filter(self, predicate: Callable[[T], bool], error: E) -> AsyncResult[T, E]:
        """Turn an Ok that fails predicate into Err(error).

        Example:
            ```python
            async def example():
                result = await AsyncResult.ok(5).filter(lambda x: x > 10, "too small")
                assert result == Err("too small")
            ```
        """

        def _check(value: T) -> Result[T, E]:
            return Ok(value) if predicate(value) else Err(error)

        return self.and_then(_check)

    # --- Internals ---

    async def _settle(self) -> Result[T, E]:
        """Await the outcome without consuming this instance (used for joins)."""
        return await self._outcome.get()

    def _ensure_live(self, operation: str) -> None:
        if self._consumed:
            raise ConsumedError(operation)

    def __repr__(self) -> str:
        return f"AsyncResult({self._outcome!r})"
