"""Single-evaluation outcome cell backing every AsyncResult."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

import anyio

if TYPE_CHECKING:
    from resultchain.types.result import Result

__all__ = ["Outcome"]

_PENDING: Any = object()


class Outcome[T, E]:
    """Await an awaitable of Result at most once and memoize what it settles to.

    Coroutines can only be awaited once. Wrapping one in an Outcome lets any
    number of awaiters (two branches chained off one AsyncResult, a tap and
    the stage after it) share a single evaluation. The evaluation is guarded
    by an anyio Lock, so concurrent awaiters wait for the first one to finish.

    A fatal exception raised by the awaitable is stored and re-raised to every
    later awaiter. Cancellation is not stored.
    """

    __slots__ = ("_awaitable", "_failure", "_lock", "_result")

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        self._awaitable: Awaitable[Result[T, E]] | None = awaitable
        self._lock = anyio.Lock()
        self._result: Result[T, E] = _PENDING
        self._failure: BaseException | None = None

    @property
    def settled(self) -> bool:
        """True once the awaitable has produced a Result."""
        return self._result is not _PENDING

    def peek(self) -> Result[T, E] | None:
        """Return the memoized Result, or None while still pending."""
        return None if self._result is _PENDING else self._result

    async def get(self) -> Result[T, E]:
        if self._result is _PENDING:
            async with self._lock:
                if self._failure is not None:
                    raise self._failure
                if self._result is _PENDING:
                    if self._awaitable is None:
                        # The first awaiter was cancelled mid-evaluation.
                        msg = "AsyncResult evaluation was interrupted before it settled"
                        raise RuntimeError(msg)
                    awaitable, self._awaitable = self._awaitable, None
                    try:
                        self._result = await awaitable
                    except Exception as exc:
                        self._failure = exc
                        raise
        return self._result

    def __repr__(self) -> str:
        if self._result is _PENDING:
            return "<pending>"
        return repr(self._result)
