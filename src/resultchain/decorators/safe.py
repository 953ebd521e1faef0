"""@safe_async: lift an async function into one returning AsyncResult."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from resultchain.async_.result import AsyncResult

__all__ = ["safe_async"]


def safe_async[**P, T](fn: Callable[P, Awaitable[T]], /) -> Callable[P, AsyncResult[T, Exception]]:
    """Wrap an asynchronous function so each call returns an AsyncResult.

    The call itself becomes the producer, so a raised exception settles to
    Err(exception) and a returned value to Ok(value).

    Args:
        fn: The async function to wrap.

    Returns:
        A function with the same signature returning AsyncResult[T, Exception].

    Example:
        ```python
        @safe_async
        async def fetch_json(url: str) -> dict:
            ...

        result = await fetch_json("https://example.com").map(lambda d: d["id"])
        ```
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> AsyncResult[T, Exception]:
        return AsyncResult(fn(*args, **kwargs))

    return wrapper
