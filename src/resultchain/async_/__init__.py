"""Async utilities: AsyncResult.

Examples:
    >>> from resultchain.async_ import AsyncResult
    >>>
    >>> async def fetch(id: int) -> dict:
    ...     return {"id": id}
    >>>
    >>> async def main():
    ...     result = await AsyncResult(fetch(1)).map(lambda d: d["id"])
"""

from resultchain.async_.result import AsyncResult

__all__ = [
    "AsyncResult",
]
