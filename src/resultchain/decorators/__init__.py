"""Decorators: @safe_async."""

from resultchain.decorators.safe import safe_async

__all__ = [
    "safe_async",
]
