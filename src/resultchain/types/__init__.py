"""Core types: Result, Ok, Err and their factories."""

from resultchain.types.result import (
    Err,
    Ok,
    Result,
    break_result,
    collect,
    ensure_result,
    error,
    is_result,
    ok,
)

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
