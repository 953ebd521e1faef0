"""resultchain: Result and AsyncResult for failure-as-data async chains.

Flat imports (preferred):
    from resultchain import AsyncResult, Result, Ok, Err, ok, error

Submodule imports (for organization):
    from resultchain.types import Result, Ok, Err
    from resultchain.async_ import AsyncResult
    from resultchain.decorators import safe_async
"""

# Types
from resultchain.types import (
    Err,
    Ok,
    Result,
    break_result,
    collect,
    error,
    is_result,
    ok,
)

# Errors
from resultchain.errors import (
    ConsumedError,
    FatalResultError,
    MalformedResultError,
    Rejected,
    UnwrapError,
)

# Async
from resultchain.async_ import AsyncResult

# Decorators
from resultchain.decorators import safe_async

# Configuration
from resultchain._config import ChainConfig, get_config, init, reset
from resultchain._logging import configure_logging, get_logger

__all__ = [
    "AsyncResult",
    "ChainConfig",
    "ConsumedError",
    "Err",
    "FatalResultError",
    "MalformedResultError",
    "Ok",
    "Rejected",
    "Result",
    "UnwrapError",
    "break_result",
    "collect",
    "configure_logging",
    "error",
    "get_config",
    "get_logger",
    "init",
    "is_result",
    "ok",
    "reset",
    "safe_async",
]
