"""Library configuration: ChainConfig, init(), get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from resultchain._logging import configure_logging

__all__ = [
    "ChainConfig",
    "get_config",
    "init",
    "reset",
]

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class ChainConfig:
    """Configuration for resultchain.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON (True) or for the console (False).
        checkpoint: Yield to the event loop before every chained stage runs.
    """

    log_level: str | None = None
    json_output: bool = True
    checkpoint: bool = True


_DEFAULT_CONFIG = ChainConfig()

# Global configuration (set by init())
_config: ChainConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from RESULTCHAIN_LOG_LEVEL, if set."""
    level = os.environ.get("RESULTCHAIN_LOG_LEVEL", "").strip()
    return level.upper() or None


def _detect_checkpoint() -> bool:
    """Read the checkpoint flag from RESULTCHAIN_CHECKPOINT.

    Defaults to True when the variable is unset or unrecognized.
    """
    raw = os.environ.get("RESULTCHAIN_CHECKPOINT", "").strip().lower()
    if raw in _FALSE_VALUES:
        return False
    if raw and raw not in _TRUE_VALUES:
        logging.warning("Unknown RESULTCHAIN_CHECKPOINT value '%s', defaulting to true", raw)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool = True,
    checkpoint: bool | None = None,
) -> ChainConfig:
    """Initialize resultchain with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            RESULTCHAIN_LOG_LEVEL. None = silent.
        json_output: Emit JSON logs when logging is configured.
        checkpoint: Yield to the event loop between stages. Falls back to
            RESULTCHAIN_CHECKPOINT, then True.

    Returns:
        The ChainConfig that was set.

    Example:
        ```python
        import resultchain

        resultchain.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_checkpoint = checkpoint if checkpoint is not None else _detect_checkpoint()

    _config = ChainConfig(
        log_level=resolved_level,
        json_output=json_output,
        checkpoint=resolved_checkpoint,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_output)

    return _config


def get_config() -> ChainConfig:
    """Get the current configuration.

    Unlike a runtime, the library works without init(): a default
    ChainConfig is returned until init() installs one.
    """
    if _config is None:
        return _DEFAULT_CONFIG
    return _config


def reset() -> None:
    """Drop the installed configuration, reverting to defaults."""
    global _config  # noqa: PLW0603
    _config = None
