"""Library configuration: FallibleConfig, init, and get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    "FallibleConfig",
    "get_config",
    "init",
]


@dataclass(frozen=True)
class FallibleConfig:
    """Configuration for fallible.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log records as JSON (True) or console text (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init() or resolved lazily by get_config())
_config: FallibleConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from ``FALLIBLE_LOG_LEVEL``; empty means silent."""
    level = os.environ.get("FALLIBLE_LOG_LEVEL", "").strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the renderer from ``FALLIBLE_LOG_FORMAT`` ("json" or "console")."""
    fmt = os.environ.get("FALLIBLE_LOG_FORMAT", "").lower()
    if fmt in ("", "json"):
        return True
    if fmt == "console":
        return False
    logging.warning("Unknown FALLIBLE_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> FallibleConfig:
    """Initialize fallible with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            ``FALLIBLE_LOG_LEVEL`` if None; unset there too means silent.
        json_output: JSON or console rendering. Read from
            ``FALLIBLE_LOG_FORMAT`` if None.

    Returns:
        The FallibleConfig that was set.

    Example:
        ```python
        import fallible

        # Fault events are logged at debug level from now on
        fallible.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = FallibleConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> FallibleConfig:
    """Get the current configuration.

    The first call without a prior init() behaves like a bare init(), so
    the environment variables alone are enough to switch logging on.

    Returns:
        The current FallibleConfig.
    """
    if _config is None:
        return init()
    return _config
