"""
================================================================================
Logging Configuration
================================================================================

Centralized Loguru setup for the UI suite.

    - One stderr sink with a consistent format
    - Optional rotating file sink (logging.file)
    - Idempotent: safe to call from every conftest

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader, get_config


DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(level: Optional[str] = None, config: Optional[ConfigLoader] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        config: Configuration source. Defaults to get_config().
    """
    global _logger_initialized

    if _logger_initialized:
        return

    settings = (config or get_config()).logging
    log_level = (level or settings.level).upper()
    log_format = DEFAULT_FORMAT

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = settings.file
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=settings.rotation,
            retention=settings.retention,
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Allow init_logger() to reconfigure sinks on its next call."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "DEFAULT_FORMAT",
    "init_logger",
    "reset_logger",
]
