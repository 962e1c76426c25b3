"""Logging configuration for Reversi scripts.

Library modules only ever do ``logger = logging.getLogger(__name__)``;
handlers are attached by entry points through ``setup_logging``.

Usage:
    from reversi.logging_config import setup_logging

    logger = setup_logging("run_selfplay", level="DEBUG")
"""

from __future__ import annotations

import logging
import os
import sys

from .errors import ConfigurationError

__all__ = [
    "DEFAULT_FORMAT",
    "COMPACT_FORMAT",
    "CONSOLE_HANDLER_NAME",
    "get_logger",
    "setup_logging",
]

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
COMPACT_FORMAT = "[%(levelname)s] %(message)s"

LOG_LEVEL_ENV = "REVERSI_LOG_LEVEL"
CONSOLE_HANDLER_NAME = "reversi-console"


def _resolve_level(level: int | str | None) -> int:
    source = "level"
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
        source = LOG_LEVEL_ENV
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ConfigurationError(
                f"Unknown log level in {source}: {level}",
                context={source: level},
            )
        return resolved
    return level


def setup_logging(
    name: str,
    level: int | str | None = None,
    fmt: str = DEFAULT_FORMAT,
    console: bool = True,
) -> logging.Logger:
    """Configure and return the logger ``name``.

    Calling this twice for the same name does not add duplicate handlers.

    Args:
        name: Logger name.
        level: Level as int or name; defaults to ``$REVERSI_LOG_LEVEL`` or INFO.
        fmt: Format string for the console handler.
        console: Attach a stderr handler.

    Raises:
        ConfigurationError: The level name is not a known logging level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    if console and not any(
        h.get_name() == CONSOLE_HANDLER_NAME for h in logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        handler.set_name(CONSOLE_HANDLER_NAME)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
