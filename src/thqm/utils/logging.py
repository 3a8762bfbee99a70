"""Logging setup utilities for thqm.

Standard output is reserved for selected entries, so every handler
configured here writes to stderr or a file.
"""

from __future__ import annotations

import logging
import sys

from thqm.config.settings import LoggingConfig

# uvicorn's loggers are routed through the same handlers as ours.
_LOGGER_NAMES = ("thqm", "uvicorn")


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the thqm application.

    Args:
        config: Logging configuration. If None, uses defaults
                (WARNING level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    level = getattr(logging, config.level.upper(), logging.WARNING)
    formatter = logging.Formatter(config.format)

    handlers: list[logging.Handler] = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("thqm").debug("Logging initialized at %s level", config.level)
