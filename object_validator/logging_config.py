"""Logging configuration for the object validator.

The library only creates module loggers; it never touches the root logger
on import. Applications (and the test suite) call ``configure_logging()``
when they want console output.
"""

import logging
import sys
from typing import Literal

from object_validator.settings import get_settings

PACKAGE_LOGGER = "object_validator"


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
) -> logging.Logger:
    """Configure package logging.

    Sets up:
    - A stderr handler on the package logger with a clean console format
    - The package logger level from settings (or the override)

    Calling it again replaces the handler instead of stacking another one.

    Args:
        level: Override log level (defaults to settings.log_level)

    Returns:
        The configured package logger
    """
    settings = get_settings()
    log_level = level or settings.log_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level))

    # Remove handlers from a previous call
    for handler in list(logger.handlers):
        if getattr(handler, "_object_validator", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level))
    console_handler.setFormatter(
        logging.Formatter("%(levelname)s | %(name)s | %(message)s")
    )
    console_handler._object_validator = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
