"""Global logger configuration for the arraykoans project."""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_number(level: str) -> int | None:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else None


def setup_logger(
    name: str = "arraykoans",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back to
            the ``ARRAYKOANS_LOG_LEVEL`` environment variable, then ``INFO``.
            An unknown level in the environment is ignored.
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ValueError: If an explicitly passed ``level`` is unknown.
    """
    if level is not None:
        level_number = _level_number(level)
        if level_number is None:
            raise ValueError(f"Unknown log level '{level}'.")
    else:
        level_number = _level_number(os.getenv("ARRAYKOANS_LOG_LEVEL", "INFO"))
        level_number = logging.INFO if level_number is None else level_number
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

    # An explicit level always wins, even on an already configured logger
    logger.setLevel(level_number)

    return logger


# Create default logger instance for the project
logger = setup_logger()
