"""Package logger configuration for staterandom."""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

LOG_LEVEL_ENV = "STATERANDOM_LOG_LEVEL"


def setup_logger(
    name: str = "staterandom",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name; module loggers live underneath it
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Handler is attached once; later calls only adjust the level
    if not logger.handlers:
        # stderr keeps stdout clean for the JSON report
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(getattr(logging, level.upper()))

    return logger


logger = setup_logger()
