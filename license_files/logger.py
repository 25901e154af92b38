"""
Logging setup for license-files.

Every module logs through a child of the ``license_files`` logger so the
CLI can route and filter all package output from one place.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from license_files.constants import (
    FILE_LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOGGER_NAME,
)
from license_files.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Args:
        name: Module name (usually ``__name__``). Names already under the
            package namespace are used as-is.

    Returns:
        The package logger, or one of its children.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(
    level: str = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    stream=None,
) -> logging.Logger:
    """
    Install console (and optionally file) handlers on the package logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives every record at DEBUG level
        stream: Console stream (default: stderr)

    Returns:
        The configured package logger

    Raises:
        ConfigurationError: If the log file cannot be created
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")

    file_handler: Optional[logging.FileHandler] = None
    if log_file is not None:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file '{log_file}': {e}") from e
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(
            logging.Formatter(fmt=FILE_LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        )

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(getattr(logging, level_name))
    console_handler.setFormatter(
        logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )
    logger.addHandler(console_handler)

    if file_handler is not None:
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(getattr(logging, level_name))

    return logger


def reset_logging() -> None:
    """Remove handlers installed by configure_logging (useful for testing)."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
