"""Logging utilities for esbridge commands and services."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "esbridge"

CONSOLE_FORMAT = "[esbridge] %(levelname)s %(message)s"
# Verbose output names the emitting component, e.g. [esbridge.modules].
VERBOSE_CONSOLE_FORMAT = "[%(name)s] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the esbridge hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the esbridge logger with console output and an optional file sink.

    The file sink always records debug messages so a log file is useful for
    bug reports even when the console stays at info.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose or log_file is not None else logging.INFO)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(
        logging.Formatter(VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT)
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
