"""
Logging configuration for Algo Toolkit.

Every module obtains its logger through ``get_logger(__name__)`` so that all
toolkit loggers hang off the ``algo_toolkit`` package logger. Applications
(and the CLI) call ``setup_logging()`` once to attach handlers.

Usage:
    from algo_toolkit.utils.logging_config import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Clustering %d points", n)
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "algo_toolkit"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marker attribute so repeated setup_logging() calls only replace our handlers
_HANDLER_FLAG = "_algo_toolkit_handler"


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    """Turn a level name, number or None (env/default) into a logging level."""
    if level is None:
        level = os.getenv("ALGO_TOOLKIT_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    level: Optional[Union[str, int]] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Safe to call more than once: handlers installed by a previous call are
    removed before new ones are added.

    Args:
        level: Log level name or number. Defaults to ALGO_TOOLKIT_LOG_LEVEL
            from the environment, then INFO.
        log_file: Optional path for a rotating log file (5 MB x 3 backups).

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(_resolve_level(level))

    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, _HANDLER_FLAG, True)
    package_logger.addHandler(stream_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_FLAG, True)
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Names outside the package namespace are nested under it so that
    ``setup_logging`` governs them too.
    """
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")
