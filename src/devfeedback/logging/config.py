"""Logging configuration utilities."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SQL_LOGGER = "sqlalchemy.engine"


def _build_handlers(
    level: int, log_file: Optional[Path], enable_console: bool
) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = []

    # stderr, so log lines never land between menu lines on stdout
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    enable_console: bool = True,
    sql_echo: bool = False,
) -> None:
    """
    Configure the ``devfeedback`` logger tree.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file; parent directories are created
        enable_console: Whether to log to stderr
        sql_echo: Also send SQLAlchemy statement logs through the same handlers
    """
    level = getattr(logging, log_level.upper())
    handlers = _build_handlers(level, log_file, enable_console)

    logger = logging.getLogger("devfeedback")
    logger.setLevel(level)
    logger.handlers.clear()
    for handler in handlers:
        logger.addHandler(handler)
    logger.propagate = False

    sql_logger = logging.getLogger(SQL_LOGGER)
    sql_logger.handlers.clear()
    if sql_echo:
        sql_logger.setLevel(logging.INFO)
        for handler in handlers:
            sql_logger.addHandler(handler)
        sql_logger.propagate = False
    else:
        sql_logger.setLevel(logging.WARNING)
        sql_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``devfeedback`` namespace (``__name__`` is fine)."""
    if name == "devfeedback" or name.startswith("devfeedback."):
        return logging.getLogger(name)
    return logging.getLogger(f"devfeedback.{name}")
