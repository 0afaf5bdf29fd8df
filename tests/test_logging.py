"""Tests for logging configuration."""

import logging
import sys
from pathlib import Path

from devfeedback.logging.config import SQL_LOGGER, configure_logging, get_logger


def test_console_logs_go_to_stderr() -> None:
    """Menu output owns stdout; log lines must not share it."""
    configure_logging()
    logger = logging.getLogger("devfeedback")

    streams = [h.stream for h in logger.handlers if type(h) is logging.StreamHandler]
    assert streams == [sys.stderr]
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_file_only_logging(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "devfeedback.log"
    configure_logging(log_level="WARNING", log_file=log_file, enable_console=False)

    logger = get_logger("devfeedback.developers.registry")
    logger.info("Loaded 3 developers from store")
    logger.warning("Feedback rejected, unknown developer: D9")

    content = log_file.read_text()
    assert "Loaded 3 developers" not in content
    assert "devfeedback.developers.registry | WARNING  | Feedback rejected" in content
    assert [type(h).__name__ for h in logging.getLogger("devfeedback").handlers] == ["FileHandler"]


def test_reconfiguring_replaces_handlers(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "a.log")
    configure_logging(log_level="DEBUG", enable_console=False, log_file=tmp_path / "b.log")

    logger = logging.getLogger("devfeedback")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_sql_echo_shares_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "sql.log"
    configure_logging(log_level="DEBUG", log_file=log_file, enable_console=False, sql_echo=True)

    sql_logger = logging.getLogger(SQL_LOGGER)
    assert sql_logger.level == logging.INFO
    assert sql_logger.handlers == logging.getLogger("devfeedback").handlers

    sql_logger.info("SELECT 1")
    assert "sqlalchemy.engine | INFO     | SELECT 1" in log_file.read_text()


def test_sql_echo_off_by_default() -> None:
    configure_logging(sql_echo=False)

    sql_logger = logging.getLogger(SQL_LOGGER)
    assert sql_logger.handlers == []
    assert sql_logger.level == logging.WARNING


def test_get_logger_namespaces() -> None:
    assert get_logger("shell").name == "devfeedback.shell"
    assert get_logger("devfeedback.shell").name == "devfeedback.shell"
    assert get_logger("devfeedback").name == "devfeedback"
