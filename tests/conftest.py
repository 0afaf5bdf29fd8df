import logging

import pytest

from devfeedback.config.settings import Settings, get_settings
from devfeedback.database import Store


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway sqlite file."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'feedback.db'}",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    """An open in-memory store, closed after the test."""
    with Store("sqlite:///:memory:") as s:
        yield s


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams that CliRunner closes after each invoke."""
    yield
    logging.getLogger("devfeedback").handlers.clear()
    logging.getLogger("sqlalchemy.engine").handlers.clear()
