import logging
from datetime import date

import pytest

from app.models.selection import Selection
from app.recurrence_model import RecurrenceModel
from cli import reset_logging

CONFIG_ENV_VARS = (
    "LOG_DIR",
    "LOG_FILENAME",
    "DEFAULT_CUSTOM_INTERVAL_DAYS",
    "RULE_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config and log files out of the working tree."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop handlers installed by setup_logging after each test."""
    yield
    reset_logging()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def friday():
    """A Friday in the middle of March 2024."""
    return date(2024, 3, 15)


@pytest.fixture
def model(friday):
    """Fresh model anchored on a Friday with recurrence off."""
    return RecurrenceModel(selection=Selection(anchor_date=friday))
