"""
Tests for the logging setup.
"""
import logging

import pytest
from PySide6.QtCore import qInstallMessageHandler, qWarning

from shoppinglist.logging_config import QT_LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("shoppinglist")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    qInstallMessageHandler(None)


def test_writes_to_log_file(package_logger, tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logging.getLogger("shoppinglist.model.io").debug("Saved list")
    for handler in package_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "shoppinglist.model.io - DEBUG - Saved list" in text


def test_repeated_setup_does_not_duplicate_handlers(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1


def test_qt_warnings_reach_package_logger(package_logger, caplog):
    setup_logging()
    with caplog.at_level(logging.WARNING, logger=QT_LOGGER_NAME):
        qWarning("Could not parse stylesheet")
    assert any(
        r.name == QT_LOGGER_NAME and r.levelno == logging.WARNING and "Could not parse stylesheet" in r.getMessage()
        for r in caplog.records
    )
