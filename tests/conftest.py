"""
Shared fixtures.

Usage:
    python -m pytest tests -v
"""
import os

# Must be set before the QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from shoppinglist.model.io import PersistenceStore


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    """QSettings bound to a throwaway INI file."""
    return QSettings(str(tmp_path / "shoppinglist.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def store(settings):
    return PersistenceStore(settings)
