"""
Configuration & Constants
=========================
This module serves as the central registry for asset paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Storage keys, user-facing texts and timings live in one place
   instead of being scattered through the controller and the widgets.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (style sheet) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    STYLESHEET_PATH (str): Absolute path to the Qt style sheet.
    STORAGE_KEY (str): Key under which the list is persisted.
    ALERT_DURATION_MS (int): Lifetime of an alert message.
"""
import sys
import os
from enum import Enum
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/shoppinglist/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


class AlertLevel(str, Enum):
    """Severity classes of the alert banner (rendered as ``alert-<value>``)."""
    SUCCESS = "success"
    DANGER = "danger"


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "style.qss")

STORAGE_KEY: str = "list"
ALERT_DURATION_MS: int = 1000

SUBMIT_LABEL: str = "Submit"
EDIT_LABEL: str = "Edit"
INPUT_PLACEHOLDER: str = "e.g. eggs"

MSG_ADDED: str = "Item added to the list"
MSG_CHANGED: str = "Value changed"
MSG_DUPLICATE: str = "Duplicate item. Not added."
MSG_EMPTY: str = "Please enter value"
MSG_REMOVED: str = "Item removed"
MSG_CLEARED: str = "Empty list"
MSG_NOT_FOUND: str = "Item not found"
