"""
Main Application Window
=======================
The primary GUI container: alert banner, entry form and the list panel.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It builds the controller and hands it the widgets it drives.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from shoppinglist.app.application import VISIBLE_APP_NAME
from shoppinglist.config import STYLESHEET_PATH
from shoppinglist.controller.list_controller import ListController
from shoppinglist.model.entries import ListState
from shoppinglist.model.io import PersistenceStore
from shoppinglist.view.list_panel import ListPanel
from shoppinglist.view.widgets.alert_banner import AlertBanner
from shoppinglist.view.widgets.entry_form import EntryForm

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Optional[PersistenceStore] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(480, 600)

        # --- MAIN CONTAINER ---
        main_widget = QWidget(self)
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(16, 16, 16, 16)

        # --- 1. ALERT + TITLE + FORM ---
        self.alert = AlertBanner(main_widget)
        main_layout.addWidget(self.alert)

        title = QLabel(self.tr("Shopping List"), main_widget)
        title.setObjectName("heading")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(title)

        self.form = EntryForm(main_widget)
        main_layout.addWidget(self.form)

        # --- 2. LIST (hidden until it has rows) ---
        self.panel = ListPanel()

        scroll = QScrollArea(main_widget)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        scroll.setWidget(self.panel)
        # setWidget() shows the panel
        self.panel.set_container_visible(False)
        main_layout.addWidget(scroll, 1)

        # --- 3. CONTROLLER ---
        self.controller = ListController(
            state=ListState(),
            store=store if store is not None else PersistenceStore(),
            panel=self.panel,
            form=self.form,
            notify=self.alert.show_alert,
            parent=self,
        )

        self._apply_stylesheet()

        # Rows must exist before the first user input
        self.controller.load()

    def _apply_stylesheet(self) -> None:
        if not os.path.exists(STYLESHEET_PATH):
            logger.warning(f"Style sheet not found at {STYLESHEET_PATH}")
            return
        with open(STYLESHEET_PATH, "r", encoding="utf-8") as f:
            self.setStyleSheet(f.read())
