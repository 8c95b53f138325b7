"""
List Panel (Renderer)
=====================
Projects the list entries onto visible rows.

Why is this file needed?
------------------------
1. Projection: The panel never decides anything, it mirrors what the
   controller tells it (one row per entry, in order).
2. Wiring: Every row is created by `_make_row`, which connects the row's
   Edit/Delete buttons to the panel signals. Rows from a fresh add and rows
   rebuilt at startup are therefore wired identically.
3. Chrome: Toggles the container and the clear button.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from shoppinglist.model.entries import Entry
from shoppinglist.view.widgets.item_row import ItemRow

logger = logging.getLogger(__name__)


class ListPanel(QWidget):
    edit_requested = Signal(str)
    delete_requested = Signal(str)
    clear_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("shoppingContainer")

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.rows_host = QWidget(self)
        self.rows_host.setObjectName("shoppingList")
        self.rows_layout = QVBoxLayout(self.rows_host)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(2)
        root.addWidget(self.rows_host)

        self.clear_button = QPushButton(self.tr("Clear items"), self)
        self.clear_button.setObjectName("clearButton")
        self.clear_button.clicked.connect(lambda: self.clear_requested.emit())
        root.addWidget(self.clear_button)
        root.addStretch()

        # Insertion ordered: mirrors the layout order
        self._rows: dict[str, ItemRow] = {}

    # ---- rows ----

    def render_all(self, snapshot: Iterable[Entry]) -> None:
        for entry_id in list(self._rows):
            self._drop_row(entry_id)
        for entry in snapshot:
            self._make_row(entry)
        logger.debug(f"Rendered {len(self._rows)} rows.")

    def append_row(self, entry: Entry) -> ItemRow:
        return self._make_row(entry)

    def remove_row(self, entry_id: str) -> None:
        if entry_id in self._rows:
            self._drop_row(entry_id)

    def update_row_text(self, entry_id: str, value: str) -> None:
        row = self._rows.get(entry_id)
        if row is not None:
            row.set_text(value)

    def _make_row(self, entry: Entry) -> ItemRow:
        # One widget per id, or an orphan row would stay in the layout
        if entry.id in self._rows:
            self._drop_row(entry.id)
        row = ItemRow(entry.id, entry.value, self.rows_host)
        row.edit_clicked.connect(self.edit_requested)
        row.delete_clicked.connect(self.delete_requested)
        self.rows_layout.addWidget(row)
        self._rows[entry.id] = row
        return row

    def _drop_row(self, entry_id: str) -> None:
        row = self._rows.pop(entry_id)
        self.rows_layout.removeWidget(row)
        row.hide()
        row.deleteLater()

    # ---- chrome ----

    def set_container_visible(self, visible: bool) -> None:
        self.setVisible(visible)

    def set_clear_control_visible(self, visible: bool) -> None:
        self.clear_button.setVisible(visible)

    def is_container_visible(self) -> bool:
        return not self.isHidden()

    def is_clear_control_visible(self) -> bool:
        return not self.clear_button.isHidden()

    # ---- lookups ----

    def row(self, entry_id: str) -> Optional[ItemRow]:
        return self._rows.get(entry_id)

    def row_ids(self) -> list[str]:
        return list(self._rows)

    def row_text(self, entry_id: str) -> str:
        return self._rows[entry_id].text()

    def row_count(self) -> int:
        return len(self._rows)
