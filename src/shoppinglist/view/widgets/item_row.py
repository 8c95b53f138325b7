from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QWidget


class ItemRow(QFrame):
    """
    One visible list entry: the text plus Edit and Delete buttons.
    The row is tagged with its entry id (also as the ``entryId`` property).
    """
    edit_clicked = Signal(str)
    delete_clicked = Signal(str)

    def __init__(self, entry_id: str, value: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.entry_id = entry_id
        self.setObjectName("shoppingItem")
        self.setProperty("entryId", entry_id)

        h = QHBoxLayout(self)
        h.setContentsMargins(8, 4, 8, 4)

        self.title = QLabel(value, self)
        self.title.setObjectName("title")
        self.title.setTextFormat(Qt.TextFormat.PlainText)
        h.addWidget(self.title, 1)

        self.edit_button = QPushButton(self.tr("Edit"), self)
        self.edit_button.setObjectName("editButton")
        self.edit_button.clicked.connect(lambda: self.edit_clicked.emit(self.entry_id))
        h.addWidget(self.edit_button)

        self.delete_button = QPushButton(self.tr("Delete"), self)
        self.delete_button.setObjectName("deleteButton")
        self.delete_button.clicked.connect(lambda: self.delete_clicked.emit(self.entry_id))
        h.addWidget(self.delete_button)

    def text(self) -> str:
        return self.title.text()

    def set_text(self, value: str) -> None:
        self.title.setText(value)
