from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLineEdit, QPushButton, QWidget

from shoppinglist.config import INPUT_PLACEHOLDER, SUBMIT_LABEL


class EntryForm(QWidget):
    """Single-field form. Emits ``submitted`` on button click or Enter."""
    submitted = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        h = QHBoxLayout(self)
        h.setContentsMargins(0, 0, 0, 0)

        self.line_edit = QLineEdit(self)
        self.line_edit.setPlaceholderText(INPUT_PLACEHOLDER)
        h.addWidget(self.line_edit, 1)

        self.submit_button = QPushButton(SUBMIT_LABEL, self)
        self.submit_button.setObjectName("submitButton")
        h.addWidget(self.submit_button)

        self.line_edit.returnPressed.connect(lambda: self.submitted.emit())
        self.submit_button.clicked.connect(lambda: self.submitted.emit())

    def text(self) -> str:
        return self.line_edit.text()

    def set_text(self, value: str) -> None:
        self.line_edit.setText(value)

    def submit_label(self) -> str:
        return self.submit_button.text()

    def set_submit_label(self, label: str) -> None:
        self.submit_button.setText(label)

    def focus_input(self) -> None:
        self.line_edit.setFocus()
        self.line_edit.selectAll()
