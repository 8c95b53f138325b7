"""
Transient alert region above the form.

Every message schedules its own clear-out timer. Timers are fire-and-forget:
an older timer that fires after a newer message has arrived clears the newer
text too, and only removes its own severity class.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QWidget

from shoppinglist.config import ALERT_DURATION_MS, AlertLevel


class AlertBanner(QLabel):
    def __init__(self, parent: QWidget | None = None, duration_ms: int = ALERT_DURATION_MS) -> None:
        super().__init__(parent)
        self.setObjectName("alert")
        self.setTextFormat(Qt.TextFormat.PlainText)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.duration_ms = duration_ms
        self._classes: list[str] = []
        self._apply_classes()

    def show_alert(self, text: str, level: AlertLevel) -> None:
        css_class = f"alert-{AlertLevel(level).value}"
        self.setText(text)
        if css_class not in self._classes:
            self._classes.append(css_class)
        self._apply_classes()

        QTimer.singleShot(self.duration_ms, self, lambda: self._expire(css_class))

    def classes(self) -> list[str]:
        return list(self._classes)

    def _expire(self, css_class: str) -> None:
        self.setText("")
        if css_class in self._classes:
            self._classes.remove(css_class)
        self._apply_classes()

    def _apply_classes(self) -> None:
        # Style sheet selectors match on the last added class
        self.setProperty("alertClass", self._classes[-1] if self._classes else "")
        self.style().unpolish(self)
        self.style().polish(self)
