"""
Tests for the transient alert banner. Uses real timers.
"""
import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from shoppinglist.config import ALERT_DURATION_MS, AlertLevel
from shoppinglist.view.widgets.alert_banner import AlertBanner


@pytest.fixture
def banner(qapp):
    return AlertBanner()


class TestAlertBanner:

    def test_default_duration_is_one_second(self, banner):
        assert ALERT_DURATION_MS == 1000
        assert banner.duration_ms == 1000

    def test_shows_text_and_class(self, banner):
        banner.show_alert("Item added to the list", AlertLevel.SUCCESS)
        assert banner.text() == "Item added to the list"
        assert banner.classes() == ["alert-success"]
        assert banner.property("alertClass") == "alert-success"

    def test_text_is_not_markup(self, banner):
        assert banner.textFormat() == Qt.TextFormat.PlainText

    def test_accepts_plain_level_strings(self, banner):
        banner.show_alert("Empty list", "danger")
        assert banner.classes() == ["alert-danger"]

    def test_clears_after_duration(self, banner):
        banner.show_alert("Value changed", AlertLevel.SUCCESS)
        QTest.qWait(1300)
        assert banner.text() == ""
        assert banner.classes() == []
        assert banner.property("alertClass") == ""

    def test_older_timer_clears_newer_message(self, banner):
        banner.show_alert("Item added to the list", AlertLevel.SUCCESS)
        QTest.qWait(500)
        banner.show_alert("Duplicate item. Not added.", AlertLevel.DANGER)
        assert banner.text() == "Duplicate item. Not added."
        assert banner.classes() == ["alert-success", "alert-danger"]

        # First timer fires at ~1000 ms: wipes the newer text, drops only its own class
        QTest.qWait(700)
        assert banner.text() == ""
        assert banner.classes() == ["alert-danger"]

        QTest.qWait(600)
        assert banner.classes() == []
