"""
Tests for the QSettings-backed persistence store.
"""
import logging

import pytest

from shoppinglist.config import STORAGE_KEY
from shoppinglist.model.entries import Entry
from shoppinglist.model.io import PersistenceStore


class TestPersistenceStore:

    def test_missing_key_loads_empty(self, store):
        assert store.load() == []

    def test_uses_list_key(self, store):
        assert store.key == STORAGE_KEY == "list"

    def test_save_writes_compact_json_array(self, store, settings):
        store.save([Entry("1", "Milk"), Entry("2", "Bread")])
        assert settings.value("list") == '[{"id":"1","value":"Milk"},{"id":"2","value":"Bread"}]'

    def test_save_load_keeps_order(self, store):
        entries = [Entry(str(i), v) for i, v in enumerate(["Milk", "Bread", "Eggs, brown", "Čaj"])]
        store.save(entries)
        assert store.load() == entries

    def test_survives_reopening_the_file(self, settings, tmp_path):
        from PySide6.QtCore import QSettings

        PersistenceStore(settings).save([Entry("1", "Milk, 2 l")])
        reopened = QSettings(str(tmp_path / "shoppinglist.ini"), QSettings.Format.IniFormat)
        assert PersistenceStore(reopened).load() == [Entry("1", "Milk, 2 l")]

    def test_save_of_load_is_idempotent(self, store, settings):
        settings.setValue("list", '[{"id":"1","value":"Milk"},{"id":"2","value":"Bread"}]')
        before = settings.value("list")
        store.save(store.load())
        assert settings.value("list") == before

    @pytest.mark.parametrize("raw", [
        "not json",
        '{"id": "1", "value": "Milk"}',
        '[{"id": "1"}]',
        '[{"id": 1, "value": "Milk"}]',
        '["Milk"]',
        '[{"id": "1", "value": "Milk"}, {"id": "1", "value": "Bread"}]',
    ])
    def test_corrupt_value_loads_empty(self, store, settings, raw, caplog):
        settings.setValue("list", raw)
        with caplog.at_level(logging.WARNING, logger="shoppinglist.model.io"):
            assert store.load() == []
        assert "unreadable" in caplog.text

    def test_clear_removes_key(self, store, settings):
        store.save([Entry("1", "Milk")])
        store.clear()
        assert not settings.contains("list")
        assert store.load() == []

    def test_upsert_appends_new_id(self, store):
        store.upsert("1", "Milk")
        store.upsert("2", "Bread")
        assert store.load() == [Entry("1", "Milk"), Entry("2", "Bread")]

    def test_upsert_replaces_existing_id_in_place(self, store):
        store.save([Entry("1", "Milk"), Entry("2", "Bread")])
        store.upsert("1", "Oat milk")
        assert store.load() == [Entry("1", "Oat milk"), Entry("2", "Bread")]

    def test_remove_entry(self, store):
        store.save([Entry("1", "Milk"), Entry("2", "Bread")])
        store.remove_entry("1")
        assert store.load() == [Entry("2", "Bread")]
        store.remove_entry("unknown")
        assert store.load() == [Entry("2", "Bread")]

    def test_upsert_over_corrupt_value_starts_fresh(self, store, settings):
        settings.setValue("list", "garbage")
        store.upsert("1", "Milk")
        assert store.load() == [Entry("1", "Milk")]

    def test_deeply_nested_value_loads_empty(self, store, settings):
        settings.setValue("list", "[" * 100000 + "]" * 100000)
        assert store.load() == []
