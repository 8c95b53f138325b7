"""
Input/Output Manager (QSettings)
Handles saving and loading the shopping list to the application's key-value store.

The list lives under a single key as a JSON array of {"id", "value"} objects,
in insertion order. An absent or unreadable value is an empty list.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional, Protocol

from PySide6.QtCore import QSettings

from shoppinglist.config import STORAGE_KEY
from shoppinglist.model.entries import Entry

# Get module logger
logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    """The part of the QSettings surface the store relies on."""
    def value(self, key: str, defaultValue: Any = None) -> Any: ...
    def setValue(self, key: str, value: Any) -> None: ...
    def remove(self, key: str) -> None: ...
    def contains(self, key: str) -> bool: ...
    def sync(self) -> None: ...


class PersistenceStore:
    def __init__(self, backend: Optional[KeyValueBackend] = None, key: str = STORAGE_KEY) -> None:
        # QSettings() picks up the organization/application set in create_app()
        self.backend: KeyValueBackend = backend if backend is not None else QSettings()
        self.key = key

    def load(self) -> list[Entry]:
        raw = self.backend.value(self.key, None)
        if raw is None:
            return []
        try:
            return self._decode(raw)
        except (TypeError, ValueError, KeyError, RecursionError) as e:
            logger.warning(f"Stored list under '{self.key}' is unreadable, starting empty: {e}")
            return []

    def save(self, snapshot: Iterable[Entry]) -> None:
        payload = json.dumps([e.to_dict() for e in snapshot], separators=(",", ":"), ensure_ascii=False)
        self.backend.setValue(self.key, payload)
        self.backend.sync()
        logger.debug(f"Saved list ({len(payload)} bytes) under '{self.key}'")

    def clear(self) -> None:
        self.backend.remove(self.key)
        self.backend.sync()
        logger.debug(f"Removed stored list '{self.key}'")

    def upsert(self, entry_id: str, value: str) -> None:
        entries = self.load()
        for i, e in enumerate(entries):
            if e.id == entry_id:
                entries[i] = Entry(id=entry_id, value=value)
                break
        else:
            entries.append(Entry(id=entry_id, value=value))
        self.save(entries)

    def remove_entry(self, entry_id: str) -> None:
        self.save([e for e in self.load() if e.id != entry_id])

    @staticmethod
    def _decode(raw: Any) -> list[Entry]:
        if not isinstance(raw, str):
            raise TypeError(f"expected a JSON string, got {type(raw).__name__}")

        data = json.loads(raw)
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")

        entries = []
        seen: set[str] = set()
        for item in data:
            if not isinstance(item, dict):
                raise TypeError(f"expected an object, got {type(item).__name__}")
            entry_id, value = item["id"], item["value"]
            if not isinstance(entry_id, str) or not isinstance(value, str):
                raise TypeError("'id' and 'value' must be strings")
            if entry_id in seen:
                raise ValueError(f"id '{entry_id}' appears more than once")
            seen.add(entry_id)
            entries.append(Entry(id=entry_id, value=value))
        return entries
