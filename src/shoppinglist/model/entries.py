"""
List State (Data Model)
=======================
This module defines the in-memory mirror of the shopping list.

Why is this file needed?
------------------------
1. Authority: Duplicate detection and id lookup are answered here, never by
   reading the widgets back.
2. Ordering: Insertion order is display order and persisted order.
3. Decoupling: Views and the store only ever receive copies of the entries.

Classes:
    Entry: Immutable {id, value} record.
    IdGenerator: Time-derived, strictly increasing ids.
    ListState: Ordered, validated collection of entries.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import time
from typing import Callable, Iterable, Iterator, Optional

from shoppinglist.model.errors import DuplicateValue, EmptyValue, NotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    id: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "value": self.value}


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdGenerator:
    """
    Issues ids from the wall clock in milliseconds.
    Two ids requested within the same millisecond (or after the clock went
    backwards) are bumped so that every id is greater than the previous one.
    """
    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last: int = 0

    def next_id(self) -> str:
        candidate = self._clock()
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)

    def advance_past(self, ids: Iterable[str]) -> None:
        """Make sure future ids never collide with already issued ones."""
        for entry_id in ids:
            if entry_id.isdecimal():
                self._last = max(self._last, int(entry_id))


class ListState:
    """Ordered list of entries. Values are unique on the add path."""

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._entries: list[Entry] = []
        self._ids = id_generator or IdGenerator()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.all())

    def __contains__(self, entry_id: object) -> bool:
        return any(e.id == entry_id for e in self._entries)

    def all(self) -> list[Entry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Entry:
        return self._entries[self._index_of(entry_id)]

    def contains_value(self, value: str) -> bool:
        return any(e.value == value for e in self._entries)

    def add(self, value: str) -> Entry:
        value = value.strip()
        if not value:
            raise EmptyValue()
        if self.contains_value(value):
            raise DuplicateValue(value)

        entry = Entry(id=self._ids.next_id(), value=value)
        self._entries.append(entry)
        logger.debug(f"Added entry {entry.id}: '{entry.value}'")
        return entry

    def update(self, entry_id: str, value: str) -> Entry:
        # Other entries are not checked for the same value: edits may converge two rows.
        index = self._index_of(entry_id)
        value = value.strip()
        if not value:
            raise EmptyValue()

        entry = replace(self._entries[index], value=value)
        self._entries[index] = entry
        logger.debug(f"Updated entry {entry.id}: '{entry.value}'")
        return entry

    def remove(self, entry_id: str) -> Entry:
        entry = self._entries.pop(self._index_of(entry_id))
        logger.debug(f"Removed entry {entry.id}")
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def restore(self, snapshot: Iterable[Entry]) -> None:
        """Replace the contents with a persisted snapshot, taken as-is."""
        self._entries = list(snapshot)
        self._ids.advance_past(e.id for e in self._entries)

    def _index_of(self, entry_id: str) -> int:
        for i, e in enumerate(self._entries):
            if e.id == entry_id:
                return i
        raise NotFound(entry_id)
