"""
List Controller (State Machine)
===============================
Orchestrates add/edit/delete/clear against the list state, the persisted
store and the list panel, and reports the outcome through the alert banner.

Why is this file needed?
------------------------
1. Ordering: Every transition runs validate -> mutate state -> write store ->
   update rows -> notify, so the three copies of the list never drift apart.
2. Edit mode: The form is either creating (`Idle`) or bound to an existing
   entry (`Editing`). That mode is a field of this object, nothing else
   holds it.
3. Recovery: Rejections (empty, duplicate, stale id) become alerts and are
   never raised out of a Qt slot.

Classes:
    Idle, Editing: The two form modes.
    ListController: The state machine itself.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Union

from PySide6.QtCore import QObject, Signal, Slot

from shoppinglist.config import (
    AlertLevel, EDIT_LABEL, SUBMIT_LABEL,
    MSG_ADDED, MSG_CHANGED, MSG_CLEARED, MSG_DUPLICATE, MSG_EMPTY, MSG_NOT_FOUND, MSG_REMOVED,
)
from shoppinglist.model.entries import ListState
from shoppinglist.model.errors import DuplicateValue, NotFound
from shoppinglist.model.io import PersistenceStore
from shoppinglist.view.list_panel import ListPanel
from shoppinglist.view.widgets.entry_form import EntryForm

logger = logging.getLogger(__name__)

Notifier = Callable[[str, AlertLevel], None]


@dataclass(frozen=True)
class Idle:
    """Form creates new entries."""


@dataclass(frozen=True)
class Editing:
    """Form is bound to an existing entry."""
    entry_id: str


# Union for type hinting
FormMode = Union[Idle, Editing]


class ListController(QObject):
    mode_changed = Signal(object)

    def __init__(
            self,
            state: ListState,
            store: PersistenceStore,
            panel: ListPanel,
            form: EntryForm,
            notify: Notifier,
            parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.state = state
        self.store = store
        self.panel = panel
        self.form = form
        self.notify = notify
        self._mode: FormMode = Idle()

        self.form.submitted.connect(self.submit)
        self.panel.edit_requested.connect(self.request_edit)
        self.panel.delete_requested.connect(self.delete)
        self.panel.clear_requested.connect(self.clear_all)

    @property
    def mode(self) -> FormMode:
        return self._mode

    def _set_mode(self, mode: FormMode) -> None:
        if mode != self._mode:
            self._mode = mode
            self.mode_changed.emit(mode)

    def _reset_form(self) -> None:
        self.form.set_text("")
        self.form.set_submit_label(SUBMIT_LABEL)
        self._set_mode(Idle())

    def _show_chrome(self, visible: bool) -> None:
        self.panel.set_container_visible(visible)
        self.panel.set_clear_control_visible(visible)

    def _drop_stale(self, entry_id: str) -> None:
        logger.debug(f"Entry {entry_id} no longer exists.")
        self.panel.remove_row(entry_id)
        self.notify(MSG_NOT_FOUND, AlertLevel.DANGER)
        self._reset_form()

    # ---- transitions ----

    @Slot()
    def load(self) -> None:
        snapshot = self.store.load()
        self.state.restore(snapshot)
        self.panel.render_all(self.state.all())

        if snapshot:
            self._show_chrome(True)
        else:
            self.panel.set_clear_control_visible(False)

        self._reset_form()
        logger.info(f"Loaded {len(snapshot)} items.")

    @Slot()
    def submit(self) -> None:
        value = self.form.text().strip()
        if not value:
            # The field keeps its text for correction
            self.notify(MSG_EMPTY, AlertLevel.DANGER)
            return

        if isinstance(self._mode, Editing):
            self._commit_edit(self._mode.entry_id, value)
        else:
            self._commit_add(value)

    def _commit_add(self, value: str) -> None:
        try:
            entry = self.state.add(value)
        except DuplicateValue:
            self.notify(MSG_DUPLICATE, AlertLevel.DANGER)
            return

        self.store.upsert(entry.id, entry.value)
        self.panel.append_row(entry)
        self._show_chrome(True)
        self.notify(MSG_ADDED, AlertLevel.SUCCESS)
        self._reset_form()

    def _commit_edit(self, entry_id: str, value: str) -> None:
        try:
            entry = self.state.update(entry_id, value)
        except NotFound:
            self._drop_stale(entry_id)
            return

        self.store.upsert(entry.id, entry.value)
        self.panel.update_row_text(entry.id, entry.value)
        self.notify(MSG_CHANGED, AlertLevel.SUCCESS)
        self._reset_form()

    @Slot(str)
    def request_edit(self, entry_id: str) -> None:
        try:
            entry = self.state.get(entry_id)
        except NotFound:
            self._drop_stale(entry_id)
            return

        # Any edit already in progress is abandoned
        self.form.set_text(entry.value)
        self.form.set_submit_label(EDIT_LABEL)
        self.form.focus_input()
        self._set_mode(Editing(entry_id))

    @Slot(str)
    def delete(self, entry_id: str) -> None:
        try:
            self.state.remove(entry_id)
        except NotFound:
            self._drop_stale(entry_id)
            return

        self.panel.remove_row(entry_id)
        self.store.remove_entry(entry_id)
        if len(self.state) == 0:
            self._show_chrome(False)
        # Confirmation, but shown with the danger class
        self.notify(MSG_REMOVED, AlertLevel.DANGER)
        self._reset_form()

    @Slot()
    def clear_all(self) -> None:
        self.state.clear()
        self.panel.render_all([])
        self.store.clear()
        self._show_chrome(False)
        self.notify(MSG_CLEARED, AlertLevel.DANGER)
        self._reset_form()
        logger.info("List cleared.")
