"""
CRUD controller for the KeySwitch admin view.

The controller keeps the per-view state (current selection and the snapshot
of all KeySwitches), runs one UI event at a time against a KeySwitchService
and records the notifications and refresh signals the view should render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from mechdex.errors import PersistenceError, describe_error_chain
from mechdex.fake_data import fill_key_switch
from mechdex.models import KeySwitch
from mechdex.service import KeySwitchService

logger = logging.getLogger(__name__)

# Regions of the view that need redrawing after a mutation.
MESSAGES_REGION = "messages"
TABLE_REGION = "key-switch-table"
# Signal that the edit dialog should be closed.
HIDE_DIALOG = "hide-dialog"

Severity = Literal["info", "error"]


@dataclass
class Message:
    severity: Severity
    summary: str
    detail: Optional[str] = None


class KeySwitchCrudController:
    """Event handlers for the KeySwitch CRUD screen."""

    def __init__(
        self,
        service: KeySwitchService,
        *,
        key_switches: Optional[list[KeySwitch]] = None,
        selected: Optional[KeySwitch] = None,
    ):
        self.service = service
        self.key_switches: list[KeySwitch] = list(key_switches or [])
        self.selected: Optional[KeySwitch] = selected
        self.messages: list[Message] = []
        self.updates: list[str] = []

    def initialize(self) -> list[KeySwitch]:
        """Load the snapshot. On failure the snapshot stays empty."""
        try:
            self.key_switches = self.service.get_all_key_switches()
        except Exception as exc:
            logger.warning("Failed to load KeySwitches: %s", exc)
            self.key_switches = []
            self._error(f"Error getting KeySwitches {exc}")
        return self.key_switches

    def open_new(self) -> KeySwitch:
        self.selected = KeySwitch()
        return self.selected

    def generate_data(self) -> Optional[KeySwitch]:
        """Fill the selection with sample values for demos."""
        if self.selected is None:
            self.selected = KeySwitch()
        try:
            fill_key_switch(self.selected)
        except Exception as exc:
            self._error(f"Error generating data {exc}")
        return self.selected

    def save(self) -> None:
        """Create the selection when it is pending, otherwise update it."""
        if self.selected is None:
            self._error("No KeySwitch selected")
            return
        try:
            if self.selected.is_pending:
                created = self.service.create_key_switch(self.selected)
                self._info(f"Create was successful with generated id of {created.id}")
                self.selected = None
            else:
                self.service.update_key_switch(self.selected)
                self._info("Update was successful")
            self._refresh()
            self.updates.append(HIDE_DIALOG)
        except PersistenceError as exc:
            self._error(str(exc))
        except Exception as exc:
            logger.exception("Save failed")
            self._error("Save not successful.")
            self._handle_exception(exc)

    def delete(self) -> None:
        if self.selected is None or self.selected.is_pending:
            self._error("No saved KeySwitch selected")
            return
        key_switch_id = self.selected.id
        try:
            self.service.delete_key_switch_by_id(key_switch_id)
            self._info(f"Delete was successful for id of {key_switch_id}")
            self.selected = None
            self._refresh()
        except PersistenceError as exc:
            self._error(str(exc))
        except Exception as exc:
            logger.exception("Delete failed")
            self._error("Delete not successful.")
            self._handle_exception(exc)

    def _refresh(self) -> None:
        # Always a full snapshot, fetched after the mutation has completed.
        self.key_switches = self.service.get_all_key_switches()
        for region in (MESSAGES_REGION, TABLE_REGION):
            if region not in self.updates:
                self.updates.append(region)

    def _handle_exception(self, exc: Exception) -> None:
        self._error(str(exc) or exc.__class__.__name__, detail=describe_error_chain(exc))

    def _info(self, summary: str) -> None:
        self.messages.append(Message(severity="info", summary=summary))

    def _error(self, summary: str, detail: Optional[str] = None) -> None:
        self.messages.append(Message(severity="error", summary=summary, detail=detail))
        if MESSAGES_REGION not in self.updates:
            self.updates.append(MESSAGES_REGION)
