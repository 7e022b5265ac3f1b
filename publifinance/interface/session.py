"""Mini README: Short-lived UI state for a dashboard session.

Structure:
    * ViewName - the three navigable views.
    * ModalKind - which editor, if any, is open.
    * SessionState - active view plus modal and edit target.

The web layer builds a ``SessionState`` from query parameters on every
request and hands it to the templates, so no view state lives in module
globals. Closing the modal always clears the edit target as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViewName(str, Enum):
    DASHBOARD = "dashboard"
    TRANSACTIONS = "transactions"
    GOALS = "goals"


class ModalKind(str, Enum):
    TRANSACTION = "transaction"
    GOAL = "goal"


@dataclass
class SessionState:
    """Which view is showing and which record, if any, is being edited."""

    active_view: ViewName = ViewName.DASHBOARD
    modal: Optional[ModalKind] = None
    editing_id: Optional[str] = None

    @classmethod
    def from_query(
        cls,
        view: Optional[str] = None,
        modal: Optional[str] = None,
        edit: Optional[str] = None,
    ) -> "SessionState":
        """Build state from loosely typed query values.

        Unknown view names fall back to the dashboard and unknown modal kinds
        leave the modal closed.
        """

        state = cls(active_view=_parse_view(view))
        kind = _parse_modal(modal)
        if kind is not None:
            state.open_modal(kind, edit or None)
        return state

    @property
    def is_editing(self) -> bool:
        return self.modal is not None and self.editing_id is not None

    def open_modal(self, kind: ModalKind, item_id: Optional[str] = None) -> None:
        self.modal = kind
        self.editing_id = item_id

    def close_modal(self) -> None:
        self.modal = None
        self.editing_id = None


def _parse_view(value: Optional[str]) -> ViewName:
    try:
        return ViewName((value or "").strip().lower())
    except ValueError:
        return ViewName.DASHBOARD


def _parse_modal(value: Optional[str]) -> Optional[ModalKind]:
    try:
        return ModalKind((value or "").strip().lower())
    except ValueError:
        return None
