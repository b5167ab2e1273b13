"""
Session State Management
========================
Encapsulates all Streamlit session state interactions.

The ShiftBoard lives in ``st.session_state`` for the whole browser session.
Every mutating action goes through this manager, which saves the board right
after the mutation.
"""
import os
from typing import Optional

import streamlit as st

from shiftboard.board import ShiftBoard
from shiftboard.exceptions import NavigationLimitError
from shiftboard.models.config import BoardConfig, load_config
from shiftboard.utils.logging_setup import get_logger

logger = get_logger("shiftboard.app.session")

CONFIG_ENV = "SHIFTBOARD_CONFIG"


class SessionStateManager:
    """Manages type-safe access to session state."""

    @staticmethod
    def init_state(config: Optional[BoardConfig] = None, board_factory=None):
        """Initialize default session state values; loads the board once per session."""
        defaults = {
            "editing_staff_id": None,
            "pending_removal_id": None,
            "notice": None,
        }
        for key, value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = value

        if "board" not in st.session_state:
            cfg = config or load_config(os.environ.get(CONFIG_ENV))
            factory = board_factory or ShiftBoard
            st.session_state["board"] = factory(cfg).load()

    @property
    def board(self) -> ShiftBoard:
        return st.session_state["board"]

    @property
    def editing_staff_id(self) -> Optional[str]:
        return st.session_state.get("editing_staff_id")

    @editing_staff_id.setter
    def editing_staff_id(self, value: Optional[str]):
        st.session_state["editing_staff_id"] = value

    @property
    def pending_removal_id(self) -> Optional[str]:
        return st.session_state.get("pending_removal_id")

    @pending_removal_id.setter
    def pending_removal_id(self, value: Optional[str]):
        st.session_state["pending_removal_id"] = value

    @property
    def notice(self) -> Optional[str]:
        return st.session_state.get("notice")

    @notice.setter
    def notice(self, value: Optional[str]):
        st.session_state["notice"] = value

    def pop_notice(self) -> Optional[str]:
        message = self.notice
        self.notice = None
        return message

    # --- Actions (used as widget callbacks) ---

    def toggle(self, staff_id: str, day_index: int):
        self.board.toggle(staff_id, day_index)
        self.board.save()

    def shift_month(self, offset: int):
        try:
            self.board.shift_month(offset)
        except (NavigationLimitError, ValueError) as e:
            self.notice = str(e)

    def add_staff(self):
        self.board.add_staff()
        self.board.save()

    def start_edit(self, staff_id: str):
        self.editing_staff_id = staff_id

    @staticmethod
    def edit_name_key(staff_id: str) -> str:
        """Session key of the rename text input for ``staff_id``."""
        return f"edit_name_{staff_id}"

    def save_staff_name(self, staff_id: str, new_name: Optional[str] = None):
        """Rename to ``new_name``, or to the current value of the rename input."""
        if new_name is None:
            new_name = st.session_state.get(self.edit_name_key(staff_id))
        if new_name is not None:
            self.board.rename_staff(staff_id, new_name)
            self.board.save()
        self.editing_staff_id = None

    def request_removal(self, staff_id: str):
        self.pending_removal_id = staff_id

    def cancel_removal(self):
        self.pending_removal_id = None

    def confirm_removal(self):
        staff_id = self.pending_removal_id
        self.pending_removal_id = None
        if staff_id is None:
            return
        self.board.remove_staff(staff_id, confirmed=True)
        self.board.save()
