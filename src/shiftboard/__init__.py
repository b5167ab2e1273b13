"""Shift Board: monthly attendance grid with coverage and fairness statistics."""
from .board import ShiftBoard
from .exceptions import ConfirmationRequired, InvalidCellError, NavigationLimitError, ShiftBoardError
from .models import BoardConfig, MonthKey, ShiftStatus, StaffMember, next_status
from .roster import Roster
from .store import ScheduleStore

__version__ = "0.1.0"

__all__ = [
    "ShiftBoard",
    "Roster", "ScheduleStore",
    "ShiftStatus", "next_status", "MonthKey", "StaffMember", "BoardConfig",
    "ShiftBoardError", "InvalidCellError", "NavigationLimitError", "ConfirmationRequired",
]
