# shiftboard/models - Data models for the shift board
from .config import BoardConfig, load_config
from .month import MonthKey
from .rules import RULES, STATUSES
from .staff import StaffMember
from .status import ShiftStatus, next_status

__all__ = [
    "ShiftStatus", "next_status",
    "MonthKey",
    "StaffMember",
    "BoardConfig", "load_config",
    "RULES", "STATUSES",
]
