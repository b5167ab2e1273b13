"""Shift status definitions and the status cycle."""
from enum import Enum

from .rules import STATUSES


class ShiftStatus(str, Enum):
    """Attendance status of one staff member on one day."""
    WORK = "WORK"        # 出勤
    OFF = "OFF"          # 休み
    REQUEST = "REQUEST"  # 希望休 (requested day off)

    @property
    def is_work(self) -> bool:
        """True if the staff member counts towards the day's coverage."""
        return self is ShiftStatus.WORK

    @property
    def label(self) -> str:
        """Localized label used in exports."""
        return STATUSES[self.value].label

    @property
    def code(self) -> str:
        """One-character code shown in grid cells."""
        return STATUSES[self.value].code

    def next(self) -> "ShiftStatus":
        """Successor in the click cycle."""
        return next_status(self)

    @classmethod
    def from_code(cls, code: str) -> "ShiftStatus":
        """Parse a persisted status code. Raises ValueError on unknown codes."""
        key = str(code).strip().upper()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown shift status code: {code!r}") from None


_CYCLE = {
    ShiftStatus.WORK: ShiftStatus.OFF,
    ShiftStatus.OFF: ShiftStatus.REQUEST,
    ShiftStatus.REQUEST: ShiftStatus.WORK,
}


def next_status(status: ShiftStatus) -> ShiftStatus:
    """WORK → OFF → REQUEST → WORK."""
    return _CYCLE[ShiftStatus(status)]
