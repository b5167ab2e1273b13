"""Exceptions raised by the shift board core."""


class ShiftBoardError(Exception):
    """Base class for shift board errors."""


class InvalidCellError(ShiftBoardError, ValueError):
    """A cell edit referenced an unknown staff id, month or day index."""


class NavigationLimitError(ShiftBoardError):
    """Forward navigation past the planning limit was rejected."""

    def __init__(self, target, max_month, months_ahead: int):
        self.target = target
        self.max_month = max_month
        self.months_ahead = months_ahead
        super().__init__(
            f"シフト作成は{months_ahead}ヶ月先 ({max_month}) まで可能です。{target} には移動できません。"
        )


class ConfirmationRequired(ShiftBoardError):
    """A destructive action was requested without confirmation."""
