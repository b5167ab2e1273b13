"""
Month Window Controller
=======================
Tracks the displayed month. Forward navigation is capped at
``forward_month_limit`` months after the real current month; backward
navigation is unrestricted since history is retained.
"""
from datetime import date
from typing import Callable, Optional

from shiftboard.exceptions import NavigationLimitError
from shiftboard.models.month import MonthKey
from shiftboard.models.rules import RULES
from shiftboard.utils.logging_setup import get_logger

logger = get_logger("shiftboard.navigation")


class MonthWindow:
    """Currently displayed month plus the navigation policy."""

    def __init__(
        self,
        current: Optional[MonthKey] = None,
        forward_month_limit: int = RULES.default_forward_month_limit,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._clock = clock or date.today
        self.forward_month_limit = forward_month_limit
        self.current = current or MonthKey.today(self._clock())

    def max_month(self, today: Optional[date] = None) -> MonthKey:
        """Latest month that may be displayed, relative to the real date."""
        return MonthKey.today(today or self._clock()).shift(self.forward_month_limit)

    def can_shift(self, offset: int, today: Optional[date] = None) -> bool:
        if offset <= 0:
            return True
        return self.current.shift(offset) <= self.max_month(today)

    def shift(self, offset: int, today: Optional[date] = None) -> MonthKey:
        """
        Move the displayed month by ``offset`` months.

        Raises:
            NavigationLimitError: forward move past the limit; state unchanged
        """
        target = self.current.shift(offset)
        if offset > 0:
            max_month = self.max_month(today)
            if target > max_month:
                logger.warning(f"Navigation to {target} rejected (limit {max_month})")
                raise NavigationLimitError(target, max_month, self.forward_month_limit)
        if target != self.current:
            logger.debug(f"Month {self.current} → {target}")
        self.current = target
        return target
