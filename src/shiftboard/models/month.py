"""Calendar month keys."""
import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

_KEY_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


@dataclass(frozen=True, order=True)
class MonthKey:
    """A calendar year and 1-based month, used as the schedule store key."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")
        if self.year < 1:
            raise ValueError(f"year must be positive, got {self.year}")

    @classmethod
    def parse(cls, text: str) -> "MonthKey":
        """Parse ``YYYY-M`` or ``YYYY-MM``."""
        m = _KEY_RE.match(str(text))
        if not m:
            raise ValueError(f"Invalid month key: {text!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    @classmethod
    def from_date(cls, d: date) -> "MonthKey":
        return cls(d.year, d.month)

    @classmethod
    def today(cls, today: Optional[date] = None) -> "MonthKey":
        return cls.from_date(today or date.today())

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def index(self) -> int:
        """Months since year 0, for month arithmetic and comparisons."""
        return self.year * 12 + (self.month - 1)

    def shift(self, offset: int) -> "MonthKey":
        """Return the month ``offset`` months later (negative = earlier)."""
        year, month0 = divmod(self.index + int(offset), 12)
        return MonthKey(year, month0 + 1)

    def months_until(self, other: "MonthKey") -> int:
        return other.index - self.index

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def title(self) -> str:
        """Display title, e.g. ``2026年 10月``."""
        return f"{self.year}年 {self.month}月"
