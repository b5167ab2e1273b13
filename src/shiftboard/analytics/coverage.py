"""
Coverage & Fairness Statistics
==============================
Single source of truth for the daily headcount and per-staff WORK totals of a
displayed month. Used by the web view, the CLI and both exports.

Always recomputed from scratch from (month slice, roster, days in month).
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Sequence

import pandas as pd

from shiftboard.models.staff import StaffMember
from shiftboard.models.status import ShiftStatus
from shiftboard.utils.logging_setup import get_logger

logger = get_logger("shiftboard.analytics.coverage")


@dataclass
class CoverageStats:
    """Derived statistics for one month. Never persisted."""
    days_in_month: int
    daily_count: List[int]
    staff_total: Dict[str, int]
    min_staff_per_day: int = 3
    staff_order: List[str] = field(default_factory=list)

    def is_understaffed(self, day_index: int) -> bool:
        """Informational only; never blocks an edit."""
        return self.daily_count[day_index] < self.min_staff_per_day

    @property
    def understaffed_days(self) -> List[int]:
        """0-based indices of days below the threshold."""
        return [d for d in range(self.days_in_month) if self.is_understaffed(d)]

    def percentage(self, staff_id: str) -> float:
        """WORK days as a percentage of the days in the month."""
        if self.days_in_month <= 0:
            return 0.0
        return 100.0 * self.staff_total.get(staff_id, 0) / self.days_in_month


def compute_coverage(
    month_schedule: Mapping[str, Sequence[ShiftStatus]],
    roster: Iterable[StaffMember],
    days_in_month: int,
    min_staff_per_day: int = 3,
) -> CoverageStats:
    """
    Count WORK cells per day and per roster member.

    Staff present in the schedule but not in the roster are ignored; roster
    members without a sequence count as zero.

    Args:
        month_schedule: staff id → statuses for the month
        roster: Current roster (defines who counts and display order)
        days_in_month: Length of the month
        min_staff_per_day: Understaffing threshold

    Returns:
        CoverageStats
    """
    daily_count = [0] * days_in_month
    staff_total: Dict[str, int] = {}
    order: List[str] = []

    for member in roster:
        order.append(member.id)
        staff_total[member.id] = 0
        for day_index, status in enumerate(month_schedule.get(member.id, ())):
            if day_index >= days_in_month:
                break
            if status == ShiftStatus.WORK:
                daily_count[day_index] += 1
                staff_total[member.id] += 1

    stats = CoverageStats(
        days_in_month=days_in_month,
        daily_count=daily_count,
        staff_total=staff_total,
        min_staff_per_day=min_staff_per_day,
        staff_order=order,
    )
    logger.debug(
        f"Coverage for {len(order)} staff, {days_in_month} days: "
        f"{len(stats.understaffed_days)} understaffed (min {min_staff_per_day})"
    )
    return stats


def coverage_to_dataframe(stats: CoverageStats) -> pd.DataFrame:
    """Daily headcount table: 日, 出勤人数, 不足."""
    return pd.DataFrame({
        "日": list(range(1, stats.days_in_month + 1)),
        "出勤人数": stats.daily_count,
        "不足": [stats.is_understaffed(d) for d in range(stats.days_in_month)],
    })


def fairness_to_dataframe(stats: CoverageStats, roster: Iterable[StaffMember]) -> pd.DataFrame:
    """Per-staff totals: スタッフ名, 出勤日数, 割合(%) in roster order."""
    rows = [
        {
            "id": m.id,
            "スタッフ名": m.name,
            "出勤日数": stats.staff_total.get(m.id, 0),
            "割合(%)": round(stats.percentage(m.id), 1),
        }
        for m in roster
    ]
    if not rows:
        return pd.DataFrame(columns=["id", "スタッフ名", "出勤日数", "割合(%)"])
    return pd.DataFrame(rows)
