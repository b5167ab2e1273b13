"""
Business Rules and Constants
============================
Central source of truth for status labels, cell colors, seed data and defaults.
"""
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class StatusConfig:
    code: str
    label: str
    color_bg: str
    color_text: str


# Status Definitions (keyed by persisted code)
STATUSES = {
    "WORK": StatusConfig("出", "出勤", "#3B82F6", "#FFFFFF"),
    "OFF": StatusConfig("ー", "休み", "#F3F4F6", "#9CA3AF"),
    "REQUEST": StatusConfig("希", "希望休", "#FEE2E2", "#DC2626"),
}

# Ordered list for legends
STATUS_ORDER = ["WORK", "OFF", "REQUEST"]


@dataclass
class RulesConfig:
    """Business rules constants."""

    # Coverage
    default_min_staff_per_day: int = 3
    default_forward_month_limit: int = 2

    # Roster
    default_staff_name: str = "新規スタッフ"
    seed_staff: List[Dict[str, str]] = field(default_factory=lambda: [
        {"id": "1", "name": "田中"},
        {"id": "2", "name": "佐藤"},
        {"id": "3", "name": "鈴木"},
    ])

    # Export
    csv_filename: str = "shift_schedule.csv"
    excel_filename: str = "shift_schedule.xlsx"
    staff_column_header: str = "スタッフ名"
    day_header_suffix: str = "日"

    # UI colors
    understaffed_bg: str = "#FEF2F2"
    understaffed_text: str = "#DC2626"


RULES = RulesConfig()
