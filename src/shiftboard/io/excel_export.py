"""Excel export of one month's schedule with coverage highlighting."""
import io
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from shiftboard.analytics.coverage import CoverageStats, compute_coverage
from shiftboard.io.csv_export import day_headers
from shiftboard.models.month import MonthKey
from shiftboard.models.rules import RULES, STATUSES
from shiftboard.models.staff import StaffMember
from shiftboard.models.status import ShiftStatus
from shiftboard.utils.logging_setup import get_logger

logger = get_logger("shiftboard.io.excel_export")

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)
CENTER = Alignment(horizontal="center", vertical="center")


def _fill(hex_color: str) -> PatternFill:
    color = hex_color.lstrip("#").upper()
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def export_month_to_excel(
    month: MonthKey,
    month_schedule: Mapping[str, Sequence[ShiftStatus]],
    roster: Iterable[StaffMember],
    output: Union[str, Path, io.BytesIO],
    min_staff_per_day: int = RULES.default_min_staff_per_day,
    stats: Optional[CoverageStats] = None,
) -> None:
    """
    Export a month to an Excel workbook.

    Sheet "シフト表": staff × day grid coloured by status, a 合計 column with
    per-staff WORK totals and a 日計(人) row with the daily headcount, where
    understaffed days are highlighted.
    Sheet "公平性": per-staff totals and percentages.

    Args:
        month: Month being exported
        month_schedule: staff id → statuses
        roster: Rows, in display order
        output: File path or BytesIO buffer
        min_staff_per_day: Understaffing threshold
        stats: Precomputed statistics (recomputed if omitted)
    """
    members: List[StaffMember] = list(roster)
    days = month.days_in_month
    if stats is None:
        stats = compute_coverage(month_schedule, members, days, min_staff_per_day)

    wb = Workbook()

    # ========== Grid Sheet ==========
    ws = wb.active
    ws.title = "シフト表"
    ws.cell(row=1, column=1, value=month.title).font = Font(bold=True, size=14)

    headers = [RULES.staff_column_header] + day_headers(days) + ["合計"]
    for j, header in enumerate(headers, start=1):
        cell = ws.cell(row=2, column=j, value=header)
        cell.font = Font(bold=True)
        cell.alignment = CENTER
        cell.border = BORDER_THIN

    for r, member in enumerate(members, start=3):
        ws.cell(row=r, column=1, value=member.name).font = Font(bold=True)
        seq = month_schedule.get(member.id, ())
        for d in range(days):
            status = ShiftStatus(seq[d]) if d < len(seq) else None
            cell = ws.cell(row=r, column=2 + d, value=status.label if status else "")
            if status is not None:
                cfg = STATUSES[status.value]
                cell.fill = _fill(cfg.color_bg)
                cell.font = Font(color=cfg.color_text.lstrip("#"))
            cell.alignment = CENTER
            cell.border = BORDER_THIN
        total = ws.cell(row=r, column=2 + days, value=stats.staff_total.get(member.id, 0))
        total.font = Font(bold=True)
        total.alignment = CENTER

    footer = len(members) + 3
    ws.cell(row=footer, column=1, value="日計(人)").font = Font(bold=True)
    for d, count in enumerate(stats.daily_count):
        cell = ws.cell(row=footer, column=2 + d, value=count)
        cell.alignment = CENTER
        cell.border = BORDER_THIN
        if stats.is_understaffed(d):
            cell.fill = _fill(RULES.understaffed_bg)
            cell.font = Font(bold=True, color=RULES.understaffed_text.lstrip("#"))

    ws.column_dimensions["A"].width = 16
    for j in range(2, days + 3):
        ws.column_dimensions[get_column_letter(j)].width = 7
    ws.freeze_panes = "B3"

    # ========== Fairness Sheet ==========
    ws_fair = wb.create_sheet("公平性")
    for j, header in enumerate([RULES.staff_column_header, "出勤日数", "日数", "割合(%)"], start=1):
        ws_fair.cell(row=1, column=j, value=header).font = Font(bold=True)
    for i, member in enumerate(members, start=2):
        ws_fair.cell(row=i, column=1, value=member.name)
        ws_fair.cell(row=i, column=2, value=stats.staff_total.get(member.id, 0))
        ws_fair.cell(row=i, column=3, value=days)
        ws_fair.cell(row=i, column=4, value=round(stats.percentage(member.id), 1))
    for j in range(1, 5):
        ws_fair.column_dimensions[get_column_letter(j)].width = 14
    ws_fair.freeze_panes = "A2"

    if isinstance(output, io.BytesIO):
        wb.save(output)
    else:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(str(path))
    logger.info(f"Exported {month} ({len(members)} staff) to Excel")
