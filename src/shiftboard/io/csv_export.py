"""CSV export of one month's schedule."""
import io
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, TextIO, Union

import pandas as pd

from shiftboard.models.rules import RULES
from shiftboard.models.staff import StaffMember
from shiftboard.models.status import ShiftStatus
from shiftboard.utils.logging_setup import get_logger

logger = get_logger("shiftboard.io.csv_export")


def day_headers(days_in_month: int) -> List[str]:
    """``1日`` … ``N日``."""
    return [f"{d}{RULES.day_header_suffix}" for d in range(1, days_in_month + 1)]


def month_to_dataframe(
    month_schedule: Mapping[str, Sequence[ShiftStatus]],
    roster: Iterable[StaffMember],
    days_in_month: int,
) -> pd.DataFrame:
    """
    Staff × day table of localized status labels, one row per roster member
    in roster order. Members without data get empty cells.
    """
    columns = [RULES.staff_column_header] + day_headers(days_in_month)
    rows = []
    for member in roster:
        seq = month_schedule.get(member.id, ())
        labels = [ShiftStatus(s).label for s in seq[:days_in_month]]
        labels += [""] * (days_in_month - len(labels))
        rows.append([member.name] + labels)
    return pd.DataFrame(rows, columns=columns)


def export_month_to_csv(
    month_schedule: Mapping[str, Sequence[ShiftStatus]],
    roster: Iterable[StaffMember],
    days_in_month: int,
    output: Optional[Union[str, Path, TextIO]] = None,
) -> str:
    """
    Write the month as CSV.

    Args:
        month_schedule: staff id → statuses
        roster: Rows, in display order
        days_in_month: Number of day columns
        output: Path or text buffer (None = only return the text)

    Returns:
        The CSV text
    """
    df = month_to_dataframe(month_schedule, roster, days_in_month)
    buffer = io.StringIO()
    df.to_csv(buffer, index=False, lineterminator="\n")
    text = buffer.getvalue()

    if output is None:
        return text
    if isinstance(output, (str, Path)):
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Exported {len(df)} rows to {path}")
    else:
        output.write(text)
    return text
