"""
Schedule Store
==============
Month-keyed mapping of staff id → per-day statuses.

Months are materialized lazily: the first time a month is read for a roster,
every member without a DaySequence gets one filled with WORK. Single-cell edits
are copy-on-write. The edited month gets a fresh mapping and the edited member
a fresh tuple; every other month object and every other tuple is shared, so
a snapshot taken before an edit stays valid after it.
"""
import json
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from shiftboard.exceptions import InvalidCellError
from shiftboard.models.month import MonthKey
from shiftboard.models.staff import StaffMember
from shiftboard.models.status import ShiftStatus, next_status
from shiftboard.utils.logging_setup import get_logger, log_function_call

logger = get_logger("shiftboard.store")

SCHEDULE_RECORD_VERSION = 1

DaySequence = Tuple[ShiftStatus, ...]
MonthlySchedule = Mapping[str, DaySequence]


def default_sequence(month: MonthKey) -> DaySequence:
    """A fully staffed month: WORK on every day."""
    return (ShiftStatus.WORK,) * month.days_in_month


class ScheduleStore:
    """All schedule data, keyed by MonthKey then staff id."""

    def __init__(self, months: Optional[Dict[MonthKey, Dict[str, DaySequence]]] = None):
        self._months: Dict[MonthKey, Dict[str, DaySequence]] = {}
        for key, staff_map in (months or {}).items():
            self._months[key] = {sid: tuple(seq) for sid, seq in staff_map.items()}
        self.version = 0

    # --- Queries ---

    def months(self) -> List[MonthKey]:
        """Materialized months, oldest first."""
        return sorted(self._months)

    def has_month(self, month: MonthKey) -> bool:
        return month in self._months

    def known_staff_ids(self) -> set:
        """Every staff id with data in any month, including removed staff."""
        return {sid for staff_map in self._months.values() for sid in staff_map}

    def history_for(self, staff_id: str, month: MonthKey) -> Optional[DaySequence]:
        """Direct lookup by id; works for staff no longer on the roster."""
        return self._months.get(month, {}).get(staff_id)

    def get_status(self, month: MonthKey, staff_id: str, day_index: int) -> ShiftStatus:
        seq = self._require_sequence(month, staff_id)
        self._require_day(seq, day_index, month, staff_id)
        return seq[day_index]

    def snapshot(self) -> Mapping[MonthKey, MonthlySchedule]:
        """Read-only view of the current state (inner tuples are immutable)."""
        return MappingProxyType({k: MappingProxyType(v) for k, v in self._months.items()})

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScheduleStore):
            return NotImplemented
        return self._months == other._months

    # --- Lazy materialization ---

    def get_month(self, month: MonthKey, roster: Iterable[StaffMember]) -> MonthlySchedule:
        """
        Schedule slice for ``month``, creating all-WORK entries for roster
        members that have none yet.

        Idempotent: a second call with the same roster returns equal content
        and does not bump the store version.
        """
        current = self._months.get(month, {})
        missing = [m.id for m in roster if m.id not in current]
        if missing or month not in self._months:
            updated = dict(current)
            for staff_id in missing:
                updated[staff_id] = default_sequence(month)
            self._months[month] = updated
            self.version += 1
            logger.debug(f"Materialized {month}: {len(missing)} new staff entries")
        return MappingProxyType(self._months[month])

    # --- Mutations ---

    def _require_sequence(self, month: MonthKey, staff_id: str) -> DaySequence:
        seq = self._months.get(month, {}).get(staff_id)
        if not seq:
            raise InvalidCellError(f"No schedule for staff {staff_id!r} in {month}")
        return seq

    @staticmethod
    def _require_day(seq: DaySequence, day_index: int, month: MonthKey, staff_id: str) -> None:
        if isinstance(day_index, bool) or not isinstance(day_index, int):
            raise InvalidCellError(f"day_index must be an int, got {day_index!r}")
        if not 0 <= day_index < len(seq):
            raise InvalidCellError(
                f"day_index {day_index} out of range 0..{len(seq) - 1} for {staff_id!r} in {month}"
            )

    @log_function_call
    def set_status(
        self, month: MonthKey, staff_id: str, day_index: int, status: ShiftStatus
    ) -> "ScheduleStore":
        """
        Replace exactly one (month, staff, day) entry.

        Raises:
            InvalidCellError: unknown staff/month (call get_month first) or
                day_index out of range
        """
        seq = self._require_sequence(month, staff_id)
        self._require_day(seq, day_index, month, staff_id)
        status = ShiftStatus(status)

        new_month = dict(self._months[month])
        new_month[staff_id] = seq[:day_index] + (status,) + seq[day_index + 1:]
        self._months[month] = new_month
        self.version += 1
        logger.debug(f"{month} {staff_id} day {day_index + 1}: {seq[day_index].value} → {status.value}")
        return self

    def toggle_status(self, month: MonthKey, staff_id: str, day_index: int) -> ShiftStatus:
        """Advance one cell through the status cycle and return the new status."""
        current = self.get_status(month, staff_id, day_index)
        new_status = next_status(current)
        self.set_status(month, staff_id, day_index, new_status)
        return new_status

    # --- Serialization ---

    def to_record(self) -> dict:
        return {
            "version": SCHEDULE_RECORD_VERSION,
            "months": {
                str(month): {sid: [s.value for s in seq] for sid, seq in staff_map.items()}
                for month, staff_map in sorted(self._months.items())
            },
        }

    def serialize(self) -> str:
        return json.dumps(self.to_record(), ensure_ascii=False)

    @classmethod
    def from_record(cls, record) -> "ScheduleStore":
        """
        Build a store from a stored record.

        Accepts ``{"version": 1, "months": {...}}`` or the bare months mapping.
        Individual bad entries (unparseable month key, unknown status code,
        wrong length) are dropped with a warning and will be re-initialized
        lazily. Raises ValueError if the record itself is unusable.
        """
        if not isinstance(record, dict):
            raise ValueError("Schedule record must be an object")
        if "months" in record and isinstance(record.get("months"), dict):
            version = record.get("version", SCHEDULE_RECORD_VERSION)
            if version != SCHEDULE_RECORD_VERSION:
                raise ValueError(f"Unsupported schedule record version: {version}")
            raw_months = record["months"]
        else:
            raw_months = record

        months: Dict[MonthKey, Dict[str, DaySequence]] = {}
        for raw_key, staff_map in raw_months.items():
            try:
                month = MonthKey.parse(raw_key)
            except ValueError:
                logger.warning(f"Dropping schedule month with invalid key {raw_key!r}")
                continue
            if not isinstance(staff_map, dict):
                logger.warning(f"Dropping schedule month {raw_key!r}: not an object")
                continue
            entries = months.setdefault(month, {})
            for staff_id, codes in staff_map.items():
                try:
                    seq = tuple(ShiftStatus.from_code(c) for c in codes)
                except (ValueError, TypeError) as e:
                    logger.warning(f"Dropping {raw_key}/{staff_id}: {e}")
                    continue
                if len(seq) != month.days_in_month:
                    logger.warning(
                        f"Dropping {raw_key}/{staff_id}: {len(seq)} days, expected {month.days_in_month}"
                    )
                    continue
                entries[str(staff_id)] = seq
        return cls(months)

    @classmethod
    def deserialize(cls, text: Optional[str]) -> "ScheduleStore":
        """Parse a schedule record; absent or corrupt records give an empty store."""
        if not text:
            logger.info("No stored schedule, starting empty")
            return cls()
        try:
            return cls.from_record(json.loads(text))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Corrupt schedule record, starting empty: {e}")
            return cls()
