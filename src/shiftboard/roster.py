"""
Roster Manager
==============
Ordered list of staff identities. Removal is a soft delete: the member leaves
the roster but their schedule history stays in the ScheduleStore.
"""
import json
import time
from typing import Callable, Iterable, Iterator, List, Optional

from shiftboard.models.rules import RULES
from shiftboard.models.staff import StaffMember
from shiftboard.utils.logging_setup import get_logger

logger = get_logger("shiftboard.roster")

ROSTER_RECORD_VERSION = 1


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def seed_staff() -> List[StaffMember]:
    """Default roster used on first run or when the stored roster is unreadable."""
    return [StaffMember.from_dict(d) for d in RULES.seed_staff]


class Roster:
    """Ordered, identity-stable staff list."""

    def __init__(
        self,
        staff: Optional[Iterable[StaffMember]] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self._staff: List[StaffMember] = []
        self._clock = clock or _now_ms
        self._last_issued = 0
        self.version = 0
        for member in staff or []:
            if self.get(member.id) is not None:
                logger.warning(f"Duplicate staff id {member.id!r} ignored")
                continue
            self._staff.append(member)

    @classmethod
    def seeded(cls, clock: Optional[Callable[[], int]] = None) -> "Roster":
        return cls(seed_staff(), clock=clock)

    # --- Queries ---

    def __iter__(self) -> Iterator[StaffMember]:
        return iter(list(self._staff))

    def __len__(self) -> int:
        return len(self._staff)

    def __contains__(self, staff_id: str) -> bool:
        return self.get(staff_id) is not None

    def get(self, staff_id: str) -> Optional[StaffMember]:
        for member in self._staff:
            if member.id == staff_id:
                return member
        return None

    def ids(self) -> List[str]:
        return [m.id for m in self._staff]

    def names(self) -> List[str]:
        return [m.name for m in self._staff]

    # --- Mutations ---

    def _next_id(self, reserved: Iterable[str] = ()) -> str:
        """Time-based id, strictly increasing within this roster's lifetime."""
        taken = set(self.ids()) | {str(r) for r in reserved}
        candidate = max(self._clock(), self._last_issued + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last_issued = candidate
        return str(candidate)

    def add_staff(self, name: Optional[str] = None, reserved: Iterable[str] = ()) -> StaffMember:
        """
        Append a new staff member.

        Args:
            name: Display name (defaults to RULES.default_staff_name)
            reserved: Ids that must not be issued (e.g. ids of removed staff
                still present in the schedule store)

        Returns:
            The created StaffMember
        """
        name = (name or "").strip() or RULES.default_staff_name
        member = StaffMember(id=self._next_id(reserved), name=name)
        self._staff.append(member)
        self.version += 1
        logger.info(f"Added staff {member.id} ({member.name})")
        return member

    def rename_staff(self, staff_id: str, new_name: str) -> bool:
        """Rename in place. Unknown ids are ignored; returns False in that case."""
        member = self.get(staff_id)
        if member is None:
            logger.debug(f"rename_staff: unknown id {staff_id!r}, ignored")
            return False
        old = member.name
        member.name = str(new_name).strip()
        self.version += 1
        logger.info(f"Renamed staff {staff_id}: {old} → {member.name}")
        return True

    def remove_staff(self, staff_id: str) -> Optional[StaffMember]:
        """
        Remove from the roster only. Schedule history is retained and can still
        be looked up by the original id.
        """
        member = self.get(staff_id)
        if member is None:
            logger.debug(f"remove_staff: unknown id {staff_id!r}, ignored")
            return None
        self._staff = [m for m in self._staff if m.id != staff_id]
        self.version += 1
        logger.info(f"Removed staff {staff_id} ({member.name}) from roster; history retained")
        return member

    # --- Serialization ---

    def to_record(self) -> dict:
        return {
            "version": ROSTER_RECORD_VERSION,
            "staff": [m.to_dict() for m in self._staff],
        }

    def serialize(self) -> str:
        return json.dumps(self.to_record(), ensure_ascii=False)

    @classmethod
    def from_record(cls, record, clock: Optional[Callable[[], int]] = None) -> "Roster":
        """
        Build a roster from a stored record.

        Accepts ``{"version": 1, "staff": [...]}`` or a bare list of
        ``{"id", "name"}`` objects. Raises ValueError if the record is unusable.
        """
        if isinstance(record, dict):
            version = record.get("version", ROSTER_RECORD_VERSION)
            if version != ROSTER_RECORD_VERSION:
                raise ValueError(f"Unsupported roster record version: {version}")
            entries = record.get("staff")
        else:
            entries = record
        if not isinstance(entries, list):
            raise ValueError("Roster record must contain a list of staff")

        staff = []
        for entry in entries:
            if not isinstance(entry, dict) or "id" not in entry:
                raise ValueError(f"Invalid roster entry: {entry!r}")
            staff.append(StaffMember.from_dict(entry))
        return cls(staff, clock=clock)

    @classmethod
    def deserialize(cls, text: Optional[str], clock: Optional[Callable[[], int]] = None) -> "Roster":
        """Parse a roster record; absent or corrupt records give the seed roster."""
        if not text:
            logger.info("No stored roster, using seed roster")
            return cls.seeded(clock=clock)
        try:
            return cls.from_record(json.loads(text), clock=clock)
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(f"Corrupt roster record, falling back to seed roster: {e}")
            return cls.seeded(clock=clock)
