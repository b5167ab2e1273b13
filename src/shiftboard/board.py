"""
Shift Board
===========
Application facade tying together the roster, the schedule store, the month
window and the persistence port. The web UI and the CLI only talk to this
object.

Persistence is explicit: call ``load()`` at startup and ``save()`` after each
mutation.
"""
import io
from datetime import date
from typing import Callable, Iterable, Optional

from shiftboard.analytics.coverage import CoverageStats, compute_coverage
from shiftboard.exceptions import ConfirmationRequired
from shiftboard.io.csv_export import export_month_to_csv
from shiftboard.io.excel_export import export_month_to_excel
from shiftboard.io.persistence import MemoryStorage, StateStorage, StoredState, make_storage
from shiftboard.models.config import BoardConfig
from shiftboard.models.month import MonthKey
from shiftboard.models.staff import StaffMember
from shiftboard.models.status import ShiftStatus
from shiftboard.navigation import MonthWindow
from shiftboard.roster import Roster
from shiftboard.store.schedule_store import MonthlySchedule, ScheduleStore
from shiftboard.utils.logging_setup import get_logger, log_coverage_check

logger = get_logger("shiftboard.board")


class ShiftBoard:
    """One tenant's roster and schedule in a single interactive session."""

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        storage: Optional[StateStorage] = None,
        clock: Optional[Callable[[], date]] = None,
        id_clock: Optional[Callable[[], int]] = None,
    ):
        self.config = config or BoardConfig()
        self.storage = storage or make_storage(self.config.storage, self.config.data_dir)
        self._id_clock = id_clock
        self.roster = Roster.seeded(clock=id_clock)
        self.schedule = ScheduleStore()
        self.window = MonthWindow(forward_month_limit=self.config.forward_month_limit, clock=clock)

    @classmethod
    def in_memory(cls, config: Optional[BoardConfig] = None, **kwargs) -> "ShiftBoard":
        return cls(config=config, storage=MemoryStorage(), **kwargs)

    # --- Lifecycle ---

    def load(self) -> "ShiftBoard":
        """Replace in-memory state with the stored records (defaults if absent/corrupt)."""
        stored = self.storage.load()
        self.roster = Roster.deserialize(stored.roster, clock=self._id_clock)
        self.schedule = ScheduleStore.deserialize(stored.schedule)
        logger.info(
            f"Loaded {len(self.roster)} staff, {len(self.schedule.months())} months"
        )
        return self

    def save(self) -> None:
        self.storage.save(StoredState(
            roster=self.roster.serialize(),
            schedule=self.schedule.serialize(),
        ))

    # --- Month window ---

    @property
    def current_month(self) -> MonthKey:
        return self.window.current

    def shift_month(self, offset: int) -> MonthKey:
        """Raises NavigationLimitError when moving past the planning limit."""
        return self.window.shift(offset)

    def go_to(self, month: MonthKey) -> MonthKey:
        """Jump to ``month`` under the same limit as stepwise navigation."""
        return self.window.shift(self.window.current.months_until(month))

    # --- Schedule ---

    def month_schedule(self, month: Optional[MonthKey] = None) -> MonthlySchedule:
        """Slice for ``month`` (default: displayed month), lazily initialized."""
        return self.schedule.get_month(month or self.current_month, self.roster)

    def toggle(self, staff_id: str, day_index: int, month: Optional[MonthKey] = None) -> ShiftStatus:
        """Advance one cell through WORK → OFF → REQUEST → WORK."""
        month = month or self.current_month
        self.month_schedule(month)
        new_status = self.schedule.toggle_status(month, staff_id, day_index)
        stats = self.stats(month)
        log_coverage_check(logger, day_index + 1, stats.daily_count[day_index], stats.min_staff_per_day)
        return new_status

    def stats(self, month: Optional[MonthKey] = None) -> CoverageStats:
        month = month or self.current_month
        return compute_coverage(
            self.month_schedule(month),
            self.roster,
            month.days_in_month,
            self.config.min_staff_per_day,
        )

    # --- Roster ---

    def add_staff(self, name: Optional[str] = None) -> StaffMember:
        return self.roster.add_staff(name, reserved=self.schedule.known_staff_ids())

    def rename_staff(self, staff_id: str, new_name: str) -> bool:
        return self.roster.rename_staff(staff_id, new_name)

    def remove_staff(self, staff_id: str, confirmed: bool = False) -> Optional[StaffMember]:
        """
        Remove a member from the roster (history is kept, not shown).

        Raises:
            ConfirmationRequired: if ``confirmed`` is False; nothing changes
        """
        if not confirmed:
            raise ConfirmationRequired(
                "このスタッフを削除しますか？過去のデータも表示されなくなります。"
            )
        return self.roster.remove_staff(staff_id)

    def staff(self) -> Iterable[StaffMember]:
        return iter(self.roster)

    # --- Export ---

    def export_csv(self, month: Optional[MonthKey] = None, output=None) -> str:
        month = month or self.current_month
        return export_month_to_csv(self.month_schedule(month), self.roster, month.days_in_month, output)

    def export_excel(self, month: Optional[MonthKey] = None, output=None) -> bytes:
        """Write the workbook to ``output`` if given; always return its bytes."""
        month = month or self.current_month
        buffer = io.BytesIO()
        export_month_to_excel(
            month, self.month_schedule(month), self.roster, buffer,
            min_staff_per_day=self.config.min_staff_per_day,
            stats=self.stats(month),
        )
        data = buffer.getvalue()
        if output is not None:
            with open(output, "wb") as f:
                f.write(data)
        return data
