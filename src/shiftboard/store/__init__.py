# shiftboard/store - Month-keyed schedule storage
from .schedule_store import DaySequence, MonthlySchedule, ScheduleStore, default_sequence

__all__ = ["ScheduleStore", "DaySequence", "MonthlySchedule", "default_sequence"]
