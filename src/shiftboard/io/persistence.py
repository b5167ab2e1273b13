"""
State Persistence
=================
Persistence port for the roster and schedule records.

The application calls ``load()`` once at startup and ``save()`` after every
mutation. Each record is stored as JSON text and versioned independently;
parsing (and the fallback to defaults) happens in Roster.deserialize and
ScheduleStore.deserialize, so a storage backend only moves text around.
Writes are synchronous and not transactional across the two records.
"""
import sqlite3
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

from shiftboard.utils.logging_setup import get_logger

logger = get_logger("shiftboard.io.persistence")

ROSTER_RECORD = "shift_staff_list"
SCHEDULE_RECORD = "shift_data_v2"


@dataclass
class StoredState:
    """Raw record texts. ``None`` means the record was never written or is unreadable."""
    roster: Optional[str] = None
    schedule: Optional[str] = None


class StateStorage(ABC):
    """Abstract persistence port."""

    @abstractmethod
    def load(self) -> StoredState:
        """Read both records. Must not raise for missing or unreadable data."""
        pass

    @abstractmethod
    def save(self, state: StoredState) -> None:
        """Write both records."""
        pass


class MemoryStorage(StateStorage):
    """Keeps records in memory. Used by tests and throwaway sessions."""

    def __init__(self, roster: Optional[str] = None, schedule: Optional[str] = None):
        self.records: Dict[str, Optional[str]] = {ROSTER_RECORD: roster, SCHEDULE_RECORD: schedule}
        self.save_count = 0

    def load(self) -> StoredState:
        return StoredState(roster=self.records[ROSTER_RECORD], schedule=self.records[SCHEDULE_RECORD])

    def save(self, state: StoredState) -> None:
        self.records[ROSTER_RECORD] = state.roster
        self.records[SCHEDULE_RECORD] = state.schedule
        self.save_count += 1


class JsonFileStorage(StateStorage):
    """One UTF-8 JSON file per record in ``data_dir``."""

    def __init__(self, data_dir: Union[str, Path] = "data"):
        self.data_dir = Path(data_dir)

    def path_for(self, record: str) -> Path:
        return self.data_dir / f"{record}.json"

    def _read(self, record: str) -> Optional[str]:
        path = self.path_for(record)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None

    def load(self) -> StoredState:
        state = StoredState(roster=self._read(ROSTER_RECORD), schedule=self._read(SCHEDULE_RECORD))
        logger.info(f"Loaded state from {self.data_dir}")
        return state

    def save(self, state: StoredState) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for record, text in ((ROSTER_RECORD, state.roster), (SCHEDULE_RECORD, state.schedule)):
            if text is not None:
                self.path_for(record).write_text(text, encoding="utf-8")
        logger.debug(f"Saved state to {self.data_dir}")


class SqliteStorage(StateStorage):
    """Both records as rows of a ``records`` table in a SQLite database."""

    def __init__(self, db_path: Union[str, Path] = "data/shiftboard.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS records (
                    name TEXT PRIMARY KEY,
                    payload TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

    def load(self) -> StoredState:
        try:
            with sqlite3.connect(self.db_path) as conn:
                rows = dict(conn.execute("SELECT name, payload FROM records").fetchall())
        except sqlite3.Error as e:
            logger.warning(f"Could not read {self.db_path}: {e}")
            return StoredState()
        return StoredState(roster=rows.get(ROSTER_RECORD), schedule=rows.get(SCHEDULE_RECORD))

    def save(self, state: StoredState) -> None:
        now = datetime.now().isoformat(timespec="seconds")
        with sqlite3.connect(self.db_path) as conn:
            for record, text in ((ROSTER_RECORD, state.roster), (SCHEDULE_RECORD, state.schedule)):
                if text is None:
                    continue
                conn.execute(
                    "INSERT INTO records (name, payload, updated_at) VALUES (?, ?, ?) "
                    "ON CONFLICT(name) DO UPDATE SET payload = excluded.payload, "
                    "updated_at = excluded.updated_at",
                    (record, text, now),
                )
        logger.debug(f"Saved state to {self.db_path}")


def make_storage(kind: str = "json", data_dir: Union[str, Path] = "data") -> StateStorage:
    """Build the storage backend named in the configuration."""
    if kind == "json":
        return JsonFileStorage(data_dir)
    if kind == "sqlite":
        return SqliteStorage(Path(data_dir) / "shiftboard.db")
    if kind == "memory":
        return MemoryStorage()
    raise ValueError(f"Unknown storage backend: {kind!r}")
