"""Tests for the persistence backends and load/save fallbacks."""
import json
import sqlite3

import pytest

from shiftboard.board import ShiftBoard
from shiftboard.io.persistence import (
    ROSTER_RECORD,
    SCHEDULE_RECORD,
    JsonFileStorage,
    MemoryStorage,
    SqliteStorage,
    StoredState,
    make_storage,
)
from shiftboard.models.config import BoardConfig
from shiftboard.models.month import MonthKey
from shiftboard.models.status import ShiftStatus


def _board(storage, today, id_clock):
    return ShiftBoard(BoardConfig(log_file=None), storage=storage, clock=lambda: today, id_clock=id_clock)


class TestMemoryStorage:
    def test_empty_load(self):
        state = MemoryStorage().load()
        assert state.roster is None
        assert state.schedule is None

    def test_save_and_load(self):
        storage = MemoryStorage()
        storage.save(StoredState(roster="r", schedule="s"))
        assert storage.load() == StoredState(roster="r", schedule="s")
        assert storage.save_count == 1


class TestJsonFileStorage:
    def test_file_names(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.save(StoredState(roster="[]", schedule="{}"))
        assert (tmp_path / "shift_staff_list.json").read_text(encoding="utf-8") == "[]"
        assert (tmp_path / "shift_data_v2.json").read_text(encoding="utf-8") == "{}"

    def test_missing_files(self, tmp_path):
        state = JsonFileStorage(tmp_path / "nowhere").load()
        assert state == StoredState()

    def test_creates_directory(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "a" / "b")
        storage.save(StoredState(roster="[]"))
        assert storage.path_for(ROSTER_RECORD).exists()
        assert not storage.path_for(SCHEDULE_RECORD).exists()

    def test_board_roundtrip(self, tmp_path, today, id_clock):
        board = _board(JsonFileStorage(tmp_path), today, id_clock).load()
        board.toggle("1", 0)
        member = board.add_staff("山田")
        board.save()

        restored = _board(JsonFileStorage(tmp_path), today, id_clock).load()
        assert restored.roster.ids() == ["1", "2", "3", member.id]
        assert restored.month_schedule()["1"][0] == ShiftStatus.OFF
        assert "山田" in (tmp_path / "shift_staff_list.json").read_text(encoding="utf-8")

    def test_corrupt_roster_falls_back_to_seed(self, tmp_path, today, id_clock):
        (tmp_path / "shift_staff_list.json").write_text("{broken", encoding="utf-8")
        (tmp_path / "shift_data_v2.json").write_text(
            json.dumps({"version": 1, "months": {"2026-10": {"1": ["OFF"] * 31}}}),
            encoding="utf-8",
        )
        board = _board(JsonFileStorage(tmp_path), today, id_clock).load()
        assert board.roster.names() == ["田中", "佐藤", "鈴木"]
        assert board.month_schedule()["1"][0] == ShiftStatus.OFF

    def test_corrupt_schedule_keeps_roster(self, tmp_path, today, id_clock):
        (tmp_path / "shift_staff_list.json").write_text(
            json.dumps({"version": 1, "staff": [{"id": "7", "name": "山田"}]}), encoding="utf-8"
        )
        (tmp_path / "shift_data_v2.json").write_text("not json", encoding="utf-8")
        board = _board(JsonFileStorage(tmp_path), today, id_clock).load()
        assert board.roster.ids() == ["7"]
        assert board.schedule.months() == []

    def test_corrupt_file_logs_warning(self, tmp_path, today, id_clock, caplog):
        (tmp_path / "shift_staff_list.json").write_text("{broken", encoding="utf-8")
        with caplog.at_level("WARNING"):
            _board(JsonFileStorage(tmp_path), today, id_clock).load()
        assert "falling back to seed roster" in caplog.text


class TestSqliteStorage:
    def test_creates_table(self, tmp_path):
        db = tmp_path / "board.db"
        SqliteStorage(db)
        with sqlite3.connect(db) as conn:
            tables = [r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")]
        assert "records" in tables

    def test_upsert(self, tmp_path):
        storage = SqliteStorage(tmp_path / "board.db")
        storage.save(StoredState(roster="one", schedule="s1"))
        storage.save(StoredState(roster="two", schedule=None))
        state = storage.load()
        assert state.roster == "two"
        assert state.schedule == "s1"

    def test_empty_load(self, tmp_path):
        assert SqliteStorage(tmp_path / "board.db").load() == StoredState()

    def test_board_roundtrip(self, tmp_path, today, id_clock):
        db = tmp_path / "board.db"
        board = _board(SqliteStorage(db), today, id_clock).load()
        board.toggle("2", 5)
        board.toggle("2", 5)
        board.save()

        restored = _board(SqliteStorage(db), today, id_clock).load()
        assert restored.schedule.get_status(MonthKey(2026, 10), "2", 5) == ShiftStatus.REQUEST


class TestMakeStorage:
    def test_kinds(self, tmp_path):
        assert isinstance(make_storage("json", tmp_path), JsonFileStorage)
        assert isinstance(make_storage("sqlite", tmp_path), SqliteStorage)
        assert isinstance(make_storage("memory", tmp_path), MemoryStorage)

    def test_sqlite_path(self, tmp_path):
        assert make_storage("sqlite", tmp_path).db_path == tmp_path / "shiftboard.db"

    def test_unknown_kind(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown storage"):
            make_storage("redis", tmp_path)
