"""Pytest configuration and fixtures."""
import itertools
import logging
import sys
from datetime import date
from pathlib import Path

# Add src and project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from shiftboard.board import ShiftBoard
from shiftboard.models.config import BoardConfig
from shiftboard.models.month import MonthKey
from shiftboard.roster import Roster
from shiftboard.store.schedule_store import ScheduleStore

TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("shiftboard")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def today():
    """Fixed 'real' date used as the navigation clock."""
    return TODAY


@pytest.fixture
def id_clock():
    """Millisecond clock that advances by one per call."""
    counter = itertools.count(1_700_000_000_000)
    return lambda: next(counter)


@pytest.fixture
def october():
    return MonthKey(2026, 10)


@pytest.fixture
def roster(id_clock):
    """Seed roster: 1 田中, 2 佐藤, 3 鈴木."""
    return Roster.seeded(clock=id_clock)


@pytest.fixture
def store():
    return ScheduleStore()


@pytest.fixture
def board(today, id_clock):
    """In-memory board pinned to October 2026."""
    return ShiftBoard.in_memory(
        BoardConfig(log_file=None),
        clock=lambda: today,
        id_clock=id_clock,
    )
