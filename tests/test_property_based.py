"""
Property-Based Tests with Hypothesis
====================================
Invariants that must hold for arbitrary valid inputs.
"""
import json
from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from shiftboard.analytics.coverage import compute_coverage
from shiftboard.exceptions import InvalidCellError, NavigationLimitError
from shiftboard.models.month import MonthKey
from shiftboard.models.staff import StaffMember
from shiftboard.models.status import ShiftStatus, next_status
from shiftboard.navigation import MonthWindow
from shiftboard.roster import Roster
from shiftboard.store.schedule_store import ScheduleStore

statuses = st.sampled_from(list(ShiftStatus))
months = st.builds(MonthKey, st.integers(min_value=1900, max_value=2200), st.integers(min_value=1, max_value=12))


def _roster(n):
    return [StaffMember(str(i), f"s{i}") for i in range(n)]


class TestStatusProperties:
    @given(status=statuses)
    def test_cycle_has_period_three(self, status):
        assert next_status(next_status(next_status(status))) == status

    @given(status=statuses)
    def test_next_is_different(self, status):
        assert next_status(status) != status


class TestMonthProperties:
    @given(month=months)
    def test_days_in_month_range(self, month):
        assert 28 <= month.days_in_month <= 31

    @given(month=months, a=st.integers(-500, 500), b=st.integers(-500, 500))
    def test_shift_composes(self, month, a, b):
        assert month.shift(a).shift(b) == month.shift(a + b)

    @given(month=months)
    def test_text_roundtrip(self, month):
        assert MonthKey.parse(str(month)) == month


class TestStoreProperties:
    @given(month=months, n=st.integers(min_value=0, max_value=6))
    def test_materialized_lengths(self, month, n):
        store = ScheduleStore()
        schedule = store.get_month(month, _roster(n))
        assert len(schedule) == n
        assert all(len(seq) == month.days_in_month for seq in schedule.values())

    @given(
        month=months,
        staff=st.integers(min_value=0, max_value=2),
        day=st.integers(min_value=0, max_value=27),
        status=statuses,
    )
    def test_set_status_changes_one_cell(self, month, staff, day, status):
        store = ScheduleStore()
        before = dict(store.get_month(month, _roster(3)))
        store.set_status(month, str(staff), day, status)
        after = store.get_month(month, _roster(3))
        for sid, seq in before.items():
            for d, old in enumerate(seq):
                expected = status if (sid, d) == (str(staff), day) else old
                assert after[sid][d] == expected

    @given(month=months, day=st.one_of(st.integers(max_value=-1), st.integers(min_value=31)))
    def test_out_of_range_always_rejected(self, month, day):
        store = ScheduleStore()
        store.get_month(month, _roster(1))
        with pytest.raises(InvalidCellError):
            store.set_status(month, "0", day, ShiftStatus.OFF)

    @settings(max_examples=50)
    @given(
        edits=st.lists(
            st.tuples(st.integers(0, 2), st.integers(0, 27), statuses),
            max_size=20,
        )
    )
    def test_serialization_roundtrip(self, edits):
        month = MonthKey(2026, 2)
        store = ScheduleStore()
        store.get_month(month, _roster(3))
        for staff, day, status in edits:
            store.set_status(month, str(staff), day, status)
        assert ScheduleStore.deserialize(store.serialize()) == store


class TestCoverageProperties:
    @given(
        days=st.integers(min_value=28, max_value=31),
        grid=st.lists(st.lists(statuses, min_size=31, max_size=31), max_size=6),
        minimum=st.integers(min_value=0, max_value=8),
    )
    def test_counts_consistent(self, days, grid, minimum):
        roster = _roster(len(grid))
        schedule = {str(i): tuple(row[:days]) for i, row in enumerate(grid)}
        stats = compute_coverage(schedule, roster, days, minimum)

        assert len(stats.daily_count) == days
        assert sum(stats.daily_count) == sum(stats.staff_total.values())
        assert all(0 <= c <= len(roster) for c in stats.daily_count)
        for d in range(days):
            assert stats.is_understaffed(d) == (stats.daily_count[d] < minimum)
        for m in roster:
            assert 0.0 <= stats.percentage(m.id) <= 100.0


class TestRosterProperties:
    @given(names=st.lists(st.text(max_size=10), max_size=10))
    def test_ids_unique(self, names):
        roster = Roster.seeded(clock=lambda: 1)
        for name in names:
            roster.add_staff(name)
        assert len(set(roster.ids())) == len(roster)

    @given(names=st.lists(st.text(min_size=1, max_size=10).filter(lambda s: s.strip()), max_size=8))
    def test_serialization_roundtrip(self, names):
        roster = Roster([StaffMember(str(i), n) for i, n in enumerate(names, start=1)])
        restored = Roster.deserialize(roster.serialize())
        assert restored.ids() == roster.ids()
        assert restored.names() == roster.names()
        assert json.loads(roster.serialize())["version"] == 1


class TestNavigationProperties:
    @given(offset=st.integers(min_value=-120, max_value=120), limit=st.integers(min_value=0, max_value=24))
    def test_never_past_limit(self, offset, limit):
        today = date(2026, 10, 19)
        window = MonthWindow(forward_month_limit=limit, clock=lambda: today)
        start = window.current
        try:
            window.shift(offset)
        except NavigationLimitError:
            assert window.current == start
            assert offset > limit
        else:
            assert window.current <= MonthKey(2026, 10).shift(limit)
            assert window.current == start.shift(offset)
