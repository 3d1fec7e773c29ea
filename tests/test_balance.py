"""Tests for balance.py — per-group home/away counters."""

import pytest

from fixturecsp.balance import GroupBalanceTracker
from fixturecsp.models import Competitor

A = Competitor("A", "X", 1)
B = Competitor("B", "Y", 2)
C = Competitor("C", "Z", 4)


def _tracker(*competitors, groups=(1, 2, 3, 4)):
    tracker = GroupBalanceTracker()
    tracker.initialize(list(competitors), groups)
    return tracker


class TestInitialize:
    def test_zeroed_for_every_group(self):
        tracker = _tracker(A, B)
        assert tracker.table(A) == {1: (0, 0), 2: (0, 0), 3: (0, 0), 4: (0, 0)}
        assert tracker.totals(B) == (0, 0)

    def test_configured_range(self):
        tracker = _tracker(A, B, groups=range(1, 3))
        assert tracker.groups == [1, 2]
        assert set(tracker.table(A)) == {1, 2}

    def test_group_outside_range_rejected(self):
        with pytest.raises(ValueError, match="group 4"):
            _tracker(A, C, groups=(1, 2, 3))


class TestRecord:
    def test_home_and_away_sides(self):
        tracker = _tracker(A, B, C)
        tracker.record(A, B)
        # A hosted a group-2 competitor; B visited a group-1 competitor
        assert tracker.counts(A, 2) == (1, 0)
        assert tracker.counts(B, 1) == (0, 1)
        assert tracker.totals(C) == (0, 0)

    def test_two_leg_pairing(self):
        tracker = _tracker(A, B)
        tracker.record(A, B)
        tracker.record(B, A)
        assert tracker.counts(A, 2) == (1, 1)
        assert tracker.counts(B, 1) == (1, 1)
        assert tracker.home_count(A, 2) == 1
        assert tracker.away_count(A, 2) == 1
        assert tracker.counts(A, 1) == (0, 0)

    def test_accumulates_per_group(self):
        tracker = _tracker(A, B, C)
        tracker.record(A, B)
        tracker.record(A, C)
        tracker.record(C, A)
        assert tracker.counts(A, 2) == (1, 0)
        assert tracker.counts(A, 4) == (1, 1)
        assert tracker.totals(A) == (2, 1)
        assert tracker.counts(C, 1) == (1, 1)

    def test_same_group_opponents(self):
        a2 = Competitor("A2", "W", 1)
        tracker = _tracker(A, a2)
        tracker.record(A, a2)
        assert tracker.counts(A, 1) == (1, 0)
        assert tracker.counts(a2, 1) == (0, 1)
