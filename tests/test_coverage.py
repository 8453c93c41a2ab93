"""Tests for CoverageTracker: per-element coverage counts."""

import pytest

from scqbf.coverage.tracker import CoverageTracker


@pytest.fixture
def tracker(ring_instance):
    return CoverageTracker(ring_instance)


class TestCoverageTracker:
    """Incremental coverage counting."""

    def test_starts_empty(self, tracker):
        assert tracker.covered_count == 0
        assert not tracker.is_complete
        assert tracker.uncovered == {0, 1, 2, 3, 4, 5}

    def test_add_counts_elements(self, tracker):
        tracker.add(0)
        assert tracker.counts.tolist() == [1, 1, 0, 0, 0, 0]
        tracker.add(1)
        assert tracker.counts[1] == 2

    def test_remove_undoes_add(self, tracker):
        tracker.add(0)
        tracker.add(1)
        tracker.remove(0)
        assert tracker.counts.tolist() == [0, 1, 1, 0, 0, 0]

    def test_complete_with_alternate_sets(self, tracker):
        for i in (0, 2, 4):
            tracker.add(i)
        assert tracker.is_complete
        assert tracker.uncovered == set()

    def test_can_drop_requires_double_cover(self, tracker):
        for i in (0, 1, 2, 4):
            tracker.add(i)
        # element 3 is covered only by set 2
        assert not tracker.can_drop(2)
        # elements 1 and 2 are covered twice
        assert tracker.can_drop(1)

    def test_can_drop_with_replacement(self, tracker):
        for i in (0, 2, 4):
            tracker.add(i)
        assert not tracker.can_drop(2)
        # set 3 re-covers element 3 but not element 2
        assert not tracker.can_drop(2, replacement=3)
        # set 1 re-covers element 2 but not element 3
        assert not tracker.can_drop(2, replacement=1)
        tracker.add(1)
        assert tracker.can_drop(2, replacement=3)

    def test_new_coverage(self, tracker):
        tracker.add(0)
        assert tracker.new_coverage(1) == 1
        assert tracker.new_coverage(3) == 2
        assert tracker.new_coverage(0) == 0

    def test_counts_view_is_read_only(self, tracker):
        with pytest.raises(ValueError):
            tracker.counts[0] = 5

    def test_reset(self, tracker):
        tracker.add(3)
        tracker.reset()
        assert tracker.covered_count == 0
