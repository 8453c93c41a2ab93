"""Tests for Solution: a selection of indices with a cached cost."""

import pytest

from scqbf.evaluate.solution import Solution


class TestSolution:
    """Membership, ordering and versioning."""

    def test_empty(self):
        sol = Solution()
        assert len(sol) == 0
        assert sol.cost == 0.0
        assert sol.objective == 0.0

    def test_add_and_contains(self):
        sol = Solution()
        sol.add(3)
        sol.add(1)
        assert 3 in sol
        assert 2 not in sol
        assert sol.elements == [3, 1]

    def test_duplicate_add_raises(self):
        sol = Solution([1])
        with pytest.raises(ValueError, match="already selected"):
            sol.add(1)

    def test_remove_missing_raises(self):
        sol = Solution([1])
        with pytest.raises(ValueError, match="not selected"):
            sol.remove(2)

    def test_version_bumps_on_mutation(self):
        sol = Solution()
        v0 = sol.version
        sol.add(0)
        sol.remove(0)
        assert sol.version == v0 + 2

    def test_copy_is_independent(self):
        sol = Solution([0, 2], cost=-4.0)
        dup = sol.copy()
        dup.add(1)
        assert 1 not in sol
        assert dup.cost == -4.0

    def test_objective_is_negated_cost(self):
        sol = Solution(cost=-7.5)
        assert sol.objective == 7.5

    def test_iteration_tolerates_mutation(self):
        sol = Solution([0, 1, 2])
        for e in sol:
            sol.remove(e)
        assert len(sol) == 0
