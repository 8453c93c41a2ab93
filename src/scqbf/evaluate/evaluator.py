"""IncrementalEvaluator: cost and move deltas for SC-QBF solutions.

The search minimizes ``cost = -x'Ax``. Derived state for a solution
(selection flags, per-element coverage counts, and the pairwise weight
``w[i] = sum_{j selected, j != i} (A[i, j] + A[j, i])`` for every i) is
rebuilt from the solution's members, after which each insertion,
removal or exchange delta is a constant-time lookup.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from scqbf.coverage.tracker import CoverageTracker
from scqbf.evaluate.solution import Solution
from scqbf.instance.models import Instance


IMPROVEMENT_EPSILON = 1e-9
"""A move improves only if its cost delta is below ``-IMPROVEMENT_EPSILON``."""


def is_improving(delta: float, epsilon: float = IMPROVEMENT_EPSILON) -> bool:
    """Whether a cost delta is a strict improvement beyond float noise."""
    return delta < -epsilon


def objective_from_scratch(instance: Instance, indices: Iterable[int]) -> float:
    """Brute-force objective x'Ax for the given selection."""
    x = np.zeros(instance.n, dtype=float)
    x[list(indices)] = 1.0
    return float(x @ instance.A @ x)


def is_feasible(instance: Instance, indices: Iterable[int]) -> bool:
    """Whether the selection covers every ground element."""
    covered = np.zeros(instance.n, dtype=bool)
    for i in indices:
        covered[list(instance.sets[i])] = True
    return bool(covered.all())


class IncrementalEvaluator:
    """Evaluates SC-QBF solutions and the cost of single moves.

    All cost values follow the minimization convention (negated
    objective). Removals and exchanges that would leave a ground element
    uncovered cost ``math.inf``.

    Derived state is a deterministic function of a solution's members.
    :meth:`evaluate` always rebuilds it; delta queries rebuild it unless
    it was last built from the same solution object at the same
    mutation version.

    Args:
        instance: The problem instance.
    """

    def __init__(self, instance: Instance) -> None:
        self._instance = instance
        n = instance.n
        self._diag = np.diag(instance.A).copy()
        self._selected = np.zeros(n, dtype=bool)
        self._weight = np.zeros(n, dtype=float)
        self._coverage = CoverageTracker(instance)
        self._objective = 0.0
        self._synced: Solution | None = None
        self._synced_version = -1

    @property
    def instance(self) -> Instance:
        """The problem instance."""
        return self._instance

    @property
    def coverage(self) -> CoverageTracker:
        """Coverage counts for the solution last synchronized."""
        return self._coverage

    @property
    def weights(self) -> np.ndarray:
        """Read-only view of the pairwise weights ``w``."""
        view = self._weight.view()
        view.setflags(write=False)
        return view

    @property
    def objective(self) -> float:
        """Objective x'Ax of the solution last synchronized."""
        return self._objective

    def _reset(self) -> None:
        self._selected.fill(False)
        self._weight.fill(0.0)
        self._coverage.reset()
        self._objective = 0.0

    def _apply_add(self, i: int) -> None:
        if self._selected[i]:
            return
        self._objective += self._diag[i] + self._weight[i]
        row = self._instance.symmetric[i]
        self._weight += row
        self._weight[i] -= row[i]
        self._selected[i] = True
        self._coverage.add(i)

    def _rebuild(self, solution: Solution) -> None:
        self._reset()
        for e in solution:
            self._apply_add(e)
        self._synced = solution
        self._synced_version = solution.version

    def _sync(self, solution: Solution) -> None:
        if self._synced is not solution or self._synced_version != solution.version:
            self._rebuild(solution)

    def evaluate(self, solution: Solution) -> float:
        """Rebuild derived state from ``solution`` and return its cost.

        The cost (negated objective) is also written to ``solution.cost``.
        """
        self._rebuild(solution)
        solution.cost = -self._objective
        return solution.cost

    def _gain(self, i: int) -> float:
        return float(self._diag[i] + self._weight[i])

    def insertion_cost(self, elem: int, solution: Solution) -> float:
        """Cost change of selecting ``elem``; 0 if already selected."""
        self._sync(solution)
        if self._selected[elem]:
            return 0.0
        return -self._gain(elem)

    def removal_cost(self, elem: int, solution: Solution) -> float:
        """Cost change of deselecting ``elem``.

        Returns 0 if ``elem`` is not selected and ``math.inf`` if some
        ground element would lose its only cover.
        """
        self._sync(solution)
        if not self._selected[elem]:
            return 0.0
        if not self._coverage.can_drop(elem):
            return math.inf
        return self._gain(elem)

    def exchange_cost(self, elem_in: int, elem_out: int, solution: Solution) -> float:
        """Cost change of selecting ``elem_in`` while deselecting ``elem_out``.

        Degenerates to a pure removal of ``elem_out`` when ``elem_in`` is
        already selected, and to a pure insertion of ``elem_in`` when
        ``elem_out`` is not selected.

        Coverage lost by dropping ``elem_out`` counts as restored when
        ``elem_in`` covers the same elements, so a swap can be feasible
        even where the plain removal of ``elem_out`` is not.
        """
        if elem_in == elem_out:
            return 0.0
        self._sync(solution)
        if self._selected[elem_in]:
            return self.removal_cost(elem_out, solution)
        if not self._selected[elem_out]:
            return self.insertion_cost(elem_in, solution)
        if not self._coverage.can_drop(elem_out, replacement=elem_in):
            return math.inf
        # w[elem_in] counts elem_out, which leaves in the same move.
        delta = (
            self._gain(elem_in)
            - self._gain(elem_out)
            - self._instance.sym(elem_in, elem_out)
        )
        return -delta
