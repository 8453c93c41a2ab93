"""SolveResult: immutable output of a GRASP solve."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SolveResult:
    """Immutable result of a GRASP run.

    Attributes:
        selected_indices: Indices of the best solution, sorted.
        objective: Best objective x'Ax (maximized).
        cost: Internal minimization cost, ``-objective``.
        feasible: Whether the best solution covers every element.
        construction: Construction mode value.
        local_search: Local search strategy value.
        elapsed_seconds: Wall-clock time of the whole solve.
        time_to_best: Seconds from start until the best was found.
        iterations: Construct/improve cycles actually run.
        best_iteration: 1-based cycle in which the best was found.
        stop_reason: ``"time_limit"`` or ``"max_iterations"``.
        metadata: Run extras (alpha, seed, sample size, reactive
            probabilities, instance name).
    """

    selected_indices: list[int]
    objective: float
    cost: float
    feasible: bool
    construction: str
    local_search: str
    elapsed_seconds: float
    time_to_best: float
    iterations: int
    best_iteration: int
    stop_reason: str
    metadata: dict = field(default_factory=dict)

    @property
    def num_selected(self) -> int:
        """Number of indices in the best solution."""
        return len(self.selected_indices)
