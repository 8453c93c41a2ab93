"""GRASPSolver: repeated randomized construction plus local search."""

from __future__ import annotations

import logging
import math
import random
import time
from typing import Callable

from scqbf.evaluate.evaluator import IncrementalEvaluator, is_feasible
from scqbf.evaluate.solution import Solution
from scqbf.instance.models import Instance
from scqbf.search.candidates import CandidateList
from scqbf.search.config import ConstructionMode, SolverConfig
from scqbf.search.local_search import LocalSearch
from scqbf.search.reactive import ReactiveAlphaController
from scqbf.search.result import SolveResult

logger = logging.getLogger(__name__)


class InfeasibleInstanceError(ValueError):
    """Raised when some ground element is covered by no set."""


class GRASPSolver:
    """Greedy Randomized Adaptive Search for SC-QBF.

    Each cycle builds a feasible solution with a randomized greedy
    construction, improves it with :class:`LocalSearch`, and keeps a
    copy if it beats the best cost so far. In reactive mode the alpha of
    each cycle is drawn from a :class:`ReactiveAlphaController` that is
    fed every cycle's objective.

    The solve stops when the time budget is spent or the iteration cap
    is reached, checked before each cycle.

    Args:
        instance: The problem instance.
        config: Solver configuration. Defaults to ``SolverConfig()``.
        rng: Random source; defaults to ``random.Random(config.seed)``.
        clock: Monotonic time source in seconds.
        on_progress: Optional callback invoked after every cycle.

    Raises:
        InfeasibleInstanceError: If the instance cannot be covered.
    """

    def __init__(
        self,
        instance: Instance,
        config: SolverConfig | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.perf_counter,
        on_progress: Callable[[dict], None] | None = None,
    ) -> None:
        if not instance.is_coverable:
            missing = sorted(instance.uncoverable)
            raise InfeasibleInstanceError(
                f"Elements {missing} are covered by no set; no feasible solution exists"
            )
        self._instance = instance
        self._config = config or SolverConfig()
        self._rng = rng if rng is not None else random.Random(self._config.seed)
        self._clock = clock
        self._on_progress = on_progress

        self._evaluator = IncrementalEvaluator(instance)
        self._candidates = CandidateList(
            instance.n,
            self._config.construction,
            self._rng,
            sample_size=self._config.sample_size,
        )
        self._local_search = LocalSearch(
            self._evaluator,
            self._candidates,
            self._config.local_search,
            self._rng,
            time_limit=self._config.time_limit,
            epsilon=self._config.epsilon,
            clock=clock,
        )
        self._controller: ReactiveAlphaController | None = None
        if self._config.construction is ConstructionMode.REACTIVE:
            self._controller = ReactiveAlphaController(
                self._config.reactive_alphas,
                self._rng,
                block_size=self._config.block_size,
            )

        self._status = "idle"
        self._best_solution = Solution(cost=math.inf)
        self._iterations_run = 0
        self._best_iteration = -1
        self._best_time = 0.0
        self._elapsed = 0.0
        self._stop_reason: str | None = None
        self._alpha_history: list[float] = []

    # --- Properties ---

    @property
    def instance(self) -> Instance:
        """The problem instance."""
        return self._instance

    @property
    def config(self) -> SolverConfig:
        """The solver configuration."""
        return self._config

    @property
    def evaluator(self) -> IncrementalEvaluator:
        """The incremental evaluator."""
        return self._evaluator

    @property
    def controller(self) -> ReactiveAlphaController | None:
        """Adaptive alpha controller (reactive mode only)."""
        return self._controller

    @property
    def status(self) -> str:
        """``"idle"``, ``"running"`` or ``"done"``."""
        return self._status

    @property
    def best_solution(self) -> Solution:
        """Best solution found (empty with infinite cost before solving)."""
        return self._best_solution

    @property
    def iterations_run(self) -> int:
        """Construct/improve cycles completed."""
        return self._iterations_run

    @property
    def best_iteration(self) -> int:
        """1-based cycle of the best solution, -1 if none yet."""
        return self._best_iteration

    @property
    def best_time(self) -> float:
        """Seconds from solve start until the best solution was found."""
        return self._best_time

    @property
    def elapsed(self) -> float:
        """Seconds spent in the last :meth:`solve`."""
        return self._elapsed

    @property
    def stop_reason(self) -> str | None:
        """Why the last solve stopped."""
        return self._stop_reason

    @property
    def alpha_history(self) -> list[float]:
        """Alpha used in each cycle (a copy)."""
        return list(self._alpha_history)

    # --- Construction ---

    def construct(self, alpha: float) -> Solution:
        """Build a feasible solution by randomized greedy insertion.

        While some ground element is uncovered, only candidates that
        cover an uncovered element are eligible; afterwards only
        improving candidates are. Each step keeps the eligible
        candidates whose insertion cost is within
        ``c_min + alpha * (c_max - c_min)`` and inserts one of them
        uniformly at random. Construction ends when no improving
        candidate remains once everything is covered.
        """
        evaluator = self._evaluator
        coverage = evaluator.coverage
        eps = self._config.epsilon

        solution = Solution()
        evaluator.evaluate(solution)
        self._candidates.reset()

        while True:
            candidates = self._candidates.refresh(solution)
            if not coverage.is_complete:
                pool = [c for c in candidates if coverage.new_coverage(c) > 0]
                if not pool:
                    pool = [
                        c for c in range(self._instance.n)
                        if c not in solution and coverage.new_coverage(c) > 0
                    ]
                costs = [evaluator.insertion_cost(c, solution) for c in pool]
            else:
                pool, costs = [], []
                for c in candidates:
                    delta = evaluator.insertion_cost(c, solution)
                    if delta < -eps:
                        pool.append(c)
                        costs.append(delta)
                if not pool:
                    break

            c_min = min(costs)
            c_max = max(costs)
            threshold = c_min + alpha * (c_max - c_min)
            rcl = [c for c, cost in zip(pool, costs) if cost <= threshold]
            chosen = rcl[self._rng.randrange(len(rcl))]

            solution.add(chosen)
            self._candidates.remove(chosen)
            evaluator.evaluate(solution)

        return solution

    # --- Main loop ---

    def _check_stop(self, start: float) -> str | None:
        if (
            self._config.max_iterations is not None
            and self._iterations_run >= self._config.max_iterations
        ):
            return "max_iterations"
        if (
            self._config.time_limit is not None
            and self._clock() - start > self._config.time_limit
        ):
            return "time_limit"
        return None

    def solve(self) -> Solution:
        """Run GRASP cycles until a stopping condition is met.

        Returns:
            The best solution found (a copy owned by the solver).
        """
        start = self._clock()
        self._status = "running"
        self._best_solution = Solution(cost=math.inf)
        self._iterations_run = 0
        self._best_iteration = -1
        self._best_time = 0.0
        self._alpha_history = []
        if self._controller is not None:
            self._controller.reset()

        logger.info(
            "Solving %s: mode=%s, ls=%s, n=%d",
            self._instance.name,
            self._config.construction.value,
            self._config.local_search.value,
            self._instance.n,
        )

        while True:
            stop = self._check_stop(start)
            if stop is not None:
                self._stop_reason = stop
                break

            alpha_index = None
            if self._controller is not None:
                alpha_index = self._controller.sample()
                alpha = self._controller.alphas[alpha_index]
            else:
                alpha = self._config.alpha
            self._alpha_history.append(alpha)

            solution = self.construct(alpha)
            self._local_search.run(solution)
            self._iterations_run += 1

            improved = solution.cost < self._best_solution.cost
            if improved:
                self._best_solution = solution.copy()
                self._best_iteration = self._iterations_run
                self._best_time = self._clock() - start
                logger.info(
                    "Iteration %d: new best f=%.6f (alpha=%.2f, t=%.3fs)",
                    self._iterations_run,
                    solution.objective,
                    alpha,
                    self._best_time,
                )

            if self._controller is not None:
                if improved:
                    self._controller.observe_best(solution.objective)
                self._controller.step(alpha_index, solution.objective)

            if self._on_progress is not None:
                self._on_progress({
                    "iteration": self._iterations_run,
                    "alpha": alpha,
                    "cost": solution.cost,
                    "objective": solution.objective,
                    "best_objective": self._best_solution.objective,
                    "improved": improved,
                })

        self._elapsed = self._clock() - start
        self._status = "done"
        logger.info(
            "Stopped: %s after %d iterations (best f=%.6f at iteration %d)",
            self._stop_reason,
            self._iterations_run,
            self._best_solution.objective,
            self._best_iteration,
        )
        return self._best_solution

    def result(self) -> SolveResult:
        """Summarize the last :meth:`solve` as a :class:`SolveResult`."""
        best = self._best_solution
        metadata = {
            "instance": self._instance.name,
            "n": self._instance.n,
            "alpha": self._config.alpha,
            "seed": self._config.seed,
        }
        if self._config.construction is ConstructionMode.SAMPLED:
            metadata["sample_size"] = self._config.sample_size
        if self._controller is not None:
            metadata["reactive_alphas"] = list(self._controller.alphas)
            metadata["reactive_probabilities"] = self._controller.probabilities.tolist()
            metadata["block_size"] = self._config.block_size
        return SolveResult(
            selected_indices=sorted(best),
            objective=best.objective,
            cost=best.cost,
            feasible=is_feasible(self._instance, best),
            construction=self._config.construction.value,
            local_search=self._config.local_search.value,
            elapsed_seconds=self._elapsed,
            time_to_best=self._best_time,
            iterations=self._iterations_run,
            best_iteration=self._best_iteration,
            stop_reason=self._stop_reason or "",
            metadata=metadata,
        )
