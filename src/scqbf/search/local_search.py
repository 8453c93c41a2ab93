"""LocalSearch: insertion/removal/exchange descent for SC-QBF solutions."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable

from scqbf.evaluate.evaluator import IMPROVEMENT_EPSILON, IncrementalEvaluator
from scqbf.evaluate.solution import Solution
from scqbf.search.candidates import CandidateList
from scqbf.search.config import LocalSearchType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalSearchResult:
    """Outcome of one local search run.

    Attributes:
        solution: The improved solution (same object that was passed in).
        moves: Number of moves applied.
        rounds: Number of rounds started.
        stop_reason: ``"local_optimum"`` or ``"time_limit"``.
    """

    solution: Solution
    moves: int
    rounds: int
    stop_reason: str


class LocalSearch:
    """Improves a feasible solution until no move beats the threshold.

    Each round refreshes the candidate list, then looks for a move:

    - first-improving: shuffled insertions, then shuffled removals, then
      shuffled exchanges; the first improving move is applied.
    - best-improving: every insertion, removal and exchange is scored
      and the single most improving one is applied.

    A round that applies no move ends the search. The time budget is
    checked at the top of every round, so a round always completes.

    Args:
        evaluator: Incremental evaluator bound to the instance.
        candidates: Candidate list manager.
        strategy: First- or best-improving acceptance.
        rng: Random source for shuffling.
        time_limit: Seconds allowed from the start of :meth:`run`;
            None means no limit.
        epsilon: A move must lower the cost by more than this.
        clock: Monotonic time source in seconds.
        on_move: Optional callback invoked after each applied move.
    """

    def __init__(
        self,
        evaluator: IncrementalEvaluator,
        candidates: CandidateList,
        strategy: LocalSearchType,
        rng: random.Random,
        time_limit: float | None = None,
        epsilon: float = IMPROVEMENT_EPSILON,
        clock: Callable[[], float] = time.perf_counter,
        on_move: Callable[[dict], None] | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._candidates = candidates
        self._strategy = strategy
        self._rng = rng
        self._time_limit = time_limit
        self._epsilon = epsilon
        self._clock = clock
        self._on_move = on_move

    @property
    def strategy(self) -> LocalSearchType:
        """Acceptance strategy."""
        return self._strategy

    def run(self, solution: Solution) -> LocalSearchResult:
        """Improve ``solution`` in place.

        Returns:
            LocalSearchResult describing the run.
        """
        start = self._clock()
        self._evaluator.evaluate(solution)
        moves = 0
        rounds = 0
        stop_reason = "local_optimum"

        while True:
            if (
                self._time_limit is not None
                and self._clock() - start > self._time_limit
            ):
                stop_reason = "time_limit"
                break

            rounds += 1
            self._candidates.refresh(solution)
            if self._strategy is LocalSearchType.FIRST_IMPROVING:
                move = self._first_improving(solution)
            else:
                move = self._best_improving(solution)

            if move is None:
                break
            self._apply(solution, *move)
            moves += 1

        return LocalSearchResult(
            solution=solution,
            moves=moves,
            rounds=rounds,
            stop_reason=stop_reason,
        )

    def _first_improving(
        self, solution: Solution
    ) -> tuple[int | None, int | None, float] | None:
        evaluator = self._evaluator
        eps = self._epsilon

        cl = self._candidates.items
        self._rng.shuffle(cl)
        for cand_in in cl:
            delta = evaluator.insertion_cost(cand_in, solution)
            if delta < -eps:
                return cand_in, None, delta

        inside = solution.elements
        self._rng.shuffle(inside)
        for cand_out in inside:
            delta = evaluator.removal_cost(cand_out, solution)
            if delta < -eps:
                return None, cand_out, delta

        self._rng.shuffle(inside)
        self._rng.shuffle(cl)
        for cand_in in cl:
            for cand_out in inside:
                delta = evaluator.exchange_cost(cand_in, cand_out, solution)
                if delta < -eps:
                    return cand_in, cand_out, delta
        return None

    def _best_improving(
        self, solution: Solution
    ) -> tuple[int | None, int | None, float] | None:
        evaluator = self._evaluator
        best_delta = -self._epsilon
        best: tuple[int | None, int | None, float] | None = None

        cl = self._candidates.items
        inside = solution.elements
        for cand_in in cl:
            delta = evaluator.insertion_cost(cand_in, solution)
            if delta < best_delta:
                best_delta = delta
                best = (cand_in, None, delta)
        for cand_out in inside:
            delta = evaluator.removal_cost(cand_out, solution)
            if delta < best_delta:
                best_delta = delta
                best = (None, cand_out, delta)
        for cand_in in cl:
            for cand_out in inside:
                delta = evaluator.exchange_cost(cand_in, cand_out, solution)
                if delta < best_delta:
                    best_delta = delta
                    best = (cand_in, cand_out, delta)
        return best

    def _apply(
        self,
        solution: Solution,
        cand_in: int | None,
        cand_out: int | None,
        delta: float,
    ) -> None:
        if cand_out is not None:
            solution.remove(cand_out)
            self._candidates.add(cand_out)
        if cand_in is not None:
            solution.add(cand_in)
            self._candidates.remove(cand_in)
        self._evaluator.evaluate(solution)

        if cand_in is not None and cand_out is not None:
            kind = "exchange"
        elif cand_in is not None:
            kind = "insert"
        else:
            kind = "remove"
        logger.debug(
            "%s in=%s out=%s delta=%.6g cost=%.6g",
            kind, cand_in, cand_out, delta, solution.cost,
        )
        if self._on_move is not None:
            self._on_move({
                "kind": kind,
                "in": cand_in,
                "out": cand_out,
                "delta": delta,
                "cost": solution.cost,
            })
