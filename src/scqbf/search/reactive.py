"""ReactiveAlphaController: online tuning of the construction alpha."""

from __future__ import annotations

import logging
import random
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

SCORE_FLOOR = 1e-9
"""Score given to alphas with no positive average, so none becomes unreachable."""


class ReactiveAlphaController:
    """Roulette-wheel selection over a fixed set of alpha values.

    Probabilities start uniform. Every ``block_size`` recorded outcomes
    they are recomputed from ``score_i = best / avg_i`` (or
    :data:`SCORE_FLOOR` when ``avg_i`` is not positive), normalized to
    sum to one.

    Args:
        alphas: Candidate alpha values.
        rng: Random source for roulette draws.
        block_size: Outcomes between probability updates.
    """

    def __init__(
        self,
        alphas: Sequence[float],
        rng: random.Random,
        block_size: int = 20,
    ) -> None:
        if not alphas:
            raise ValueError("alphas must not be empty")
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self._alphas = tuple(float(a) for a in alphas)
        self._rng = rng
        self._block_size = block_size
        self.reset()

    def reset(self) -> None:
        """Return to uniform probabilities and forget all outcomes."""
        m = len(self._alphas)
        self._probs = np.full(m, 1.0 / m)
        self._averages = np.zeros(m)
        self._counts = np.zeros(m, dtype=np.int64)
        self._best = -np.inf
        self._since_update = 0

    @property
    def alphas(self) -> tuple[float, ...]:
        """Candidate alpha values."""
        return self._alphas

    @property
    def probabilities(self) -> np.ndarray:
        """Current selection probabilities (a copy)."""
        return self._probs.copy()

    @property
    def averages(self) -> np.ndarray:
        """Running average objective per alpha (a copy)."""
        return self._averages.copy()

    @property
    def counts(self) -> np.ndarray:
        """Number of recorded outcomes per alpha (a copy)."""
        return self._counts.copy()

    @property
    def best_objective(self) -> float:
        """Best objective observed so far (``-inf`` before any)."""
        return float(self._best)

    def sample(self) -> int:
        """Draw an alpha index by roulette wheel."""
        u = self._rng.random()
        acc = 0.0
        for i, p in enumerate(self._probs):
            acc += p
            if u <= acc:
                return i
        return len(self._probs) - 1

    def observe_best(self, objective: float) -> None:
        """Raise the global best objective if ``objective`` exceeds it."""
        if objective > self._best:
            self._best = objective

    def record_outcome(self, index: int, objective: float) -> None:
        """Fold an achieved objective into the running average of ``index``."""
        self._counts[index] += 1
        self._averages[index] += (objective - self._averages[index]) / self._counts[index]

    def recompute_probabilities(self) -> None:
        """Rescore every alpha and renormalize the probabilities."""
        scores = np.full(len(self._alphas), SCORE_FLOOR)
        positive = (self._counts > 0) & (self._averages > 0)
        if np.isfinite(self._best):
            scores[positive] = self._best / self._averages[positive]
        # A non-positive best would give non-positive scores.
        scores = np.where(scores > 0, scores, SCORE_FLOOR)
        self._probs = scores / scores.sum()
        logger.info(
            "Reactive probabilities: %s",
            ", ".join(f"{a:.2f}={p:.3f}" for a, p in zip(self._alphas, self._probs)),
        )

    def step(self, index: int, objective: float) -> bool:
        """Record an outcome and recompute at the end of each block.

        Returns:
            True if probabilities were recomputed.
        """
        self.record_outcome(index, objective)
        self._since_update += 1
        if self._since_update >= self._block_size:
            self.recompute_probabilities()
            self._since_update = 0
            return True
        return False
