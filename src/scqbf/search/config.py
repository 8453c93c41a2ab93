"""Solver configuration: strategy variants and validated knobs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scqbf.evaluate.evaluator import IMPROVEMENT_EPSILON


class ConstructionMode(Enum):
    """How the candidate list and the construction alpha are chosen."""

    STANDARD = "standard"
    SAMPLED = "sampled"
    REACTIVE = "reactive"


class LocalSearchType(Enum):
    """Neighborhood acceptance strategy."""

    FIRST_IMPROVING = "first-improving"
    BEST_IMPROVING = "best-improving"


DEFAULT_REACTIVE_ALPHAS: tuple[float, ...] = (0.1, 0.2, 0.3, 0.4, 0.5)


@dataclass
class SolverConfig:
    """Configuration for one GRASP solve.

    The search stops at whichever of ``max_iterations`` and
    ``time_limit`` is reached first.

    Attributes:
        alpha: Randomization parameter in [0, 1] (0 = pure greedy).
            Ignored in reactive mode.
        construction: Construction mode (enum or its string value).
        local_search: Local search strategy (enum or its string value).
        sample_size: Candidate sample size, sampled mode only.
        reactive_alphas: Candidate alpha values, reactive mode only.
        block_size: Construction cycles between probability updates,
            reactive mode only.
        max_iterations: Maximum construct/improve cycles; None = no cap.
        time_limit: Wall-clock budget in seconds; None = no budget.
        seed: Seed for the run's random generator.
        epsilon: Improvement threshold for local search moves.
    """

    alpha: float = 0.2
    construction: ConstructionMode | str = ConstructionMode.STANDARD
    local_search: LocalSearchType | str = LocalSearchType.FIRST_IMPROVING
    sample_size: int = 64
    reactive_alphas: tuple[float, ...] = DEFAULT_REACTIVE_ALPHAS
    block_size: int = 20
    max_iterations: int | None = None
    time_limit: float | None = 60.0
    seed: int | None = None
    epsilon: float = IMPROVEMENT_EPSILON

    def __post_init__(self) -> None:
        self.construction = _coerce(ConstructionMode, self.construction, "construction")
        self.local_search = _coerce(LocalSearchType, self.local_search, "local_search")
        self.reactive_alphas = tuple(float(a) for a in self.reactive_alphas)

        if not (0.0 <= self.alpha <= 1.0):
            raise ValueError(f"alpha must be in [0.0, 1.0], got {self.alpha}")
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be >= 1, got {self.sample_size}")
        if not self.reactive_alphas:
            raise ValueError("reactive_alphas must not be empty")
        for a in self.reactive_alphas:
            if not (0.0 <= a <= 1.0):
                raise ValueError(f"reactive_alphas must be in [0.0, 1.0], got {a}")
        if self.block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {self.block_size}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be > 0, got {self.time_limit}")
        if self.max_iterations is None and self.time_limit is None:
            raise ValueError("At least one of max_iterations or time_limit must be set")
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon}")


def _coerce(enum_cls, value, name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = [m.value for m in enum_cls]
        raise ValueError(
            f"Invalid {name}: {value!r}. Must be one of {valid}"
        ) from None
