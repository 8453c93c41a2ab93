"""Solutions and incremental objective evaluation."""

from scqbf.evaluate.evaluator import (
    IMPROVEMENT_EPSILON,
    IncrementalEvaluator,
    is_feasible,
    is_improving,
    objective_from_scratch,
)
from scqbf.evaluate.solution import Solution

__all__ = [
    "IMPROVEMENT_EPSILON",
    "IncrementalEvaluator",
    "Solution",
    "is_feasible",
    "is_improving",
    "objective_from_scratch",
]
