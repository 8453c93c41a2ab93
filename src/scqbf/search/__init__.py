"""GRASP search: construction, local search, reactive alpha, driver."""

from __future__ import annotations

from pathlib import Path

from scqbf.instance.models import Instance
from scqbf.search.candidates import CandidateList
from scqbf.search.config import (
    DEFAULT_REACTIVE_ALPHAS,
    ConstructionMode,
    LocalSearchType,
    SolverConfig,
)
from scqbf.search.grasp import GRASPSolver, InfeasibleInstanceError
from scqbf.search.local_search import LocalSearch, LocalSearchResult
from scqbf.search.reactive import ReactiveAlphaController
from scqbf.search.result import SolveResult


def solve(
    instance: Instance | str | Path,
    config: SolverConfig | None = None,
    **config_kwargs,
) -> SolveResult:
    """Solve an SC-QBF instance with GRASP.

    This is the primary user-facing API. It loads the instance if given
    a path, builds the configuration and runs :class:`GRASPSolver`.

    Args:
        instance: An :class:`Instance` or a path to an instance file.
        config: A ready-made configuration. Mutually exclusive with
            ``config_kwargs``.
        **config_kwargs: Fields of :class:`SolverConfig` (e.g. alpha,
            construction, local_search, time_limit, max_iterations,
            seed).

    Returns:
        SolveResult with the best solution and run statistics.

    Raises:
        ValueError: If the configuration is invalid, both ``config`` and
            keyword fields are given, or the instance cannot be covered.
        InstanceFormatError: If an instance file is malformed.
    """
    if config is not None and config_kwargs:
        raise ValueError("Pass either config or configuration keywords, not both")

    if not isinstance(instance, Instance):
        from scqbf.instance.reader import read_instance

        instance = read_instance(instance)

    if config is None:
        config = SolverConfig(**config_kwargs)

    solver = GRASPSolver(instance, config)
    solver.solve()
    return solver.result()


__all__ = [
    "CandidateList",
    "ConstructionMode",
    "DEFAULT_REACTIVE_ALPHAS",
    "GRASPSolver",
    "InfeasibleInstanceError",
    "LocalSearch",
    "LocalSearchResult",
    "LocalSearchType",
    "ReactiveAlphaController",
    "SolveResult",
    "SolverConfig",
    "solve",
]
