"""Tests for SolverConfig validation and the solve() entry point."""

import pytest

from scqbf.search import solve
from scqbf.search.config import ConstructionMode, LocalSearchType, SolverConfig


class TestSolverConfig:
    """Field validation and enum coercion."""

    def test_defaults(self):
        cfg = SolverConfig()
        assert cfg.construction is ConstructionMode.STANDARD
        assert cfg.local_search is LocalSearchType.FIRST_IMPROVING
        assert cfg.time_limit == 60.0

    def test_strings_coerced_to_enums(self):
        cfg = SolverConfig(construction="reactive", local_search="best-improving")
        assert cfg.construction is ConstructionMode.REACTIVE
        assert cfg.local_search is LocalSearchType.BEST_IMPROVING

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Invalid construction"):
            SolverConfig(construction="grasp")

    def test_unknown_local_search_raises(self):
        with pytest.raises(ValueError, match="Invalid local_search"):
            SolverConfig(local_search="worst")

    @pytest.mark.parametrize("alpha", [-0.1, 1.1])
    def test_alpha_range(self, alpha):
        with pytest.raises(ValueError, match="alpha"):
            SolverConfig(alpha=alpha)

    def test_sample_size_positive(self):
        with pytest.raises(ValueError, match="sample_size"):
            SolverConfig(sample_size=0)

    def test_reactive_alphas_not_empty(self):
        with pytest.raises(ValueError, match="reactive_alphas"):
            SolverConfig(reactive_alphas=())

    def test_reactive_alphas_range(self):
        with pytest.raises(ValueError, match="reactive_alphas"):
            SolverConfig(reactive_alphas=(0.1, 2.0))

    def test_reactive_alphas_list_becomes_tuple(self):
        cfg = SolverConfig(reactive_alphas=[0.1, 0.3])
        assert cfg.reactive_alphas == (0.1, 0.3)

    def test_block_size_positive(self):
        with pytest.raises(ValueError, match="block_size"):
            SolverConfig(block_size=0)

    def test_max_iterations_positive(self):
        with pytest.raises(ValueError, match="max_iterations"):
            SolverConfig(max_iterations=0)

    def test_time_limit_positive(self):
        with pytest.raises(ValueError, match="time_limit"):
            SolverConfig(time_limit=0)

    def test_needs_a_stopping_condition(self):
        with pytest.raises(ValueError, match="At least one"):
            SolverConfig(time_limit=None, max_iterations=None)

    def test_epsilon_positive(self):
        with pytest.raises(ValueError, match="epsilon"):
            SolverConfig(epsilon=0.0)


class TestSolveEntryPoint:
    """The top-level solve() dispatcher."""

    def test_solve_instance(self, diagonal_instance):
        result = solve(diagonal_instance, max_iterations=1, time_limit=None, seed=1)
        assert result.objective == pytest.approx(3.0)
        assert result.feasible

    def test_solve_path(self, diagonal_file):
        result = solve(diagonal_file, max_iterations=1, time_limit=None)
        assert result.selected_indices == [0, 1, 2]
        assert result.metadata["instance"] == "diag.txt"

    def test_solve_with_config_object(self, diagonal_instance):
        cfg = SolverConfig(max_iterations=1, time_limit=None, local_search="best-improving")
        result = solve(diagonal_instance, cfg)
        assert result.local_search == "best-improving"

    def test_config_and_keywords_conflict(self, diagonal_instance):
        with pytest.raises(ValueError, match="not both"):
            solve(diagonal_instance, SolverConfig(), alpha=0.5)

    def test_invalid_keyword_value(self, diagonal_instance):
        with pytest.raises(ValueError, match="alpha"):
            solve(diagonal_instance, alpha=3.0)
