"""Coverage tracking for ground elements."""

from scqbf.coverage.tracker import CoverageTracker

__all__ = ["CoverageTracker"]
