"""CoverageTracker: per-element coverage counts for a selection of sets."""

from __future__ import annotations

import numpy as np

from scqbf.instance.models import Instance


class CoverageTracker:
    """Tracks how many selected sets cover each ground element.

    Counts are updated incrementally as sets are added and removed.
    An element is covered when its count is at least one.

    Args:
        instance: The problem instance whose sets are being selected.
    """

    def __init__(self, instance: Instance) -> None:
        self._instance = instance
        self._counts = np.zeros(instance.n, dtype=np.int64)

    @property
    def counts(self) -> np.ndarray:
        """Read-only view of the per-element coverage counts."""
        view = self._counts.view()
        view.setflags(write=False)
        return view

    @property
    def covered_count(self) -> int:
        """Number of ground elements covered at least once."""
        return int(np.count_nonzero(self._counts))

    @property
    def is_complete(self) -> bool:
        """Whether every ground element is covered."""
        return bool(np.all(self._counts > 0))

    @property
    def uncovered(self) -> set[int]:
        """Ground elements with zero coverage."""
        return {int(k) for k in np.flatnonzero(self._counts == 0)}

    def add(self, index: int) -> None:
        """Count the elements of set ``index`` as covered once more."""
        for k in self._instance.sets[index]:
            self._counts[k] += 1

    def remove(self, index: int) -> None:
        """Undo one :meth:`add` of set ``index``."""
        for k in self._instance.sets[index]:
            self._counts[k] -= 1

    def can_drop(self, index: int, replacement: int | None = None) -> bool:
        """Whether removing set ``index`` keeps every element covered.

        Args:
            index: A currently selected set.
            replacement: Optional set inserted in the same move; elements
                it covers do not depend on ``index``.
        """
        spare = self._instance.sets[replacement] if replacement is not None else ()
        for k in self._instance.sets[index]:
            if self._counts[k] <= 1 and k not in spare:
                return False
        return True

    def new_coverage(self, index: int) -> int:
        """Number of currently uncovered elements that set ``index`` covers."""
        return sum(1 for k in self._instance.sets[index] if self._counts[k] == 0)

    def reset(self) -> None:
        """Zero all counts, keeping the instance."""
        self._counts.fill(0)
