"""CandidateList: the pool of indices eligible for insertion."""

from __future__ import annotations

import random

from scqbf.evaluate.solution import Solution
from scqbf.search.config import ConstructionMode


class CandidateList:
    """Maintains the insertion candidates for the current solution.

    Standard and reactive modes keep every unselected index as a
    candidate. Sampled mode rebuilds the list on every refresh as a
    uniform sample, without replacement, of at most ``sample_size``
    unselected indices.

    Args:
        n: Domain size (number of selectable indices).
        mode: Construction mode deciding the refresh policy.
        rng: Random source used for sampling.
        sample_size: Sample bound, sampled mode only.
    """

    def __init__(
        self,
        n: int,
        mode: ConstructionMode,
        rng: random.Random,
        sample_size: int = 64,
    ) -> None:
        self._n = n
        self._mode = mode
        self._rng = rng
        self._sample_size = sample_size
        self._items: list[int] = list(range(n))

    @property
    def mode(self) -> ConstructionMode:
        """Refresh policy in use."""
        return self._mode

    @property
    def items(self) -> list[int]:
        """Current candidates (a copy)."""
        return list(self._items)

    def reset(self) -> list[int]:
        """Make every index a candidate again (start of a construction)."""
        self._items = list(range(self._n))
        return self.items

    def refresh(self, solution: Solution) -> list[int]:
        """Re-derive the candidates for ``solution`` and return them."""
        if self._mode is ConstructionMode.SAMPLED:
            outside = [i for i in range(self._n) if i not in solution]
            k = min(self._sample_size, len(outside))
            self._items = self._rng.sample(outside, k)
        else:
            kept = [i for i in self._items if i not in solution]
            present = set(kept)
            kept.extend(
                i for i in range(self._n) if i not in solution and i not in present
            )
            self._items = kept
        return self.items

    def add(self, index: int) -> None:
        """Make a just-removed index a candidate."""
        if index not in self._items:
            self._items.append(index)

    def remove(self, index: int) -> None:
        """Drop a just-selected index from the candidates."""
        if index in self._items:
            self._items.remove(index)

    def __contains__(self, index: object) -> bool:
        return index in self._items

    def __len__(self) -> int:
        return len(self._items)
