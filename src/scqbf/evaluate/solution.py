"""Solution: a mutable selection of indices with a cached cost."""

from __future__ import annotations

from typing import Iterable, Iterator


class Solution:
    """A set of selected indices in insertion order.

    ``cost`` caches the negated objective as last written by an
    evaluator; it goes stale after :meth:`add` or :meth:`remove` until
    the solution is evaluated again. ``version`` increases on every
    mutation so evaluators can tell whether their derived state still
    matches.

    Args:
        elements: Initial selected indices (must be distinct).
        cost: Initial cached cost. An empty selection has cost 0.
    """

    def __init__(self, elements: Iterable[int] = (), cost: float = 0.0) -> None:
        self._elements: list[int] = []
        self._members: set[int] = set()
        self.cost = cost
        self.version = 0
        for e in elements:
            self.add(e)

    @property
    def elements(self) -> list[int]:
        """Selected indices in insertion order (a copy)."""
        return list(self._elements)

    @property
    def objective(self) -> float:
        """The true (maximized) objective, i.e. ``-cost``."""
        return -self.cost

    def add(self, index: int) -> None:
        """Select ``index``.

        Raises:
            ValueError: If ``index`` is already selected.
        """
        if index in self._members:
            raise ValueError(f"Index {index} is already selected")
        self._elements.append(index)
        self._members.add(index)
        self.version += 1

    def remove(self, index: int) -> None:
        """Deselect ``index``.

        Raises:
            ValueError: If ``index`` is not selected.
        """
        if index not in self._members:
            raise ValueError(f"Index {index} is not selected")
        self._elements.remove(index)
        self._members.discard(index)
        self.version += 1

    def copy(self) -> Solution:
        """Independent copy with the same members and cached cost."""
        return Solution(self._elements, cost=self.cost)

    def __contains__(self, index: object) -> bool:
        return index in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Solution(cost={self.cost}, size={len(self)}, elements={sorted(self._elements)})"
