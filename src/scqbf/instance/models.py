"""Data model for Set-Covering Quadratic Binary Function instances.

Pure data container with no I/O. An instance pairs ``n`` subsets of the
ground set {0, ..., n-1} with an upper-triangular coefficient matrix A;
the objective of a selection x is x'Ax, to be maximized while every
ground element stays covered by at least one selected subset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np


@dataclass(eq=False)
class Instance:
    """Immutable SC-QBF problem data.

    Sets are stored 0-based and deduplicated (first occurrence order is
    kept). The matrix follows the upper-triangular convention: entries
    below the diagonal are zero and pairwise interaction between i and j
    is always read as ``A[i, j] + A[j, i]``.

    Attributes:
        n: Number of selectable indices, equal to the number of ground
            elements to cover.
        sets: ``sets[i]`` is the tuple of ground elements covered by i.
        A: ``(n, n)`` float coefficient matrix.
        name: Optional label, usually the source file name.
    """

    n: int
    sets: tuple[tuple[int, ...], ...]
    A: np.ndarray
    name: str | None = None
    symmetric: np.ndarray = field(init=False, repr=False)
    covering: tuple[tuple[int, ...], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"n must be >= 1, got {self.n}")
        if len(self.sets) != self.n:
            raise ValueError(
                f"Expected {self.n} sets, got {len(self.sets)}"
            )

        sets: list[tuple[int, ...]] = []
        for i, members in enumerate(self.sets):
            unique = tuple(dict.fromkeys(int(k) for k in members))
            for k in unique:
                if k < 0 or k >= self.n:
                    raise ValueError(
                        f"S_{i} contains element {k} outside [0, {self.n})"
                    )
            sets.append(unique)

        A = np.array(self.A, dtype=float)
        if A.shape != (self.n, self.n):
            raise ValueError(
                f"A must have shape ({self.n}, {self.n}), got {A.shape}"
            )
        if not np.all(np.isfinite(A)):
            raise ValueError("A must contain only finite values")
        if np.any(np.tril(A, k=-1) != 0.0):
            raise ValueError("A must be upper-triangular (zero below the diagonal)")
        A.setflags(write=False)

        symmetric = A + A.T
        symmetric.setflags(write=False)

        covering: list[list[int]] = [[] for _ in range(self.n)]
        for i, members in enumerate(sets):
            for k in members:
                covering[k].append(i)

        self.sets = tuple(sets)
        self.A = A
        self.symmetric = symmetric
        self.covering = tuple(tuple(c) for c in covering)

    @classmethod
    def from_lists(
        cls,
        sets: Sequence[Sequence[int]],
        matrix: Sequence[Sequence[float]],
        name: str | None = None,
    ) -> Instance:
        """Build an instance from plain Python lists (0-based sets)."""
        return cls(
            n=len(sets),
            sets=tuple(tuple(s) for s in sets),
            A=np.asarray(matrix, dtype=float),
            name=name,
        )

    def sym(self, i: int, j: int) -> float:
        """Symmetric pairwise coefficient ``A[i, j] + A[j, i]``."""
        return float(self.symmetric[i, j])

    @property
    def uncoverable(self) -> set[int]:
        """Ground elements that no set covers."""
        return {k for k, owners in enumerate(self.covering) if not owners}

    @property
    def is_coverable(self) -> bool:
        """Whether selecting every index covers the whole ground set."""
        return all(self.covering)

    @property
    def nonzeros(self) -> int:
        """Number of nonzero coefficients in A."""
        return int(np.count_nonzero(self.A))

    def __repr__(self) -> str:
        return f"Instance(name={self.name!r}, n={self.n}, nonzeros={self.nonzeros})"
