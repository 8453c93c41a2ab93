"""Shared test fixtures for scqbf."""

import numpy as np
import pytest

from scqbf.instance.models import Instance


DIAGONAL_TEXT = """3
1 1 1
1
2
3
1 0 0
1 0
1
"""

RING_SETS = [[0, 1], [1, 2], [2, 3], [3, 4], [4, 5], [5, 0]]

RING_MATRIX = [
    [2.0, -1.0, 3.0, 0.0, -2.0, 1.0],
    [0.0, -1.0, 2.0, -3.0, 0.0, 4.0],
    [0.0, 0.0, 1.0, 1.0, -2.0, 0.0],
    [0.0, 0.0, 0.0, -2.0, 3.0, -1.0],
    [0.0, 0.0, 0.0, 0.0, 1.0, 2.0],
    [0.0, 0.0, 0.0, 0.0, 0.0, -3.0],
]


class FakeClock:
    """Deterministic clock advancing by ``step`` seconds per call."""

    def __init__(self, step: float = 1.0) -> None:
        self.step = step
        self.now = 0.0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


def make_random_instance(n: int, density: float = 0.3, seed: int = 0) -> Instance:
    """Random coverable instance: set i always contains element i."""
    gen = np.random.default_rng(seed)
    sets = []
    for i in range(n):
        extra = [k for k in range(n) if k != i and gen.random() < density]
        sets.append([i] + extra)
    A = np.triu(gen.integers(-5, 6, size=(n, n)).astype(float))
    return Instance.from_lists(sets, A, name=f"random-{n}-{seed}")


@pytest.fixture
def diagonal_text() -> str:
    """n=3, disjoint singleton sets, identity matrix."""
    return DIAGONAL_TEXT


@pytest.fixture
def diagonal_instance() -> Instance:
    return Instance.from_lists([[0], [1], [2]], np.eye(3), name="diagonal")


@pytest.fixture
def ring_instance() -> Instance:
    """n=6, each set covers two neighbouring elements, mixed-sign matrix."""
    return Instance.from_lists(RING_SETS, RING_MATRIX, name="ring")


@pytest.fixture
def random_instance() -> Instance:
    return make_random_instance(12, density=0.25, seed=3)


@pytest.fixture
def diagonal_file(tmp_path, diagonal_text):
    path = tmp_path / "diag.txt"
    path.write_text(diagonal_text, encoding="utf-8")
    return path


@pytest.fixture
def instance_factory():
    """Factory for random coverable instances."""
    return make_random_instance


@pytest.fixture
def clock_factory():
    """Factory for deterministic clocks."""
    return FakeClock
