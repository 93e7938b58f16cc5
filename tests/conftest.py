"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from flatmatrix import initialize


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_triples(rng):
    """Fifty (rows, cols, value) triples, dimensions in [0, 6]."""
    dims = rng.integers(0, 7, size=(50, 2))
    values = rng.integers(-100, 100, size=50)
    return [(int(r), int(c), int(v)) for (r, c), v in zip(dims, values)]


@pytest.fixture
def random_matrices(rng):
    """Thirty integer matrices with distinct elements, dimensions in [1, 6]."""
    matrices = []
    for _ in range(30):
        rows, cols = (int(d) for d in rng.integers(1, 7, size=2))
        values = rng.integers(-50, 50, size=rows * cols).tolist()
        matrices.append(initialize(rows, cols, lambda r, c: values[(r - 1) * cols + c - 1]))
    return matrices


@pytest.fixture
def counting():
    """2x3 matrix [[1, 2, 3], [4, 5, 6]]."""
    return initialize(2, 3, lambda r, c: (r - 1) * 3 + c)
