"""Shared test fixtures."""

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


@pytest.fixture
def solid_red_exemplar():
    """8x8 solid red exemplar."""
    exemplar = np.zeros((8, 8, 3), dtype=np.uint8)
    exemplar[..., 0] = 255
    return exemplar


@pytest.fixture
def noise_exemplar():
    """24x24 random exemplar with no zero channel anywhere."""
    rng = np.random.default_rng(1234)
    return rng.integers(1, 256, size=(24, 24, 3), dtype=np.uint8)


@pytest.fixture
def palette_exemplar():
    """16x16 exemplar built from four flat colour blocks."""
    exemplar = np.zeros((16, 16, 3), dtype=np.uint8)
    exemplar[:8, :8] = (200, 30, 30)
    exemplar[:8, 8:] = (30, 200, 30)
    exemplar[8:, :8] = (30, 30, 200)
    exemplar[8:, 8:] = (200, 200, 30)
    return exemplar


class SerialPool:
    """Stand-in for multiprocessing.Pool that maps on the calling process."""

    def __init__(self):
        self.calls = 0

    def map(self, func, iterable):
        self.calls += 1
        return [func(item) for item in iterable]


@pytest.fixture
def serial_pool():
    return SerialPool()
