"""Shared test helpers."""

import numpy as np
import pytest


class FixedDraws:
    """Stand-in for numpy's Generator that returns preset uniform draws."""

    def __init__(self, *values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


@pytest.fixture
def draws():
    """Factory for FixedDraws: draws(0.9, 0.1, ...)."""
    return FixedDraws


@pytest.fixture
def rng():
    """Seeded generator so statistical tests are reproducible."""
    return np.random.default_rng(1234)
