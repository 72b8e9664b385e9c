"""Pytest configuration for ray tracer tests.

Provides seeded random sources and a stub generator that always returns the
same value, which makes the stochastic scattering paths deterministic.
"""

import pytest

from core.utils import RandomSource
from core.vector import Color
from materials.lambertian import Lambertian


class FixedRandom(RandomSource):
    """Random source whose random() always returns the same value."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def rng():
    """Seeded random source so every test run samples the same directions."""
    return RandomSource(42)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom instances."""
    return FixedRandom


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))
