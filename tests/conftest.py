"""Pytest configuration for spheretracer tests.

Provides a seeded random generator and a scripted generator whose draws
are fixed in advance, for tests that need to force a particular sample.
"""

import pytest

from spheretracer.core.utils import make_rng


class ScriptedRng:
    """Stands in for numpy's Generator, replaying fixed values in order.

    ``uniform`` values are given directly in the requested range; ``random``
    values in [0, 1). Running out of values is a test bug and raises.
    """

    def __init__(self, uniform=(), random=()):
        self._uniform = list(uniform)
        self._random = list(random)

    def uniform(self, low=0.0, high=1.0):
        value = self._uniform.pop(0)
        assert low <= value <= high
        return value

    def random(self):
        return self._random.pop(0)


@pytest.fixture
def rng():
    """A seeded generator so sampled tests are reproducible."""
    return make_rng(1234)


@pytest.fixture
def scripted_rng():
    """Factory for generators that replay fixed draws."""
    return ScriptedRng
