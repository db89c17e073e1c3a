import pytest
import numpy as np

from dicelab.config import Settings


@pytest.fixture
def uniform_prior():
    return [1 / 6] * 6


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def sample_counts():
    return [1, 2, 3, 4, 5, 5]


@pytest.fixture
def test_settings():
    return Settings(random_seed=42, log_level="DEBUG")


class FixedDraw:
    """Generator stand-in whose random() always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_draw():
    return FixedDraw
