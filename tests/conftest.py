"""Pytest fixtures for the asteroids tests."""
import numpy as np
import pytest

from game.asteroids.simulation import AsteroidsGame


class ManualClock:
    """Clock the tests move by hand."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def game(rng, clock):
    """Game at t=0 with the random field cleared and the power-up timer armed."""
    g = AsteroidsGame(rng=rng, clock=clock)
    g.asteroids = []
    g.powerups = []
    g._last_powerup_spawn = clock()
    return g
