"""Tests for the geometry helpers."""

import math

import pytest

from game.asteroids.utils import circle_collide, clamp, vec_len, wrap


class TestWrap:

    @pytest.mark.parametrize("value,size,expected", [
        (0.0, 800, 0.0),
        (799.5, 800, 799.5),
        (800.0, 800, 0.0),
        (805.0, 800, 5.0),
        (-3.0, 800, 797.0),
        (-1603.0, 800, 797.0),
    ])
    def test_wrap_values(self, value, size, expected):
        assert wrap(value, size) == pytest.approx(expected)

    def test_wrap_tiny_negative_stays_in_range(self):
        result = wrap(-1e-20, 600)
        assert 0.0 <= result < 600


class TestCircleCollide:

    def test_overlapping(self):
        assert circle_collide(0, 0, 5, 3, 4, 1)

    def test_touching_is_not_a_hit(self):
        # distance 5 == 3 + 2
        assert not circle_collide(0, 0, 3, 3, 4, 2)

    def test_symmetric(self):
        assert circle_collide(10, 10, 4, 13, 10, 1) == circle_collide(13, 10, 1, 10, 10, 4)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_vec_len():
    assert vec_len(3, 4) == 5
    assert math.isclose(vec_len(1, 1), math.sqrt(2))

