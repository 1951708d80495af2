"""Tests for the keyboard translation in AsteroidsWindow.

The handlers only touch ``self.game``, so they are called unbound with a
stand-in for the window and no display is opened.
"""

from types import SimpleNamespace

import pytest

arcade = pytest.importorskip("arcade")

from game.asteroids.window import AsteroidsWindow


@pytest.fixture
def host(game, clock):
    game.asteroids = []
    return SimpleNamespace(game=game)


def press(host, symbol):
    AsteroidsWindow.on_key_press(host, symbol, 0)


def release(host, symbol):
    AsteroidsWindow.on_key_release(host, symbol, 0)


class TestKeyBindings:

    @pytest.mark.parametrize("symbol,turn", [("LEFT", -0.1), ("RIGHT", 0.1)])
    def test_turn_keys(self, host, symbol, turn):
        key = getattr(arcade.key, symbol)
        press(host, key)
        assert host.game.ship.turn == pytest.approx(turn)
        release(host, key)
        assert host.game.ship.turn == 0

    def test_up_toggles_thrust(self, host):
        press(host, arcade.key.UP)
        assert host.game.ship.thrusting
        release(host, arcade.key.UP)
        assert not host.game.ship.thrusting

    def test_space_fires(self, host):
        press(host, arcade.key.SPACE)
        assert len(host.game.projectiles) == 1
        release(host, arcade.key.SPACE)
        assert len(host.game.projectiles) == 1

    def test_other_keys_ignored(self, host):
        press(host, arcade.key.A)
        release(host, arcade.key.DOWN)
        ship = host.game.ship
        assert ship.turn == 0
        assert not ship.thrusting
        assert host.game.projectiles == []
