"""
Arcade window: draws an AsteroidsGame and feeds it keyboard input

Run:
    python -m game.asteroids.window --seed 7
"""

from __future__ import annotations

import argparse
from typing import Optional

import arcade

from .simulation import AsteroidsGame


class AsteroidsWindow(arcade.Window):
    """Arcade window for playing (or watching) the asteroids simulation"""

    def __init__(self, game: AsteroidsGame, title: str = "Asteroids - Arcade", update_rate: float = 1 / 60):
        super().__init__(game.width, game.height, title, update_rate=update_rate)
        self.game = game

        # Colors
        self.BG = arcade.color.BLACK
        self.SHIP_C = arcade.color.WHITE
        self.ASTEROID_C = arcade.color.WHITE
        self.PROJECTILE_C = arcade.color.RED
        self.HUD_C = arcade.color.WHITE

    def _flip(self, y: float) -> float:
        # Simulation y grows downwards, arcade y grows upwards
        return self.game.height - y

    def _points(self, points):
        return [(x, self._flip(y)) for x, y in points]

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        arcade.set_background_color(self.BG)
        state = self.game.snapshot()

        # Ship
        arcade.draw_polygon_outline(self._points(state["ship"]["triangle"]), self.SHIP_C, 1)

        # Asteroids
        for a in state["asteroids"]:
            arcade.draw_polygon_outline(self._points(a["outline"]), self.ASTEROID_C, 1)

        # Projectiles
        for x, y, r in state["projectiles"]:
            arcade.draw_circle_filled(x, self._flip(y), r, self.PROJECTILE_C)

        # Power-ups
        for p in state["powerups"]:
            arcade.draw_circle_filled(p["x"], self._flip(p["y"]), p["radius"], p["color"])

        # HUD
        arcade.draw_text(f"Bullets: {state['num_projectiles']}", 10, self._flip(30), self.HUD_C, 20)
        arcade.draw_text(f"Score: {state['score']}", 10, self._flip(60), self.HUD_C, 20)
        y_offset = 90
        for name in state["active_powerups"]:
            arcade.draw_text(f"Power-up: {name}", 10, self._flip(y_offset), self.HUD_C, 16)
            y_offset += 25

        if state["game_over"]:
            arcade.draw_text(
                "GAME OVER",
                self.game.width / 2 - 100,
                self._flip(self.game.height / 2),
                self.HUD_C,
                40,
            )

    def on_update(self, delta_time: float):
        self.game.tick()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.LEFT:
            self.game.set_turn(-1)
        elif symbol == arcade.key.RIGHT:
            self.game.set_turn(1)
        elif symbol == arcade.key.UP:
            self.game.set_thrust(True)
        elif symbol == arcade.key.SPACE:
            self.game.shoot()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.LEFT, arcade.key.RIGHT):
            self.game.set_turn(0)
        elif symbol == arcade.key.UP:
            self.game.set_thrust(False)


def play(
    width: int = 800,
    height: int = 600,
    seed: Optional[int] = None,
    max_speed: Optional[float] = None,
    restart_delay_ticks: int = 0,
    verbose: int = 0,
):
    """Open a window and play with the keyboard"""
    game = AsteroidsGame(
        width=width,
        height=height,
        seed=seed,
        max_speed=max_speed,
        restart_delay_ticks=restart_delay_ticks,
        verbose=verbose,
    )
    AsteroidsWindow(game)
    arcade.run()
    print(f"Best score this session: {game.best_score} ({game.deaths} deaths)")


def main():
    parser = argparse.ArgumentParser(description="Play asteroids in an arcade window")
    parser.add_argument("--width", type=int, default=800, help="Canvas width (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Canvas height (default: 600)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: none)")
    parser.add_argument(
        "--max-speed",
        type=float,
        default=None,
        help="Cap the ship speed (default: unbounded)",
    )
    parser.add_argument(
        "--restart-delay",
        type=int,
        default=0,
        help="Ticks to show the GAME OVER banner before restarting (default: 0)",
    )
    parser.add_argument("--verbose", type=int, default=0, help="Diagnostic output level (default: 0)")

    args = parser.parse_args()

    play(
        width=args.width,
        height=args.height,
        seed=args.seed,
        max_speed=args.max_speed,
        restart_delay_ticks=args.restart_delay,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
