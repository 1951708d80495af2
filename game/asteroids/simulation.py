"""
AsteroidsGame - the per-tick simulation behind the arcade window and the env
------------------------------------------------------------------------------
- Owns the ship, asteroid field, projectiles and power-ups
- One call to tick() advances the whole world by one frame
- Rendering and input live elsewhere; they only read snapshot() and call
  set_turn / set_thrust / shoot

Tick order:
    restart if game over -> due burst shots -> ship -> everything else moves
    -> expired shots dropped -> shots vs rocks -> ship vs rocks
    -> refill empty field -> power-up spawn timer -> power-up pickups
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from .entities import (
    POWERUP_KINDS,
    Asteroid,
    PowerUp,
    Projectile,
    Ship,
    collides,
    make_asteroid,
    make_powerup,
    make_projectile,
    split_asteroid,
)

SHIELD_GROWTH = 1.5


class AsteroidsGame:
    """Single-screen asteroids simulation"""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        initial_asteroids: int = 5,
        asteroid_radius: float = 20.0,
        powerup_interval: float = 10.0,  # seconds
        max_projectiles_for_rapid: int = 10,
        rapid_burst: int = 3,
        rapid_burst_gap: float = 0.1,  # seconds between burst shots
        scatter_offsets: Tuple[float, ...] = (-0.2, 0.0, 0.2),
        max_speed: Optional[float] = None,  # None keeps ship speed unbounded
        restart_delay_ticks: int = 0,  # ticks the game-over banner stays up
        cancel_stale_bursts: bool = True,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
        verbose: int = 0,
    ):
        assert width > 0 and height > 0, "Canvas dimensions must be positive"
        assert restart_delay_ticks >= 0, "restart_delay_ticks cannot be negative"

        # Arena
        self.width = width
        self.height = height

        # Gameplay config
        self.initial_asteroids = initial_asteroids
        self.asteroid_radius = asteroid_radius
        self.powerup_interval = powerup_interval
        self.max_projectiles_for_rapid = max_projectiles_for_rapid
        self.rapid_burst = rapid_burst
        self.rapid_burst_gap = rapid_burst_gap
        self.scatter_offsets = tuple(scatter_offsets)
        self.max_speed = max_speed
        self.restart_delay_ticks = restart_delay_ticks
        self.cancel_stale_bursts = cancel_stale_bursts
        self.verbose = verbose

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.clock = clock if clock is not None else time.monotonic

        # Pending rapid-fire shots: (due time, epoch, angle offset).
        # Survives restarts; the epoch decides whether a shot is stale.
        self._pending: List[Tuple[float, int, float]] = []
        self.epoch = 0

        # In-process counters, never reset by a restart
        self.deaths = 0
        self.best_score = 0

        # World state
        self.ship: Ship = None  # type: ignore
        self.asteroids: List[Asteroid] = []
        self.projectiles: List[Projectile] = []
        self.powerups: List[PowerUp] = []
        self.active_powerups: set = set()
        self.score = 0
        self.game_over = False
        self.ticks = 0
        self._last_powerup_spawn: Optional[float] = None
        self._restart_countdown = 0

        # Event counters for the current tick
        self._events: Dict[str, float] = {}
        self._unreported_shots = 0

        self.reset()

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def reset(self):
        """Fresh ship and field; score, flags and power-ups cleared"""
        self.epoch += 1
        self.ship = Ship(x=self.width / 2, y=self.height / 2)
        self.asteroids = []
        self.projectiles = []
        self.powerups = []
        self.active_powerups = set()
        self.score = 0
        self.game_over = False
        self.ticks = 0
        self._last_powerup_spawn = None
        self._restart_countdown = 0
        self._spawn_field()

    def restart(self):
        if self.verbose > 0:
            print(f"[AsteroidsGame] Restarting (deaths so far: {self.deaths})")
        self.reset()

    # ----------------------------
    # Input
    # ----------------------------

    def set_turn(self, direction: int):
        self.ship.rotate(direction)

    def set_thrust(self, on: bool):
        self.ship.thrusting = bool(on)

    def shoot(self):
        """Fire according to the active power-ups.

        rapid and scatter are independent: with both active one trigger
        yields the burst and the spread.
        """
        rapid = "rapid" in self.active_powerups
        scatter = "scatter" in self.active_powerups

        if rapid and len(self.projectiles) < self.max_projectiles_for_rapid:
            now = self.clock()
            for i in range(self.rapid_burst):
                self._pending.append((now + i * self.rapid_burst_gap, self.epoch, 0.0))
            self._flush_pending()
        if scatter:
            for offset in self.scatter_offsets:
                self._fire(offset)
        if not rapid and not scatter:
            self._fire(0.0)

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def tick(self) -> Dict[str, float]:
        """Advance one frame and return this tick's event counters.

        "shots" counts every projectile created since the previous tick,
        including those fired by shoot() between ticks.
        """
        self._events = {"kills": 0.0, "score": 0.0, "powerups": 0.0, "shots": 0.0, "death": 0.0}
        self._step()
        self._events["shots"] = float(self._unreported_shots)
        self._unreported_shots = 0
        return self._events

    def _step(self):
        if self.game_over:
            if self._restart_countdown > 0:
                self._restart_countdown -= 1
            else:
                self.restart()
            return

        self._flush_pending()

        self._update_ship()
        for body in self.asteroids + self.projectiles + self.powerups:
            body.advance(self.width, self.height)
        self.projectiles = [p for p in self.projectiles if not p.is_expired()]

        self._handle_hits()

        if any(collides(self.ship, a) for a in self.asteroids):
            self._on_death()
            return

        if not self.asteroids:
            self._spawn_field()

        now = self.clock()
        if self._last_powerup_spawn is None or now - self._last_powerup_spawn >= self.powerup_interval:
            self._spawn_powerup()
            self._last_powerup_spawn = now

        self._handle_pickups()

        self.ticks += 1

    def _update_ship(self):
        ship = self.ship
        ship.angle += ship.turn
        if ship.thrusting:
            ship.thrust(self.max_speed)
        ship.advance(self.width, self.height)

    def _handle_hits(self):
        # Each shot destroys at most one rock; fragments join the field
        # once that shot's sweep is done
        remaining = []
        for p in self.projectiles:
            target = next((a for a in self.asteroids if collides(p, a)), None)
            if target is None:
                remaining.append(p)
                continue
            self.asteroids = [a for a in self.asteroids if a is not target]
            points = 100 * math.floor(20 / target.radius)
            self.score += points
            self.best_score = max(self.best_score, self.score)
            self._events["kills"] += 1.0
            self._events["score"] += points
            self.asteroids.extend(split_asteroid(target, self.rng))
        self.projectiles = remaining

    def _handle_pickups(self):
        remaining = []
        for p in self.powerups:
            if collides(self.ship, p):
                self._collect(p)
            else:
                remaining.append(p)
        self.powerups = remaining

    def _collect(self, powerup: PowerUp):
        self.active_powerups.add(powerup.kind)
        if powerup.kind == "shield":
            self.ship.radius *= SHIELD_GROWTH
        self._events["powerups"] += 1.0
        if self.verbose > 0:
            print(f"[AsteroidsGame] Power-up collected: {powerup.kind}")

    def _on_death(self):
        self.game_over = True
        self.deaths += 1
        self._events["death"] = 1.0
        if self.verbose > 0:
            print(f"[AsteroidsGame] Game over! Score: {self.score}")
        if self.restart_delay_ticks > 0:
            self._restart_countdown = self.restart_delay_ticks
        else:
            self.restart()

    def _flush_pending(self):
        now = self.clock()
        waiting = []
        for due, epoch, offset in self._pending:
            if due > now:
                waiting.append((due, epoch, offset))
            elif epoch == self.epoch or not self.cancel_stale_bursts:
                self._fire(offset)
        self._pending = waiting

    @property
    def pending_shots(self) -> int:
        return len(self._pending)

    # ----------------------------
    # Spawning
    # ----------------------------

    def _fire(self, angle_offset: float):
        p = make_projectile(self.ship, angle_offset)
        self.projectiles.append(p)
        self._unreported_shots += 1
        if self.verbose > 1:
            print(f"[AsteroidsGame] Projectile fired at ({p.x:.1f}, {p.y:.1f}) "
                  f"heading {self.ship.angle + angle_offset:.2f}")

    def _spawn_field(self):
        for _ in range(self.initial_asteroids):
            x = self.rng.uniform(0, self.width)
            y = self.rng.uniform(0, self.height)
            self.asteroids.append(make_asteroid(x, y, self.asteroid_radius, self.rng))

    def _spawn_powerup(self):
        kind = str(self.rng.choice(POWERUP_KINDS))
        x = self.rng.uniform(0, self.width)
        y = self.rng.uniform(0, self.height)
        self.powerups.append(make_powerup(x, y, kind))

    # ----------------------------
    # Read-only view
    # ----------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Copy of everything the renderer needs"""
        ship = self.ship
        return {
            "width": self.width,
            "height": self.height,
            "ship": {
                "x": ship.x,
                "y": ship.y,
                "angle": ship.angle,
                "radius": ship.radius,
                "thrusting": ship.thrusting,
                "triangle": ship.nose(),
            },
            "asteroids": [
                {"x": a.x, "y": a.y, "radius": a.radius, "outline": a.outline()}
                for a in self.asteroids
            ],
            "projectiles": [(p.x, p.y, p.radius) for p in self.projectiles],
            "powerups": [
                {"x": p.x, "y": p.y, "radius": p.radius, "kind": p.kind, "color": p.color}
                for p in self.powerups
            ],
            "score": self.score,
            "best_score": self.best_score,
            "active_powerups": sorted(self.active_powerups),
            "game_over": self.game_over,
            "num_projectiles": len(self.projectiles),
        }
