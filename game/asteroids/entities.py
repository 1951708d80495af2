"""
Game entity dataclasses
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .utils import circle_collide, vec_len, wrap

TURN_RATE = 0.1  # rad per tick while a turn key is held
THRUST = 0.1  # velocity added per tick while thrusting
SHIP_RADIUS = 10.0

PROJECTILE_RADIUS = 2.0
PROJECTILE_SPEED = 5.0
PROJECTILE_TTL = 60  # ticks

MIN_SPLIT_RADIUS = 10.0

POWERUP_RADIUS = 15.0
POWERUP_KINDS = ("shield", "scatter", "rapid")
POWERUP_COLORS = {
    "shield": (0, 0, 255),
    "scatter": (0, 128, 0),
    "rapid": (255, 255, 0),
}


@dataclass
class Body:
    """Shared kinematic state: position, velocity, extent and remaining life"""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = 1.0
    ttl: float = math.inf  # ticks left; inf for persistent bodies

    def advance(self, width: float, height: float):
        self.x = wrap(self.x + self.vx, width)
        self.y = wrap(self.y + self.vy, height)
        if self.ttl != math.inf:
            self.ttl -= 1

    def is_expired(self) -> bool:
        return self.ttl <= 0

    @property
    def speed(self) -> float:
        return vec_len(self.vx, self.vy)


@dataclass
class Ship(Body):
    """Player ship"""
    radius: float = SHIP_RADIUS
    angle: float = 0.0  # heading in radians
    turn: float = 0.0  # angular velocity applied each tick
    thrusting: bool = False

    def rotate(self, direction: int):
        if direction not in (-1, 0, 1):
            raise ValueError(f"Turn direction must be -1, 0 or 1, got {direction!r}")
        self.turn = direction * TURN_RATE

    def thrust(self, max_speed: Optional[float] = None):
        self.vx += THRUST * math.cos(self.angle)
        self.vy += THRUST * math.sin(self.angle)
        if max_speed is not None:
            speed = self.speed
            if speed > max_speed:
                scale = max_speed / speed
                self.vx *= scale
                self.vy *= scale

    def nose(self, size: float = SHIP_RADIUS):
        """Triangle vertices (tip first) for drawing"""
        return [
            (self.x + size * math.cos(self.angle + off),
             self.y + size * math.sin(self.angle + off))
            for off in (0.0, 2.5, -2.5)
        ]


@dataclass(eq=False)
class Asteroid(Body):
    """Drifting rock with a fixed irregular silhouette"""
    radius: float = 20.0
    vertices: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))

    def outline(self):
        """Absolute polygon points"""
        return [(self.x + vx, self.y + vy) for vx, vy in self.vertices]


@dataclass
class Projectile(Body):
    """Short-lived shot"""
    radius: float = PROJECTILE_RADIUS
    ttl: float = PROJECTILE_TTL


@dataclass
class PowerUp(Body):
    """Pickup granting an effect for the rest of the current life"""
    radius: float = POWERUP_RADIUS
    kind: str = "shield"

    @property
    def color(self):
        return POWERUP_COLORS[self.kind]


def collides(a: Body, b: Body) -> bool:
    return circle_collide(a.x, a.y, a.radius, b.x, b.y, b.radius)


def asteroid_vertices(radius: float, rng: np.random.Generator) -> np.ndarray:
    """Random 7-13 point silhouette, offsets from the centre"""
    n = int(rng.integers(7, 14))
    angles = np.arange(n) * (2 * math.pi / n)
    dist = radius * rng.uniform(0.75, 1.25, size=n)
    return np.stack([np.cos(angles) * dist, np.sin(angles) * dist], axis=1)


def make_asteroid(x: float, y: float, radius: float, rng: np.random.Generator) -> Asteroid:
    # Smaller rocks move faster
    speed = 1 + (20 - radius) / 10
    heading = rng.uniform(0.0, 2 * math.pi)
    return Asteroid(
        x=x,
        y=y,
        vx=speed * math.cos(heading),
        vy=speed * math.sin(heading),
        radius=radius,
        vertices=asteroid_vertices(radius, rng),
    )


def split_asteroid(asteroid: Asteroid, rng: np.random.Generator) -> List[Asteroid]:
    """Two half-size children at the parent's position, none below the minimum size"""
    if asteroid.radius < MIN_SPLIT_RADIUS:
        return []
    half = asteroid.radius / 2
    return [make_asteroid(asteroid.x, asteroid.y, half, rng) for _ in range(2)]


def make_projectile(ship: Ship, angle_offset: float = 0.0) -> Projectile:
    heading = ship.angle + angle_offset
    return Projectile(
        x=ship.x,
        y=ship.y,
        vx=PROJECTILE_SPEED * math.cos(heading),
        vy=PROJECTILE_SPEED * math.sin(heading),
    )


def make_powerup(x: float, y: float, kind: str) -> PowerUp:
    if kind not in POWERUP_KINDS:
        raise ValueError(f"Unknown power-up kind: {kind}")
    return PowerUp(x=x, y=y, kind=kind)
