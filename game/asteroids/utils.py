"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def wrap(value: float, size: float) -> float:
    """Wrap a coordinate into [0, size) (toroidal screen)"""
    wrapped = value % size
    # float modulo can land exactly on size for tiny negative inputs
    return 0.0 if wrapped >= size else wrapped


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching does not count)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)

