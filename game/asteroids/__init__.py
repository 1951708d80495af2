"""Asteroids module - single-screen arcade simulation, arcade window and Gymnasium env"""

from .simulation import AsteroidsGame
from .asteroids_env import AsteroidsEnv, run_random_episode

__all__ = ['AsteroidsGame', 'AsteroidsEnv', 'run_random_episode']
