"""
AsteroidsEnv - Gymnasium wrapper around the asteroids simulation
----------------------------------------------------------------
- AsteroidsGame does the simulation; this module only translates
- Gymnasium API
- MultiDiscrete action space: [turn(3), thrust(2), fire(2)]
- Vector observation: ship state + active power-ups + top-K nearest
  asteroids + top-M nearest power-ups
- Simulated clock (step * dt) so power-up and rapid-fire timing is
  reproducible from the reset seed
- A death ends the episode (the game's own auto-restart is not used)

Quick test:
    python -m game.asteroids.asteroids_env
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .entities import POWERUP_KINDS
from .simulation import AsteroidsGame
from .utils import clamp

DEFAULT_REWARDS = {
    "R_SCORE": 0.01,  # per point scored
    "R_POWERUP": 0.5,
    "R_SHOT": 0.01,
    "R_TIME": 0.0,
    "R_DEATH": 5.0,
}


class AsteroidsEnv(gym.Env):
    """Asteroids environment driven by AsteroidsGame"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        obs_mode: str = "vector",
        width: int = 800,
        height: int = 600,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_asteroids: int = 5,
        m_powerups: int = 2,
        fire_cooldown_steps: int = 10,
        reward_config: Optional[Dict[str, float]] = None,
        **game_kwargs,
    ):
        super().__init__()

        assert obs_mode in ("vector",), "Only 'vector' observations are implemented."
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.obs_mode = obs_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps

        # Observation config
        self.k_asteroids = k_asteroids
        self.m_powerups = m_powerups

        self.fire_cooldown_steps = fire_cooldown_steps
        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            unknown = set(reward_config) - set(DEFAULT_REWARDS) - {"name", "description"}
            if unknown:
                raise ValueError(f"Unknown reward keys: {sorted(unknown)}")
            self.rewards.update({k: v for k, v in reward_config.items() if k in DEFAULT_REWARDS})

        reserved = {"rng", "clock", "seed"} & set(game_kwargs)
        if reserved:
            raise ValueError(f"Game options set by the env itself: {sorted(reserved)}")
        self._game_kwargs = game_kwargs

        # Action space:
        # turn: 0 none, 1 left, 2 right
        # thrust: 0/1
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2, 2])

        # Ship: pos(2) vel(2) heading(2) cooldown(1) power-ups(3)
        # Each asteroid: rel pos(2) rel vel(2) radius(1)
        # Each power-up: rel pos(2) kind(1)
        obs_dim = 2 + 2 + 2 + 1 + len(POWERUP_KINDS) + (self.k_asteroids * 5) + (self.m_powerups * 3)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.game: AsteroidsGame = None  # type: ignore
        self._step_count = 0
        self._cooldown = 0
        self._events: Dict[str, float] = {}
        self._episode_score = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._cooldown = 0
        self._events = {}
        self._episode_score = 0
        self.game = AsteroidsGame(
            width=self.width,
            height=self.height,
            rng=self.np_random,
            clock=self._sim_time,
            **self._game_kwargs,
        )
        if self._window is not None:
            self._window.game = self.game

        return self._get_obs(), self._get_info()

    def step(self, action):
        turn, thrust, fire = int(action[0]), int(action[1]), int(action[2])

        self.game.set_turn((0, -1, 1)[turn])
        self.game.set_thrust(thrust == 1)
        if fire == 1 and self._cooldown == 0:
            self.game.shoot()
            self._cooldown = self.fire_cooldown_steps
        elif self._cooldown > 0:
            self._cooldown -= 1

        self._events = self.game.tick()
        self._episode_score += int(self._events["score"])
        self._step_count += 1

        reward = self._compute_reward()
        terminated = self._events["death"] > 0
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def _sim_time(self) -> float:
        return self._step_count * self.dt

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        game = self.game
        ship = game.ship
        speed_scale = 10.0

        obs_parts = [
            (ship.x / self.width) * 2 - 1,
            (ship.y / self.height) * 2 - 1,
            clamp(ship.vx / speed_scale, -1, 1),
            clamp(ship.vy / speed_scale, -1, 1),
            math.cos(ship.angle),
            math.sin(ship.angle),
            self._cooldown / max(1, self.fire_cooldown_steps),
        ]
        obs_parts += [1.0 if kind in game.active_powerups else 0.0 for kind in POWERUP_KINDS]

        asteroids_sorted = sorted(
            game.asteroids,
            key=lambda a: (a.x - ship.x) ** 2 + (a.y - ship.y) ** 2
        )
        for i in range(self.k_asteroids):
            if i < len(asteroids_sorted):
                a = asteroids_sorted[i]
                obs_parts += [
                    clamp((a.x - ship.x) / self.width, -1, 1),
                    clamp((a.y - ship.y) / self.height, -1, 1),
                    clamp((a.vx - ship.vx) / speed_scale, -1, 1),
                    clamp((a.vy - ship.vy) / speed_scale, -1, 1),
                    clamp(a.radius / game.asteroid_radius, 0, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        powerups_sorted = sorted(
            game.powerups,
            key=lambda p: (p.x - ship.x) ** 2 + (p.y - ship.y) ** 2
        )
        for i in range(self.m_powerups):
            if i < len(powerups_sorted):
                p = powerups_sorted[i]
                obs_parts += [
                    clamp((p.x - ship.x) / self.width, -1, 1),
                    clamp((p.y - ship.y) / self.height, -1, 1),
                    (POWERUP_KINDS.index(p.kind) + 1) / len(POWERUP_KINDS),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        r = self.rewards
        reward = 0.0
        reward += r["R_SCORE"] * self._events.get("score", 0.0)
        reward += r["R_POWERUP"] * self._events.get("powerups", 0.0)
        reward -= r["R_SHOT"] * self._events.get("shots", 0.0)
        reward -= r["R_TIME"]
        reward -= r["R_DEATH"] * self._events.get("death", 0.0)
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            # the game has already restarted on the step a death is reported
            "score": self._episode_score,
            "kills": self._events.get("kills", 0.0),
            "num_asteroids": len(self.game.asteroids),
            "num_projectiles": len(self.game.projectiles),
            "num_powerups": len(self.game.powerups),
            "active_powerups": sorted(self.game.active_powerups),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # arcade needs a display, import only when a window is wanted
            from .window import AsteroidsWindow
            self._window = AsteroidsWindow(self.game, title="AsteroidsEnv - Arcade")

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42):
    """Run a random episode for testing"""
    env = AsteroidsEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f} (score {info['score']}, {info['step']} steps)")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
