"""
Configuration for the asteroids game and its Gymnasium environment
"""

# Game parameters (passed to AsteroidsGame and forwarded by AsteroidsEnv)
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "initial_asteroids": 5,
    "asteroid_radius": 20.0,
    "powerup_interval": 10.0,  # seconds
    "max_projectiles_for_rapid": 10,
    "rapid_burst": 3,
    "rapid_burst_gap": 0.1,  # seconds
    "scatter_offsets": (-0.2, 0.0, 0.2),
    "max_speed": None,  # unbounded, as in the arcade original
    "restart_delay_ticks": 0,  # GAME OVER never shows; raise to display it
    "cancel_stale_bursts": True,
    "verbose": 0,
}

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,
    "dt": 1 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_asteroids": 5,
    "m_powerups": 2,
    "fire_cooldown_steps": 10,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "name": "baseline",
    "description": "Score-driven reward with a death penalty",
    "R_SCORE": 0.01,     # Per point (100 points for a full-size rock)
    "R_POWERUP": 0.5,    # Reward for picking up a power-up
    "R_SHOT": 0.01,      # Penalty per projectile (encourage aiming)
    "R_TIME": 0.0,       # No time penalty
    "R_DEATH": 5.0,      # Death penalty
}


def make_env_kwargs(render_mode=None, **overrides):
    """Merge the configs above into AsteroidsEnv keyword arguments"""
    kwargs = dict(GAME_CONFIG)
    kwargs.update(ENV_CONFIG)
    kwargs["reward_config"] = REWARD_CONFIG
    kwargs["render_mode"] = render_mode
    for key, value in overrides.items():
        if key not in kwargs:
            raise ValueError(f"Unknown config key: {key}")
        kwargs[key] = value
    return kwargs


if __name__ == "__main__":
    for name, cfg in (("GAME_CONFIG", GAME_CONFIG), ("ENV_CONFIG", ENV_CONFIG), ("REWARD_CONFIG", REWARD_CONFIG)):
        print(name)
        print("-" * 50)
        for key, value in cfg.items():
            print(f"  {key:28} {value}")
        print()
