"""
Game configuration for snakegame.

Values default to the classic tuning and can be overridden through
environment variables (a local .env file is honoured via python-dotenv).
"""

import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv


# Environment variable name for each tunable field
ENV_VARS = {
    'grid_size': 'SNAKE_GRID_SIZE',
    'base_tps': 'SNAKE_BASE_TPS',
    'speedup_every': 'SNAKE_SPEEDUP_EVERY',
    'max_tps': 'SNAKE_MAX_TPS',
    'start_len': 'SNAKE_START_LEN',
    'food_spawn_attempts': 'SNAKE_FOOD_SPAWN_ATTEMPTS',
    'swipe_min_distance': 'SNAKE_SWIPE_MIN_DISTANCE',
    'swipe_max_duration_ms': 'SNAKE_SWIPE_MAX_DURATION_MS',
}


@dataclass
class GameConfig:
    """
    Tunable constants for a game.

    Attributes:
        grid_size: cells per side of the square board
        base_tps: ticks per second at score 0
        speedup_every: score interval between speed increases
        max_tps: ticks per second cap
        start_len: snake length after a reset
        food_spawn_attempts: rejection-sampling cap for food placement
        swipe_min_distance: shortest swipe (in pixels) that counts as a turn
        swipe_max_duration_ms: slowest swipe (in milliseconds) that counts as a turn
    """

    grid_size: int = 24
    base_tps: int = 9
    speedup_every: int = 6
    max_tps: int = 18
    start_len: int = 4
    food_spawn_attempts: int = 5000
    swipe_min_distance: float = 24
    swipe_max_duration_ms: float = 1000

    def validate(self) -> "GameConfig":
        """Raise ValueError if the values cannot describe a playable game."""
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.start_len < 1 or self.start_len > self.grid_size:
            raise ValueError(
                f"start_len must be between 1 and grid_size ({self.grid_size}), got {self.start_len}"
            )
        if self.base_tps <= 0:
            raise ValueError(f"base_tps must be positive, got {self.base_tps}")
        if self.max_tps < self.base_tps:
            raise ValueError(
                f"max_tps ({self.max_tps}) must not be lower than base_tps ({self.base_tps})"
            )
        if self.speedup_every <= 0:
            raise ValueError(f"speedup_every must be positive, got {self.speedup_every}")
        if self.food_spawn_attempts <= 0:
            raise ValueError(
                f"food_spawn_attempts must be positive, got {self.food_spawn_attempts}"
            )
        return self

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """
        Build a config from environment variables.

        Args:
            **overrides: explicit values (e.g. from CLI flags) that win over
                the environment. None values are ignored.

        Returns:
            A validated GameConfig.
        """
        load_dotenv()

        values = {}
        for field in fields(cls):
            raw = os.getenv(ENV_VARS[field.name])
            if raw is None or raw == '':
                continue
            try:
                values[field.name] = field.type(raw)
            except ValueError:
                raise ValueError(f"{ENV_VARS[field.name]} must be a number, got {raw!r}")

        for key, value in overrides.items():
            if value is not None:
                values[key] = value

        return cls(**values).validate()

