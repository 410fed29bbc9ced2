"""
Tests for GameConfig.
"""

import pytest

from snakegame.config import GameConfig, ENV_VARS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("snakegame.config.load_dotenv", lambda: None)


class TestGameConfig:
    """Tests for defaults, environment loading and validation."""

    def test_defaults(self):
        """Defaults match the classic tuning."""
        config = GameConfig()
        assert config.grid_size == 24
        assert config.base_tps == 9
        assert config.speedup_every == 6
        assert config.max_tps == 18
        assert config.start_len == 4
        assert config.food_spawn_attempts == 5000
        assert config.swipe_min_distance == 24
        assert config.swipe_max_duration_ms == 1000

    def test_from_env(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("SNAKE_GRID_SIZE", "16")
        monkeypatch.setenv("SNAKE_MAX_TPS", "20")
        monkeypatch.setenv("SNAKE_SWIPE_MIN_DISTANCE", "30.5")

        config = GameConfig.from_env()

        assert config.grid_size == 16
        assert config.max_tps == 20
        assert config.swipe_min_distance == 30.5
        assert config.base_tps == 9

    def test_overrides_beat_env(self, monkeypatch):
        """Explicit overrides win; None overrides are ignored."""
        monkeypatch.setenv("SNAKE_GRID_SIZE", "16")
        assert GameConfig.from_env(grid_size=12).grid_size == 12
        assert GameConfig.from_env(grid_size=None).grid_size == 16

    def test_bad_env_value(self, monkeypatch):
        """Non-numeric values are rejected with the variable name."""
        monkeypatch.setenv("SNAKE_BASE_TPS", "fast")
        with pytest.raises(ValueError, match="SNAKE_BASE_TPS"):
            GameConfig.from_env()

    @pytest.mark.parametrize("overrides", [
        {"grid_size": 1},
        {"start_len": 0},
        {"start_len": 30},
        {"base_tps": 0},
        {"base_tps": 20, "max_tps": 18},
        {"speedup_every": 0},
        {"food_spawn_attempts": 0},
    ])
    def test_validate_rejects(self, overrides):
        """Unplayable values raise ValueError."""
        with pytest.raises(ValueError):
            GameConfig(**overrides).validate()
