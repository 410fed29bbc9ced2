"""
snakegame - classic single-player Snake.

The simulation engine and fixed-timestep scheduler are independent of any
drawing surface; renderers, input sources, persistence and the HUD plug in
as collaborators.
"""

from .config import GameConfig
from .engine import SnakeEngine, speed_for_score
from .scheduler import FixedTimestepScheduler

__all__ = [
    'GameConfig',
    'SnakeEngine',
    'speed_for_score',
    'FixedTimestepScheduler',
]
