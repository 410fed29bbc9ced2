"""
Domain entities for snakegame.

This module contains the core game entities that are independent of
infrastructure concerns (drawing surfaces, storage, input devices).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    WALL, SELF, WIN,
    EVENT_RESET, EVENT_TICK, EVENT_PAUSE, EVENT_GAME_OVER,
)
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'WALL', 'SELF', 'WIN',
    'EVENT_RESET', 'EVENT_TICK', 'EVENT_PAUSE', 'EVENT_GAME_OVER',
    'Snake',
    'GameState',
]
