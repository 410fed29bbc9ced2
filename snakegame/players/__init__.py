"""
Input sources for snakegame.

This module contains the adapters that turn device input (keys, buttons,
gestures) or an autopilot into engine intents.
"""

from .base import Player
from .keyboard import KeyboardInput, KEY_DIRECTIONS
from .touch import DPadInput, SwipeDetector, DPAD_DIRECTIONS
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardInput',
    'KEY_DIRECTIONS',
    'DPadInput',
    'SwipeDetector',
    'DPAD_DIRECTIONS',
    'RandomPlayer',
]
