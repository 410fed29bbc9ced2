"""
Keyboard input - maps key names to engine intents.
"""

from typing import Dict, Tuple

from ..domain.constants import UP, DOWN, LEFT, RIGHT
from .base import Player


KEY_DIRECTIONS: Dict[str, Tuple[int, int]] = {
    'arrowup': UP, 'w': UP,
    'arrowdown': DOWN, 's': DOWN,
    'arrowleft': LEFT, 'a': LEFT,
    'arrowright': RIGHT, 'd': RIGHT,
}

PAUSE_KEYS = {' ', 'space'}
RESET_KEYS = {'r'}


class KeyboardInput(Player):
    """Arrow keys / WASD steer, Space toggles pause, R restarts."""

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key press.

        Args:
            key: key name, case-insensitive ('ArrowUp', 'w', ' ', 'R', ...)

        Returns:
            True if the key is bound to an action (the caller should swallow
            the event), False otherwise.
        """
        k = key.lower()
        if k in KEY_DIRECTIONS:
            self.steer(KEY_DIRECTIONS[k])
        elif k in PAUSE_KEYS:
            self.engine.toggle_pause()
        elif k in RESET_KEYS:
            self.engine.reset()
        else:
            return False
        return True
