"""
Touch input - on-screen D-pad buttons and swipe gestures.
"""

import math
from typing import Dict, Optional, Tuple

from ..domain.constants import UP, DOWN, LEFT, RIGHT
from .base import Player


DPAD_DIRECTIONS: Dict[str, Tuple[int, int]] = {
    'up': UP,
    'down': DOWN,
    'left': LEFT,
    'right': RIGHT,
}


class DPadInput(Player):
    """On-screen direction buttons identified by name."""

    def press(self, button: str) -> bool:
        direction = DPAD_DIRECTIONS.get(button)
        if direction is None:
            return False
        return self.steer(direction)


class SwipeDetector(Player):
    """
    Turns a touch start/end pair into a direction.

    A swipe counts only if it travels at least `min_distance` pixels within
    `max_duration_ms`; the dominant axis decides the direction.
    """

    def __init__(self, engine, min_distance: float = 24, max_duration_ms: float = 1000):
        super().__init__(engine)
        self.min_distance = min_distance
        self.max_duration_ms = max_duration_ms
        self._start: Optional[Tuple[float, float, float]] = None

    @classmethod
    def from_config(cls, engine, config) -> "SwipeDetector":
        return cls(
            engine,
            min_distance=config.swipe_min_distance,
            max_duration_ms=config.swipe_max_duration_ms
        )

    def touch_start(self, x: float, y: float, timestamp_ms: float) -> None:
        self._start = (x, y, timestamp_ms)

    def touch_end(self, x: float, y: float, timestamp_ms: float) -> Optional[Tuple[int, int]]:
        """
        Finish a gesture.

        Returns:
            The direction requested from the engine, or None if the gesture
            was too short, too slow, or had no matching start.
        """
        if self._start is None:
            return None
        sx, sy, started = self._start
        self._start = None

        dx = x - sx
        dy = y - sy
        if math.hypot(dx, dy) < self.min_distance or timestamp_ms - started > self.max_duration_ms:
            return None

        if abs(dx) > abs(dy):
            direction = RIGHT if dx > 0 else LEFT
        else:
            direction = DOWN if dy > 0 else UP

        self.steer(direction)
        return direction
