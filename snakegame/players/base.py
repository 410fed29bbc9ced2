"""
Base input source interface for the game engine.
"""

from typing import Tuple


class Player:
    """
    Base class/interface for anything that steers the snake.

    Input sources never touch game state directly: they only request turns,
    pauses and resets through the engine.
    """

    def __init__(self, engine):
        self.engine = engine

    def steer(self, direction: Tuple[int, int]) -> bool:
        """
        Request a turn.

        Returns:
            True if the engine accepted it as the pending direction.
        """
        dx, dy = direction
        return self.engine.set_direction(dx, dy)
