"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from tail at index 0 to head at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def copy(self) -> "Snake":
        return Snake(self.positions)

    def __repr__(self):
        return f"<Snake len={len(self.positions)} head={self.head}>"
