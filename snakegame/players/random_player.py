"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional, Tuple

from ..domain.constants import (
    UP, DOWN, LEFT, RIGHT,
    EVENT_RESET, EVENT_TICK,
)
from ..domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a direction avoiding walls, reversals and its
    own body. It steers after every reset and tick, so the choice is pending
    by the time the next tick commits it.
    """

    def __init__(self, engine, rng: Optional[random.Random] = None):
        super().__init__(engine)
        self.rng = rng or random.Random()

    def attach(self) -> "RandomPlayer":
        self.engine.add_listener(self._on_engine_event)
        self.steer(self.get_move(self.engine.get_current_state()))
        return self

    def detach(self) -> None:
        self.engine.remove_listener(self._on_engine_event)

    def _on_engine_event(self, event: str, state: GameState) -> None:
        if event in (EVENT_RESET, EVENT_TICK):
            self.steer(self.get_move(state))

    def get_move(self, game_state: GameState) -> Tuple[int, int]:
        positions = list(game_state.snake.positions)
        head_x, head_y = positions[-1]
        cx, cy = game_state.direction

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move unless we eat)
        valid_moves: List[Tuple[int, int]] = []
        for move in (UP, DOWN, LEFT, RIGHT):
            dx, dy = move
            if (dx, dy) == (-cx, -cy):
                continue

            new_x, new_y = head_x + dx, head_y + dy
            if (new_x < 0 or new_x >= game_state.grid_size or
                    new_y < 0 or new_y >= game_state.grid_size):
                continue

            body = positions if (new_x, new_y) == game_state.food else positions[1:]
            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
