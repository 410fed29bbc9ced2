"""
GameState entity - the explicit state of one game.
"""

from typing import List, Tuple, Optional

from .constants import RIGHT
from .snake import Snake


class GameState:
    """
    The state of a game, owned by a single SnakeEngine.

    Attributes:
        snake: the Snake entity (tail first, head last)
        direction: (dx, dy) applied on the current tick
        pending_direction: (dx, dy) requested by input, committed on the next tick
        food: (x, y) of the food cell, or None when none could be placed
        score: apples eaten in this game
        ticks_per_second: simulation speed, derived from score
        paused: whether ticks are suspended
        game_over: whether the game has ended
        game_over_reason: 'wall', 'self', 'win' or None
        grid_size: cells per side of the board
        best_score: best score across games, as known to the engine
        tick_count: number of simulated ticks since the last reset
    """

    def __init__(
        self,
        snake: Snake,
        food: Optional[Tuple[int, int]],
        grid_size: int,
        ticks_per_second: int,
        direction: Tuple[int, int] = RIGHT,
        pending_direction: Tuple[int, int] = RIGHT,
        score: int = 0,
        paused: bool = False,
        game_over: bool = False,
        game_over_reason: Optional[str] = None,
        best_score: int = 0,
        tick_count: int = 0
    ):
        self.snake = snake
        self.direction = direction
        self.pending_direction = pending_direction
        self.food = food
        self.score = score
        self.ticks_per_second = ticks_per_second
        self.paused = paused
        self.game_over = game_over
        self.game_over_reason = game_over_reason
        self.grid_size = grid_size
        self.best_score = best_score
        self.tick_count = tick_count

    @property
    def running(self) -> bool:
        return not self.paused and not self.game_over

    def snapshot(self) -> "GameState":
        """Return an independent copy that collaborators may keep."""
        return GameState(
            snake=self.snake.copy(),
            food=self.food,
            grid_size=self.grid_size,
            ticks_per_second=self.ticks_per_second,
            direction=self.direction,
            pending_direction=self.pending_direction,
            score=self.score,
            paused=self.paused,
            game_over=self.game_over,
            game_over_reason=self.game_over_reason,
            best_score=self.best_score,
            tick_count=self.tick_count
        )

    def board_rows(self) -> List[str]:
        """
        Returns the board as one string per row, top row first:
        . = empty space
        * = food
        o = snake body
        @ = snake head
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = '*'

        positions = list(self.snake.positions)
        for x, y in positions[:-1]:
            board[y][x] = 'o'
        if positions:
            hx, hy = positions[-1]
            board[hy][hx] = '@'

        return [' '.join(row) for row in board]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with row labels on the
        left and x-axis labels at the bottom. (0,0) is the top left.
        """
        result = [f"{y:2d} {row}" for y, row in enumerate(self.board_rows())]
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, food={self.food}, "
            f"length={len(self.snake)}, score={self.score}, "
            f"paused={self.paused}, game_over={self.game_over}>"
        )
