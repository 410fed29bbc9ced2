"""
Simulation engine for snakegame.

SnakeEngine owns the GameState and advances it one discrete tick at a time.
It never draws or reads devices: renderers, input sources, persistence and
the HUD talk to it through the small interfaces below.
"""

import logging
import random
from typing import Callable, List, Optional, Tuple

from .config import GameConfig
from .domain.constants import (
    RIGHT, VALID_MOVES,
    WALL, SELF, WIN,
    EVENT_RESET, EVENT_TICK, EVENT_PAUSE, EVENT_GAME_OVER,
)
from .domain.game_state import GameState
from .domain.snake import Snake

logger = logging.getLogger(__name__)

Listener = Callable[[str, GameState], None]


def speed_for_score(score: int, config: GameConfig) -> int:
    """
    Ticks per second for a given score.

    A step function: one extra tick per second every `speedup_every` points,
    clamped to [base_tps, max_tps].
    """
    increase = score // config.speedup_every
    return max(config.base_tps, min(config.max_tps, config.base_tps + increase))


class SnakeEngine:
    """
    Manages:
      - Board (grid_size x grid_size)
      - The snake and its two direction slots
      - Food placement
      - Score, best score and speed
      - Pause / game-over lifecycle

    Args:
        config: game constants (defaults to GameConfig())
        best_score_store: object with load_best_score() and save_best_score(score)
        rng: random.Random used for food placement
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        best_score_store=None,
        rng: Optional[random.Random] = None
    ):
        self.config = (config or GameConfig()).validate()
        self.best_score_store = best_score_store
        self.rng = rng or random.Random()
        self._listeners: List[Listener] = []

        self.best_score = self._load_best_score()
        self.state: GameState = self.reset()

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked as listener(event, snapshot)."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: str) -> None:
        if not self._listeners:
            return
        snapshot = self.state.snapshot()
        for listener in list(self._listeners):
            try:
                listener(event, snapshot)
            except Exception as e:
                logger.warning(f"Listener {listener!r} failed on '{event}': {e}")

    def _load_best_score(self) -> int:
        if self.best_score_store is None:
            return 0
        try:
            return int(self.best_score_store.load_best_score() or 0)
        except Exception as e:
            logger.warning(f"Could not load best score, starting from 0: {e}")
            return 0

    def _save_best_score(self) -> None:
        if self.best_score_store is None:
            return
        try:
            self.best_score_store.save_best_score(self.best_score)
        except Exception as e:
            # Storage problems never leak into the simulation
            logger.warning(f"Could not save best score {self.best_score}: {e}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _initial_state(self) -> GameState:
        grid = self.config.grid_size
        start_len = self.config.start_len

        # Start near center, moving right
        start_x = grid // 2 - start_len // 2
        start_y = grid // 2
        snake = Snake((start_x + i, start_y) for i in range(start_len))

        return GameState(
            snake=snake,
            food=None,
            grid_size=grid,
            ticks_per_second=self.config.base_tps,
            direction=RIGHT,
            pending_direction=RIGHT,
            best_score=self.best_score
        )

    def reset(self) -> GameState:
        """
        Start a fresh game: centered snake moving right, score 0, base speed,
        cleared pause/game-over flags and newly placed food.
        """
        self.state = self._initial_state()
        self._place_initial_food()
        self._notify(EVENT_RESET)
        return self.state

    def get_current_state(self) -> GameState:
        """Return a snapshot of the current game as a GameState."""
        return self.state.snapshot()

    @property
    def ticks_per_second(self) -> int:
        return self.state.ticks_per_second

    def toggle_pause(self) -> bool:
        """Flip the paused flag. A finished game cannot be paused."""
        if self.state.game_over:
            return False
        self.state.paused = not self.state.paused
        self._notify(EVENT_PAUSE)
        return True

    def resume(self) -> bool:
        """Clear the paused flag unless the game is over."""
        if self.state.game_over:
            return False
        self.state.paused = False
        self._notify(EVENT_PAUSE)
        return True

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_direction(self, dx: int, dy: int) -> bool:
        """
        Request a turn for the next tick.

        Args:
            dx, dy: a unit vector, one of UP, DOWN, LEFT, RIGHT

        Returns:
            False if the request reverses the current direction and was
            ignored, True if it became the pending direction.
        """
        requested = (dx, dy)
        if requested not in VALID_MOVES:
            raise ValueError(f"Direction must be a unit vector, got {requested}.")

        cx, cy = self.state.direction
        if requested == (-cx, -cy):
            return False

        self.state.pending_direction = requested
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def _sample_free_cell(self) -> Optional[Tuple[int, int]]:
        """Rejection-sample a cell off the snake, giving up after the configured attempts."""
        grid = self.config.grid_size
        occupied = set(self.state.snake.positions)

        for _ in range(self.config.food_spawn_attempts):
            cell = (self.rng.randint(0, grid - 1), self.rng.randint(0, grid - 1))
            if cell not in occupied:
                return cell
        return None

    def _place_initial_food(self) -> Tuple[int, int]:
        # A fresh board always has free cells, so a miss picks one directly
        cell = self._sample_free_cell()
        if cell is None:
            grid = self.config.grid_size
            occupied = set(self.state.snake.positions)
            free = [(x, y) for y in range(grid) for x in range(grid) if (x, y) not in occupied]
            cell = self.rng.choice(free)
        self.state.food = cell
        return cell

    def spawn_food(self) -> Optional[Tuple[int, int]]:
        """
        Place food on a random cell not covered by the snake.

        Rejection sampling is capped by config.food_spawn_attempts; when no
        free cell is found the board is considered full and the game is won.
        """
        cell = self._sample_free_cell()
        self.state.food = cell
        if cell is None:
            self._end_game(WIN)
        return cell

    def tick(self) -> bool:
        """
        Advance the game by exactly one step:
          1) Commit the pending direction
          2) Compute the next head
          3) Wall check
          4) Self-collision check (a vacating tail cell is free)
          5) Move the head
          6) Eat and grow, or drop the tail
          7) Notify listeners

        Returns:
            True if a step was simulated, False if paused or over.
        """
        state = self.state
        if not state.running:
            return False

        state.direction = state.pending_direction
        state.tick_count += 1

        hx, hy = state.snake.head
        dx, dy = state.direction
        next_head = (hx + dx, hy + dy)
        grid = state.grid_size

        # Wall collision
        nx, ny = next_head
        if nx < 0 or nx >= grid or ny < 0 or ny >= grid:
            self._end_game(WALL)
            return True

        # Tail collision (moving into the cell the tail vacates is allowed)
        eats = next_head == state.food
        positions = state.snake.positions
        body = list(positions) if eats else list(positions)[1:]
        if next_head in body:
            self._end_game(SELF)
            return True

        positions.append(next_head)

        if eats:
            state.score += 1
            state.ticks_per_second = speed_for_score(state.score, self.config)
            if state.score > self.best_score:
                self.best_score = state.score
                state.best_score = self.best_score
                logger.debug(f"New best score: {self.best_score}")
                self._save_best_score()
            self.spawn_food()
        else:
            positions.popleft()

        if not state.game_over:
            self._notify(EVENT_TICK)
        return True

    def _end_game(self, reason: str) -> None:
        state = self.state
        state.game_over = True
        state.game_over_reason = reason
        logger.info(f"Game over ({reason}). Final score: {state.score}")
        self._notify(EVENT_GAME_OVER)
