"""
Fixed-timestep scheduler.

Decouples the engine's tick rate from the host's render rate: elapsed time
from each render callback goes into an accumulator, and the engine ticks as
many times as whole steps fit, however jittery the callbacks are.
"""

from typing import Callable, Optional

from .domain.constants import EVENT_RESET
from .domain.game_state import GameState


class FixedTimestepScheduler:
    """
    Drives a SnakeEngine from timestamped render callbacks.

    Args:
        engine: the SnakeEngine to tick
        render: optional callable invoked once per frame with a state snapshot
    """

    def __init__(self, engine, render: Optional[Callable[[GameState], None]] = None):
        self.engine = engine
        self.render = render
        self.accumulator = 0.0
        self.last_timestamp: Optional[float] = None

        engine.add_listener(self._on_engine_event)

    def _on_engine_event(self, event: str, state: GameState) -> None:
        if event == EVENT_RESET:
            self.reset()

    def detach(self) -> None:
        """Stop listening to the engine."""
        self.engine.remove_listener(self._on_engine_event)

    def reset(self) -> None:
        """Drop accumulated time; the next frame counts as zero elapsed."""
        self.accumulator = 0.0
        self.last_timestamp = None

    def frame(self, timestamp_ms: float) -> int:
        """
        Handle one render callback.

        Args:
            timestamp_ms: host clock in milliseconds (monotonic)

        Returns:
            Number of engine ticks run during this frame.
        """
        if self.last_timestamp is None:
            self.last_timestamp = timestamp_ms
        elapsed = (timestamp_ms - self.last_timestamp) / 1000
        self.last_timestamp = timestamp_ms

        self.accumulator += elapsed

        ticks = 0
        # Step is re-read each pass so a speed-up applies mid-drain
        step = 1 / self.engine.ticks_per_second
        while self.accumulator >= step:
            self.engine.tick()
            self.accumulator -= step
            ticks += 1
            step = 1 / self.engine.ticks_per_second

        if self.render is not None:
            self.render(self.engine.get_current_state())

        return ticks
