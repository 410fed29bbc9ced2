"""
Tests for the fixed-timestep scheduler.
"""

import random
from unittest.mock import MagicMock

from snakegame.engine import SnakeEngine
from snakegame.scheduler import FixedTimestepScheduler


class StubEngine:
    """Counts ticks; optionally changes speed after a number of ticks."""

    def __init__(self, ticks_per_second=8, speed_up_after=None, faster_tps=None):
        self.ticks_per_second = ticks_per_second
        self.speed_up_after = speed_up_after
        self.faster_tps = faster_tps
        self.ticks = 0
        self.listeners = []

    def add_listener(self, listener):
        self.listeners.append(listener)

    def remove_listener(self, listener):
        self.listeners.remove(listener)

    def get_current_state(self):
        return {"ticks": self.ticks}

    def tick(self):
        self.ticks += 1
        if self.speed_up_after is not None and self.ticks >= self.speed_up_after:
            self.ticks_per_second = self.faster_tps
        return True


class TestFrame:
    """Tests for FixedTimestepScheduler.frame()."""

    def test_first_frame_counts_as_zero_elapsed(self):
        """A large first timestamp does not produce a burst of ticks."""
        engine = StubEngine()
        scheduler = FixedTimestepScheduler(engine)

        assert scheduler.frame(123456.0) == 0
        assert engine.ticks == 0
        assert scheduler.accumulator == 0.0

    def test_one_second_at_eight_tps(self):
        """A whole second produces eight ticks at 8 ticks per second."""
        engine = StubEngine(ticks_per_second=8)
        scheduler = FixedTimestepScheduler(engine)

        scheduler.frame(0)
        assert scheduler.frame(1000) == 8
        assert engine.ticks == 8

    def test_jittery_frames_tick_the_right_total(self):
        """Uneven callbacks still add up to the expected number of ticks."""
        engine = StubEngine(ticks_per_second=8)
        scheduler = FixedTimestepScheduler(engine)

        counts = [scheduler.frame(ts) for ts in (0, 50, 100, 200, 260, 1010)]

        assert counts == [0, 0, 0, 1, 1, 6]
        assert engine.ticks == 8

    def test_small_frames_accumulate(self):
        """Frames shorter than a step carry their time forward."""
        engine = StubEngine(ticks_per_second=8)
        scheduler = FixedTimestepScheduler(engine)

        scheduler.frame(0)
        assert scheduler.frame(60) == 0
        assert scheduler.frame(130) == 1
        assert 0 < scheduler.accumulator < 0.125

    def test_speed_up_applies_mid_drain(self):
        """A speed change during a frame shortens the remaining steps."""
        engine = StubEngine(ticks_per_second=4, speed_up_after=1, faster_tps=8)
        scheduler = FixedTimestepScheduler(engine)

        scheduler.frame(0)
        # 0.5s: one 0.25s step, then two 0.125s steps
        assert scheduler.frame(500) == 3

    def test_render_called_once_per_frame(self):
        """Render runs once per callback however many ticks happened."""
        engine = StubEngine(ticks_per_second=8)
        render = MagicMock()
        scheduler = FixedTimestepScheduler(engine, render=render)

        scheduler.frame(0)
        scheduler.frame(10)
        scheduler.frame(1010)

        assert render.call_count == 3
        render.assert_called_with({"ticks": 8})

    def test_reset_drops_accumulated_time(self):
        """After reset() the next frame counts as zero elapsed."""
        engine = StubEngine(ticks_per_second=8)
        scheduler = FixedTimestepScheduler(engine)

        scheduler.frame(0)
        scheduler.frame(100)
        scheduler.reset()

        assert scheduler.frame(5000) == 0
        assert engine.ticks == 0


class TestWithEngine:
    """Scheduler driving a real SnakeEngine."""

    def test_engine_reset_resets_scheduler(self):
        """A game restart clears the scheduler's timing."""
        engine = SnakeEngine(rng=random.Random(1))
        scheduler = FixedTimestepScheduler(engine)

        scheduler.frame(0)
        scheduler.frame(100)
        engine.reset()

        assert scheduler.accumulator == 0.0
        assert scheduler.last_timestamp is None
        scheduler.frame(10000)
        assert engine.state.tick_count == 0

    def test_paused_engine_is_still_driven(self):
        """While paused the scheduler keeps calling tick(), which does nothing."""
        engine = SnakeEngine(rng=random.Random(1))
        engine.toggle_pause()
        scheduler = FixedTimestepScheduler(engine)

        scheduler.frame(0)
        calls = scheduler.frame(1010)

        assert calls == 9
        assert engine.state.tick_count == 0

    def test_running_engine_moves_at_base_speed(self):
        """Half a second at 9 ticks per second moves the snake four cells."""
        engine = SnakeEngine(rng=random.Random(1))
        engine.state.food = (0, 0)
        scheduler = FixedTimestepScheduler(engine)

        scheduler.frame(0)
        scheduler.frame(500)

        assert engine.state.tick_count == 4
        assert engine.state.snake.head == (17, 12)

    def test_detach_stops_listening(self):
        """A detached scheduler ignores engine resets."""
        engine = SnakeEngine(rng=random.Random(1))
        scheduler = FixedTimestepScheduler(engine)
        scheduler.frame(0)
        scheduler.detach()

        engine.reset()

        assert scheduler.last_timestamp == 0
