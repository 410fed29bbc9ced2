"""
Tests for the video generator.
"""

import random
from unittest.mock import patch

import numpy as np
import pytest

from snakegame.config import GameConfig
from snakegame.engine import SnakeEngine
from snakegame.players import RandomPlayer
from snakegame.services.video_generator import SnakeVideoGenerator


def make_engine(seed=1, **config):
    engine = SnakeEngine(config=GameConfig(**config), rng=random.Random(seed))
    RandomPlayer(engine, rng=random.Random(seed)).attach()
    return engine


class TestCaptureFrames:
    """Tests for SnakeVideoGenerator.capture_frames()."""

    def test_one_frame_per_callback(self):
        """Every simulated callback renders exactly one frame."""
        engine = make_engine(grid_size=12)
        generator = SnakeVideoGenerator(fps=10, cell_size=8)

        frames = generator.capture_frames(engine, max_seconds=2)

        assert len(frames) == 20
        assert frames[0].shape == (96, 96, 3)
        assert frames[0].dtype == np.uint8

    def test_engine_advances_at_its_own_rate(self):
        """Two seconds at 9 ticks per second is about 18 ticks, however many frames."""
        engine = make_engine(grid_size=24)
        generator = SnakeVideoGenerator(fps=10, cell_size=8)

        generator.capture_frames(engine, max_seconds=2)

        if not engine.state.game_over:
            assert 16 <= engine.state.tick_count <= 18

    def test_stops_after_game_over(self):
        """Recording ends shortly after the game is over."""
        engine = make_engine(grid_size=12)
        engine.state.game_over = True
        generator = SnakeVideoGenerator(fps=10, cell_size=8)

        frames = generator.capture_frames(engine, max_seconds=30, hold_seconds=0.5)

        assert len(frames) == 6

    def test_scheduler_detached_afterwards(self):
        """Only the autopilot listener remains on the engine."""
        engine = make_engine(grid_size=12)
        listeners_before = len(engine._listeners)

        SnakeVideoGenerator(fps=10, cell_size=8).capture_frames(engine, max_seconds=1)

        assert len(engine._listeners) == listeners_before


class TestGenerateVideo:
    """Tests for SnakeVideoGenerator.generate_video()."""

    def test_encodes_with_moviepy(self, tmp_path):
        """Frames are handed to ImageSequenceClip and written as MP4."""
        frames = [np.zeros((16, 16, 3), dtype=np.uint8) for _ in range(3)]
        output = str(tmp_path / "out" / "game.mp4")

        with patch("snakegame.services.video_generator.ImageSequenceClip") as clip_cls:
            path = SnakeVideoGenerator(fps=5).generate_video(frames, output_path=output)

        assert path == output
        clip_cls.assert_called_once_with(frames, fps=5)
        clip_cls.return_value.write_videofile.assert_called_once_with(
            output, codec='libx264', audio=False, logger=None
        )
        assert (tmp_path / "out").is_dir()

    def test_no_frames_raises(self):
        """An empty recording is an error."""
        with pytest.raises(ValueError):
            SnakeVideoGenerator().generate_video([])

    def test_record(self, tmp_path):
        """record() captures and encodes in one call."""
        engine = make_engine(grid_size=12)
        output = str(tmp_path / "game.mp4")

        with patch("snakegame.services.video_generator.ImageSequenceClip") as clip_cls:
            path = SnakeVideoGenerator(fps=10, cell_size=8).record(engine, output_path=output, max_seconds=1)

        assert path == output
        frames = clip_cls.call_args[0][0]
        assert len(frames) == 10
