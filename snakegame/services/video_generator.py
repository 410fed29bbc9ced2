"""
Video Generation Service for Snake games

This service records a game to MP4 by:
1. Driving the engine through the fixed-timestep scheduler on a simulated clock
2. Rendering one frame per scheduler callback using FrameRenderer (Pillow)
3. Encoding frames to video using MoviePy/FFmpeg
"""

import os
import logging
import tempfile
from typing import List, Optional

import numpy as np
from moviepy import ImageSequenceClip

from ..scheduler import FixedTimestepScheduler
from .frame_renderer import FrameRenderer, CELL_SIZE

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 30
DEFAULT_MAX_SECONDS = 60.0
DEFAULT_HOLD_SECONDS = 1.5  # Keep the final frame on screen after game over


class SnakeVideoGenerator:
    """Generate MP4 videos from games driven by the scheduler"""

    def __init__(
        self,
        fps: int = DEFAULT_FPS,
        cell_size: int = CELL_SIZE,
        renderer: Optional[FrameRenderer] = None
    ):
        self.fps = fps
        self.renderer = renderer or FrameRenderer(cell_size=cell_size, draw_game_over=True)

    def capture_frames(
        self,
        engine,
        max_seconds: float = DEFAULT_MAX_SECONDS,
        hold_seconds: float = DEFAULT_HOLD_SECONDS
    ) -> List[np.ndarray]:
        """
        Run the engine in simulated real time and collect one frame per callback.

        Args:
            engine: a SnakeEngine, already steered by whatever input source
                the caller attached
            max_seconds: simulated duration cap
            hold_seconds: how long to keep recording after the game ends

        Returns:
            List of RGB frames as numpy arrays
        """
        frames: List[np.ndarray] = []
        scheduler = FixedTimestepScheduler(
            engine,
            render=lambda state: frames.append(np.array(self.renderer.render(state)))
        )

        frame_ms = 1000 / self.fps
        max_frames = int(max_seconds * self.fps)
        hold_frames = int(hold_seconds * self.fps)
        frames_after_end = 0

        for i in range(max_frames):
            scheduler.frame(i * frame_ms)
            if engine.state.game_over:
                frames_after_end += 1
                if frames_after_end > hold_frames:
                    break

            if i % (self.fps * 10) == 0:
                logger.info(
                    f"Captured {len(frames)} frames (score {engine.state.score}, "
                    f"{engine.state.ticks_per_second} ticks/s)"
                )

        scheduler.detach()
        logger.info(f"Captured {len(frames)} frames, final score {engine.state.score}")
        return frames

    def generate_video(self, frames: List[np.ndarray], output_path: Optional[str] = None) -> str:
        """
        Encode frames to an MP4 file.

        Args:
            frames: RGB frames as numpy arrays
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        if not frames:
            raise ValueError("Cannot create a video without frames.")

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), "snake_game.mp4")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"Encoding {len(frames)} frames at {self.fps} fps...")
        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path

    def record(
        self,
        engine,
        output_path: Optional[str] = None,
        max_seconds: float = DEFAULT_MAX_SECONDS
    ) -> str:
        """Capture a game and encode it in one go. Returns the video path."""
        frames = self.capture_frames(engine, max_seconds=max_seconds)
        return self.generate_video(frames, output_path=output_path)
