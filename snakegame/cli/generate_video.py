#!/usr/bin/env python3
"""
CLI tool to record an autoplayed Snake game to MP4

Usage:
    snakegame-video
    snakegame-video --output ./snake.mp4

Examples:
    # Reproducible recording
    snakegame-video --seed 42 --output ./snake_42.mp4

    # Custom video settings
    snakegame-video --fps 60 --cell-size 32 --max-seconds 120
"""

import argparse
import logging
import random
import sys

from dotenv import load_dotenv

from ..config import GameConfig
from ..engine import SnakeEngine
from ..players import RandomPlayer
from ..services.video_generator import (
    SnakeVideoGenerator,
    DEFAULT_FPS,
    DEFAULT_MAX_SECONDS,
)
from ..services.frame_renderer import CELL_SIZE, MIN_CELL_SIZE

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Record an autoplayed Snake game to MP4',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--output', '-o', type=str, default='snake_game.mp4',
                        help='Output video path (default: snake_game.mp4)')
    parser.add_argument('--fps', type=int, default=DEFAULT_FPS,
                        help=f'Frames per second (default: {DEFAULT_FPS})')
    parser.add_argument('--cell-size', type=int, default=CELL_SIZE,
                        help=f'Pixels per grid cell (default: {CELL_SIZE})')
    parser.add_argument('--max-seconds', type=float, default=DEFAULT_MAX_SECONDS,
                        help=f'Longest recording in seconds (default: {DEFAULT_MAX_SECONDS})')
    parser.add_argument('--grid-size', type=int, default=None,
                        help='Cells per side of the board (default: SNAKE_GRID_SIZE or 24)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for food placement and the autopilot')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args()
    if args.cell_size < MIN_CELL_SIZE:
        parser.error(f"--cell-size must be at least {MIN_CELL_SIZE}")

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = GameConfig.from_env(grid_size=args.grid_size)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    rng = random.Random(args.seed)
    engine = SnakeEngine(config=config, rng=rng)
    RandomPlayer(engine, rng=rng).attach()

    generator = SnakeVideoGenerator(fps=args.fps, cell_size=args.cell_size)

    try:
        logger.info(f"Recording a {config.grid_size}x{config.grid_size} game to {args.output}...")
        video_path = generator.record(engine, output_path=args.output, max_seconds=args.max_seconds)
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)

    state = engine.state
    print("\n✓ Video generated successfully!")
    print(f"  Path: {video_path}")
    print(f"  Score: {state.score}  Ticks: {state.tick_count}  Outcome: {state.game_over_reason or 'time limit'}")


if __name__ == "__main__":
    main()
