#!/usr/bin/env python3
"""
Play Snake in the terminal.

Usage:
    snakegame-play
    snakegame-play --grid-size 16 --db-path ./scores.db

Controls:
    Arrow keys / WASD   steer
    Space               pause / resume
    R                   restart
    C                   share score
    Q                   quit
"""

import argparse
import curses
import logging
import shutil
import subprocess
import sys
import time
from typing import List, Optional

from ..config import GameConfig
from ..data_access import BestScoreStore, BestScoreRepository
from ..domain.game_state import GameState
from ..engine import SnakeEngine
from ..players import KeyboardInput
from ..scheduler import FixedTimestepScheduler
from ..services.hud import HudView, press_primary, press_secondary
from ..services.share import share_score

logger = logging.getLogger(__name__)

FRAME_SECONDS = 1 / 60

CURSES_KEYS = {
    curses.KEY_UP: 'arrowup',
    curses.KEY_DOWN: 'arrowdown',
    curses.KEY_LEFT: 'arrowleft',
    curses.KEY_RIGHT: 'arrowright',
}

CLIPBOARD_COMMANDS = [
    ['pbcopy'],
    ['wl-copy'],
    ['xclip', '-selection', 'clipboard'],
]


def copy_to_clipboard(text: str) -> None:
    """Copy text using the first clipboard tool found on PATH."""
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            subprocess.run(command, input=text.encode('utf-8'), check=True, timeout=2)
            return
    raise RuntimeError("No clipboard tool found (tried pbcopy, wl-copy, xclip)")


class TerminalFrontEnd:
    """Curses renderer and input adapter around one engine."""

    def __init__(self, stdscr, engine: SnakeEngine):
        self.stdscr = stdscr
        self.engine = engine
        self.keyboard = KeyboardInput(engine)
        self.scheduler = FixedTimestepScheduler(engine, render=self.draw)
        self.message: Optional[str] = None

    def run(self) -> None:
        curses.curs_set(0)
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)

        while True:
            key = self.stdscr.getch()
            if key != -1 and not self.handle_key(key):
                break
            self.scheduler.frame(time.monotonic() * 1000)
            time.sleep(FRAME_SECONDS)

    def handle_key(self, key: int) -> bool:
        """Return False when the player asked to quit."""
        if key in CURSES_KEYS:
            self.keyboard.handle_key(CURSES_KEYS[key])
            return True
        if key in (10, 13, curses.KEY_ENTER):
            press_primary(self.engine)
            return True
        if not 0 <= key < 256:
            return True

        name = chr(key).lower()
        if name == 'q':
            return False
        if name == 'c':
            self.share()
        elif name == 'n':
            press_secondary(self.engine)
        else:
            self.keyboard.handle_key(name)
        return True

    def share(self) -> None:
        state = self.engine.state

        def show(text: str) -> None:
            self.message = f"Copy this text: {text}"

        if share_score(state.score, state.best_score, copy_to_clipboard, show):
            self.message = "Copied!"

    def draw(self, state: GameState) -> None:
        hud = HudView.from_state(state, self.engine.config.base_tps)
        lines: List[str] = [
            f"Score: {hud.score}  Best: {hud.best}  Speed: {hud.speed_label}  [Space] {hud.pause_label}",
        ]
        lines.extend(state.board_rows())

        if hud.overlay is not None:
            lines.append("")
            lines.append(f"{hud.overlay.title} {hud.overlay.text}")
            lines.append(f"[Enter] {hud.overlay.primary_label}  [N] {hud.overlay.secondary_label}")
        if self.message:
            lines.append(self.message)

        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        for row, line in enumerate(lines[:height]):
            try:
                self.stdscr.addstr(row, 0, line[:width - 1])
            except curses.error:
                # Writing the bottom-right cell raises; the text is still shown
                pass
        self.stdscr.refresh()


def main():
    parser = argparse.ArgumentParser(
        description='Play Snake in the terminal.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--grid-size', type=int, default=None,
                        help='Cells per side of the board (default: SNAKE_GRID_SIZE or 24)')
    parser.add_argument('--db-path', type=str, default=None,
                        help='SQLite file holding the best score (default: SNAKEGAME_DB_PATH)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Write logs to this file (the screen belongs to the game)')
    args = parser.parse_args()

    # Configure logging; without a log file, records are dropped so they
    # don't scribble over the curses screen
    if args.log_file:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            filename=args.log_file
        )
    else:
        logging.basicConfig(level=logging.INFO, handlers=[logging.NullHandler()])

    try:
        config = GameConfig.from_env(grid_size=args.grid_size)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    store = BestScoreStore(BestScoreRepository(args.db_path))
    engine = SnakeEngine(config=config, best_score_store=store)
    logger.info(f"Starting a {config.grid_size}x{config.grid_size} game, best score {engine.best_score}")

    curses.wrapper(lambda stdscr: TerminalFrontEnd(stdscr, engine).run())

    state = engine.state
    print(f"Final score: {state.score} (best: {engine.best_score})")


if __name__ == "__main__":
    main()
