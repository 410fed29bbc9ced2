"""
HUD and overlay view model.

Turns engine snapshots into the strings a front end shows (score, best,
speed, pause button, overlay panel) and maps overlay buttons back to engine
intents. Front ends only have to draw what HudView says.
"""

from dataclasses import dataclass
from typing import Optional

from ..domain.constants import WALL, SELF, WIN
from ..domain.game_state import GameState


@dataclass
class OverlayView:
    """Panel shown over the board when the game is paused or over."""

    title: str
    text: str
    primary_label: str
    secondary_label: str


@dataclass
class HudView:
    score: int
    best: int
    speed_multiplier: float
    speed_label: str
    pause_label: str
    paused: bool
    game_over: bool
    game_over_reason: Optional[str]
    overlay: Optional[OverlayView]

    @classmethod
    def from_state(cls, state: GameState, base_tps: int) -> "HudView":
        multiplier = state.ticks_per_second / base_tps
        return cls(
            score=state.score,
            best=state.best_score,
            speed_multiplier=multiplier,
            speed_label=format_speed(multiplier),
            pause_label='Resume' if state.paused else 'Pause',
            paused=state.paused,
            game_over=state.game_over,
            game_over_reason=state.game_over_reason,
            overlay=overlay_for(state)
        )


def format_speed(multiplier: float) -> str:
    """Format a speed multiplier with two decimals, dropping a trailing '.00'."""
    text = f"{multiplier:.2f}"
    if text.endswith('.00'):
        text = text[:-3]
    return text + 'x'


def overlay_for(state: GameState) -> Optional[OverlayView]:
    """Return the overlay for the state, or None while the game is running."""
    if state.game_over:
        if state.game_over_reason == WIN:
            return OverlayView(
                'You Win!',
                'No space left to spawn food. Press R to restart.',
                'Restart',
                'Close'
            )
        if state.game_over_reason == WALL:
            title, reason = 'Crashed!', 'You hit the wall.'
        elif state.game_over_reason == SELF:
            title, reason = 'Oops!', 'You ran into your tail.'
        else:
            title, reason = 'Game Over', 'The game has ended.'
        return OverlayView(title, f"{reason} Final score: {state.score}.", 'Restart', 'Close')

    if state.paused:
        return OverlayView('Paused', 'Press Space (or Resume) to continue.', 'Resume', 'Restart')

    return None


# ----------------------------------------------------------------------
# Overlay and board intents
# ----------------------------------------------------------------------

def press_primary(engine) -> None:
    """Primary overlay button: restart a finished game, otherwise resume."""
    if engine.state.game_over:
        engine.reset()
    else:
        engine.resume()


def press_secondary(engine) -> None:
    """Secondary overlay button always restarts."""
    engine.reset()


def click_backdrop(engine) -> None:
    """Clicking outside the overlay panel resumes a paused game."""
    if not engine.state.game_over:
        engine.resume()


def click_board(engine) -> None:
    """Tapping the board toggles pause while the game is not over."""
    if not engine.state.game_over:
        engine.toggle_pause()
