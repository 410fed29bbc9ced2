"""
Tests for the Pillow frame renderer.
"""

import warnings

import pytest

from snakegame.domain import Snake, GameState, WALL
from snakegame.services.frame_renderer import FrameRenderer, ColorScheme


def make_state(**overrides) -> GameState:
    params = dict(
        snake=Snake([(1, 1), (2, 1), (3, 1), (4, 1)]),
        food=(8, 8),
        grid_size=10,
        ticks_per_second=9,
    )
    params.update(overrides)
    return GameState(**params)


def cell_center(renderer, cell):
    x, y = cell
    cs = renderer.cell_size
    # Sample just off center so the head's eyes are not hit
    return x * cs + cs // 2, y * cs + cs - 5


def is_close(pixel, color, tolerance=30):
    return all(abs(a - b) <= tolerance for a, b in zip(pixel, color))


class TestFrameRenderer:
    """Tests for FrameRenderer.render()."""

    def test_image_size_and_mode(self):
        """The frame is grid_size * cell_size square, RGB."""
        renderer = FrameRenderer(cell_size=16)
        img = renderer.render(make_state())
        assert img.size == (160, 160)
        assert img.mode == "RGB"

    def test_head_and_food_colors(self):
        """Head and food cells carry their colors."""
        renderer = FrameRenderer(cell_size=20)
        img = renderer.render(make_state())

        assert is_close(img.getpixel(cell_center(renderer, (4, 1))), ColorScheme.SNAKE)
        assert is_close(img.getpixel(cell_center(renderer, (8, 8))), ColorScheme.FOOD[:3])

    def test_tail_is_fainter_than_head(self):
        """The body fades toward the tail."""
        renderer = FrameRenderer(cell_size=20)
        img = renderer.render(make_state())

        tail = img.getpixel(cell_center(renderer, (1, 1)))
        head = img.getpixel(cell_center(renderer, (4, 1)))
        assert sum(tail) < sum(head)

    def test_paused_veil_darkens_board(self):
        """Paused frames are darker than running ones."""
        renderer = FrameRenderer(cell_size=20)
        running = renderer.render(make_state())
        paused = renderer.render(make_state(paused=True))

        point = cell_center(renderer, (4, 1))
        assert sum(paused.getpixel(point)) < sum(running.getpixel(point))

    def test_game_over_panel_optional(self):
        """The game-over veil is only drawn when enabled."""
        state = make_state(game_over=True, game_over_reason=WALL)
        point = cell_center(FrameRenderer(cell_size=20), (4, 1))

        plain = FrameRenderer(cell_size=20).render(state)
        with_panel = FrameRenderer(cell_size=20, draw_game_over=True).render(state)

        assert sum(with_panel.getpixel(point)) < sum(plain.getpixel(point))

    def test_single_cell_snake_and_no_food(self):
        """Edge shapes still render."""
        img = FrameRenderer(cell_size=12).render(make_state(snake=Snake([(0, 0)]), food=None))
        assert img.size == (120, 120)

    def test_render_uses_no_deprecated_fromarray_mode(self):
        """The gradient is built without the deprecated fromarray mode argument."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            FrameRenderer(cell_size=12).render(make_state())

        messages = [str(w.message) for w in caught if issubclass(w.category, DeprecationWarning)]
        assert not [m for m in messages if "mode" in m]

    def test_tiny_cells_are_rejected(self):
        """Cells too small for the 2px inset raise ValueError up front."""
        with pytest.raises(ValueError):
            FrameRenderer(cell_size=3)
