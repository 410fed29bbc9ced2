"""
Frame renderer for snakegame.

Draws a GameState onto a Pillow image:
- Dark diagonal gradient board with rounded corners
- Subtle grid
- Rounded food cell
- Snake fading from tail to head, head with eyes
- "Paused" veil, and optionally the game-over panel
"""

from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..domain.game_state import GameState
from .hud import overlay_for


CELL_SIZE = 20  # Size of each grid cell in pixels
MIN_CELL_SIZE = 5  # Cells are inset 2px per side, leaving at least 1px to draw


class ColorScheme:
    """Color configuration for the board"""

    PAGE = (11, 16, 32)
    BOARD_TOP = (18, 26, 51)
    BOARD_BOTTOM = (10, 14, 28)
    GRID_LINE = (255, 255, 255, 31)  # ~12% white
    FOOD = (70, 211, 154, 242)
    SNAKE = (122, 167, 255)
    EYE = (11, 16, 32, 230)
    VEIL = (0, 0, 0, 77)
    TEXT = (232, 236, 255, 255)
    TEXT_DIM = (232, 236, 255, 217)


def _rounded(draw: ImageDraw.ImageDraw, x: float, y: float, w: float, h: float, r: float, fill) -> None:
    radius = min(r, w / 2, h / 2)
    draw.rounded_rectangle([x, y, x + w, y + h], radius=radius, fill=fill)


class FrameRenderer:
    """Render GameState snapshots to RGB images."""

    def __init__(self, cell_size: int = CELL_SIZE, draw_game_over: bool = False):
        if cell_size < MIN_CELL_SIZE:
            raise ValueError(f"cell_size must be at least {MIN_CELL_SIZE}, got {cell_size}")
        self.cell_size = cell_size
        self.draw_game_over = draw_game_over

        # Try to load a font, fallback to default if not available
        try:
            self.font_large = ImageFont.truetype("DejaVuSans-Bold.ttf", 22)
            self.font_small = ImageFont.truetype("DejaVuSans.ttf", 14)
        except Exception:
            self.font_large = ImageFont.load_default()
            self.font_small = ImageFont.load_default()

    def board_size(self, state: GameState) -> Tuple[int, int]:
        side = state.grid_size * self.cell_size
        return side, side

    def _background(self, width: int, height: int) -> Image.Image:
        """Diagonal gradient from BOARD_TOP (top left) to BOARD_BOTTOM (bottom right)."""
        ys, xs = np.mgrid[0:height, 0:width]
        t = (xs + ys) / max(1, (width - 1) + (height - 1))
        top = np.array(ColorScheme.BOARD_TOP, dtype=np.float32)
        bottom = np.array(ColorScheme.BOARD_BOTTOM, dtype=np.float32)
        pixels = top + (bottom - top) * t[..., None]
        gradient = Image.fromarray(pixels.astype(np.uint8)).convert('RGBA')

        # Rounded board on the page color
        page = Image.new('RGBA', (width, height), ColorScheme.PAGE + (255,))
        mask = Image.new('L', (width, height), 0)
        _rounded(ImageDraw.Draw(mask), 0, 0, width - 1, height - 1, 18, 255)
        page.paste(gradient, (0, 0), mask)
        return page

    def render(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        width, height = self.board_size(state)
        cs = self.cell_size
        img = self._background(width, height)

        # Subtle grid
        layer = Image.new('RGBA', (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        for i in range(1, state.grid_size):
            p = i * cs
            draw.line([p, 0, p, height], fill=ColorScheme.GRID_LINE, width=1)
            draw.line([0, p, width, p], fill=ColorScheme.GRID_LINE, width=1)

        # Food
        if state.food is not None:
            fx, fy = state.food
            _rounded(draw, fx * cs + 2, fy * cs + 2, cs - 4, cs - 4, 10, ColorScheme.FOOD)

        # Snake, fading in from the tail
        positions = list(state.snake.positions)
        last = len(positions) - 1
        for i, (sx, sy) in enumerate(positions):
            is_head = i == last
            alpha = 0.98 if is_head else 0.30 + (i / last) * 0.65
            fill = ColorScheme.SNAKE + (int(alpha * 255),)
            _rounded(draw, sx * cs + 2, sy * cs + 2, cs - 4, cs - 4, 12 if is_head else 10, fill)

            if is_head:
                r = max(2, cs * 0.08)
                for ex in (sx * cs + cs * 0.30, sx * cs + cs * 0.62):
                    ey = sy * cs + cs * 0.32
                    draw.ellipse([ex - r, ey - r, ex + r, ey + r], fill=ColorScheme.EYE)

        img = Image.alpha_composite(img, layer)

        if state.paused and not state.game_over:
            img = self._draw_veil(img, 'Paused', 'Press Space to resume')
        elif state.game_over and self.draw_game_over:
            overlay = overlay_for(state)
            if overlay is not None:
                img = self._draw_veil(img, overlay.title, overlay.text)

        return img.convert('RGB')

    def _draw_veil(self, img: Image.Image, title: str, subtitle: str) -> Image.Image:
        width, height = img.size
        veil = Image.new('RGBA', (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(veil)
        _rounded(draw, 0, 0, width - 1, height - 1, 18, ColorScheme.VEIL)

        self._center_text(draw, width, height // 2 - 6, title, self.font_large, ColorScheme.TEXT)
        self._center_text(draw, width, height // 2 + 18, subtitle, self.font_small, ColorScheme.TEXT_DIM)
        return Image.alpha_composite(img, veil)

    def _center_text(self, draw, width: int, baseline_y: int, text: str, font, fill) -> None:
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text((width // 2 - text_width // 2, baseline_y - text_height), text, fill=fill, font=font)
