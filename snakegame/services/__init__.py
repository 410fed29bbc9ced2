"""
Collaborator services for snakegame: HUD view model, sharing, rendering
and video recording.
"""

from .hud import HudView, OverlayView, format_speed, overlay_for
from .share import share_text, share_score

__all__ = [
    'HudView',
    'OverlayView',
    'format_speed',
    'overlay_for',
    'share_text',
    'share_score',
]
