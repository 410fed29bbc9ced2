"""
Score sharing.

Copying to a clipboard is best effort: when it fails the text goes to a
manual-copy fallback instead, and the game itself is never affected.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


def share_text(score: int, best: int) -> str:
    return f"I scored {score} in Snake! \U0001F40D (Best: {best})"


def share_score(
    score: int,
    best: int,
    copy: Callable[[str], None],
    fallback: Callable[[str], None]
) -> bool:
    """
    Copy the share text, falling back to a manual-copy prompt.

    Args:
        score: current score
        best: best score
        copy: callable that puts text on the clipboard; raises on failure
        fallback: callable that shows the text for manual copying

    Returns:
        True if the clipboard copy succeeded, False if the fallback was used.
    """
    text = share_text(score, best)
    try:
        copy(text)
        logger.info("Share text copied to clipboard")
        return True
    except Exception as e:
        logger.warning(f"Clipboard copy failed, showing text instead: {e}")
        fallback(text)
        return False
