"""
Best-score persistence used by the engine.

BestScoreStore is the persistence collaborator: the engine calls
load_best_score() once at startup and save_best_score() on every
improvement. Storage work is delegated to BestScoreRepository.
"""

import logging
from typing import Optional

from .repositories import BestScoreRepository

logger = logging.getLogger(__name__)

DEFAULT_KEY = 'snake_best'


class BestScoreStore:
    """
    Args:
        repo: repository to use (defaults to one on the configured database)
        key: row name, so several boards can keep separate records
    """

    def __init__(self, repo: Optional[BestScoreRepository] = None, key: str = DEFAULT_KEY):
        self.repo = repo or BestScoreRepository()
        self.key = key

    def load_best_score(self) -> int:
        """Return the stored best score, 0 if none was ever saved."""
        score = self.repo.get_best_score(self.key)
        return score if score is not None else 0

    def save_best_score(self, score: int) -> None:
        stored = self.repo.save_best_score(self.key, score)
        logger.debug(f"Best score for '{self.key}' is now {stored}")

    def clear(self) -> bool:
        return self.repo.delete_best_score(self.key)
