"""
Repository classes for database access.
"""

from .base import BaseRepository
from .best_score_repository import BestScoreRepository

__all__ = [
    'BaseRepository',
    'BestScoreRepository',
]
