"""
Data access layer for snakegame.

This module provides the persistence collaborator for the best score,
backed by SQLite through the repository pattern.
"""

from .best_score import BestScoreStore, DEFAULT_KEY
from .repositories import BaseRepository, BestScoreRepository

__all__ = [
    'BestScoreStore',
    'DEFAULT_KEY',
    'BaseRepository',
    'BestScoreRepository',
]
