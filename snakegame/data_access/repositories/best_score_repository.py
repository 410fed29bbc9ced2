"""
Repository for the persisted best score.
"""

from datetime import datetime, timezone
from typing import Optional

from .base import BaseRepository


class BestScoreRepository(BaseRepository):
    """Reads and writes best scores keyed by name (one row per key)."""

    def get_best_score(self, key: str) -> Optional[int]:
        """
        Return the stored best score for key, or None if nothing is stored.
        """
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT score FROM best_scores WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["score"] if row else None

    def save_best_score(self, key: str, score: int) -> int:
        """
        Store score for key unless a higher value is already stored.

        Returns:
            The value stored after the write.
        """
        if score < 0:
            raise ValueError(f"Best score must be non-negative, got {score}.")

        now = datetime.now(timezone.utc).isoformat()
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO best_scores (key, score, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    score = MAX(best_scores.score, excluded.score),
                    updated_at = excluded.updated_at
                """,
                (key, score, now)
            )
            cursor.execute("SELECT score FROM best_scores WHERE key = ?", (key,))
            return cursor.fetchone()["score"]

    def delete_best_score(self, key: str) -> bool:
        """Remove the stored value for key. Returns True if a row was deleted."""
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM best_scores WHERE key = ?", (key,))
            return cursor.rowcount > 0
