"""
Database configuration and schema management for snakegame.

This module provides SQLite connection management with environment-aware
path selection and schema initialization.
"""

import os
import sqlite3
from typing import Optional

from dotenv import load_dotenv


def get_database_path(path: Optional[str] = None) -> str:
    """
    Determine the appropriate database path.

    Returns:
        Path to the SQLite database file.
        - explicit argument, if given
        - SNAKEGAME_DB_PATH, if set
        - ~/.snakegame/snakegame.db otherwise
    """
    if path:
        return path

    load_dotenv()
    env_path = os.getenv('SNAKEGAME_DB_PATH')
    if env_path:
        return env_path

    return os.path.join(os.path.expanduser('~'), '.snakegame', 'snakegame.db')


def get_connection(path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    db_path = get_database_path(path)
    directory = os.path.dirname(db_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(path: Optional[str] = None) -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection(path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS best_scores (
                key TEXT PRIMARY KEY,
                score INTEGER NOT NULL DEFAULT 0 CHECK(score >= 0),
                updated_at TEXT NOT NULL
            )
        """)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()
        conn.close()
