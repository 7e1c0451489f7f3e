"""
SQLite database integration and simple migration system.

Each service owns its own SQLite file.  This module provides helpers
for resolving the file path (``get_database_path``), opening a
connection (``get_connection``), a cursor context manager that commits
on success (``get_cursor``) and a migration runner (``init_db``) that
records applied versions in a ``migrations`` table.

The per-service migration lists live here as well so that the schema
of both services can be read in one place.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

Migration = Tuple[int, str]

# Range of a SQLite INTEGER column.  Ids and quiz references outside it
# are rejected at the API boundary.
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1

QUIZ_MIGRATIONS: List[Migration] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS quizzes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT,
            description TEXT
        );
        """,
    ),
]

# ``quiz_id`` is a plain column; the quizzes table lives in another
# service's database, so no REFERENCES clause is possible.
QUESTION_MIGRATIONS: List[Migration] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS questions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            quiz_id INTEGER,
            text TEXT
        );
        """,
    ),
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_questions_quiz_id ON questions(quiz_id);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Resolve a configured database location to an absolute file path.

    Absolute paths are returned unchanged.  Relative paths are resolved
    against the project root (the directory containing the
    ``quiz_platform`` package).
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / database_url).resolve())


def get_connection(database_path: str) -> sqlite3.Connection:
    """Open a new connection whose rows can be accessed by column name."""
    conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit if the block succeeds, always close."""
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_path: str, migrations: List[Migration]) -> int:
    """Create the database file if needed and apply pending migrations.

    Migrations are applied in ascending version order and each applied
    version is recorded, so calling this repeatedly is safe.  Returns
    the schema version after the run.
    """
    with get_cursor(database_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0
        for version, sql in sorted(migrations):
            if version > current_version:
                logger.info("Applying migration %s to %s", version, database_path)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
    return current_version
