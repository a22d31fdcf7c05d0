"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a committing cursor context manager
(``get_cursor``) and applying migrations (``init_db``).  Every entity
collection is a two‑column table ``(id TEXT PRIMARY KEY, data TEXT)``
holding the JSON encoded record, so the on‑disk layout is one ordered
map per entity type.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .errors import StoreFailure

logger = logging.getLogger(__name__)

# Table names of the six entity collections.
MEMBERS = "members"
EVENTS = "events"
DONATIONS = "donations"
CONTRIBUTIONS = "contributions"
PRAYER_REQUESTS = "prayer_requests"
CONTENTS = "contents"

COLLECTIONS = (MEMBERS, EVENTS, DONATIONS, CONTRIBUTIONS, PRAYER_REQUESTS, CONTENTS)


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    ``db_url`` defaults to ``settings.database_url``.  An absolute path
    is used directly; otherwise it is resolved relative to the project
    root.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed only when the block completes without
    an exception.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: one key/value table per entity collection
    (
        1,
        "\n".join(
            f"CREATE TABLE IF NOT EXISTS {name} (id TEXT PRIMARY KEY, data TEXT NOT NULL);"
            for name in COLLECTIONS
        ),
    ),
]


def init_db(db_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  Safe to call on every start; an existing database
    keeps its records.
    """
    try:
        with get_cursor(db_path) as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s to %s", version, db_path)
                    current_version = version
    except sqlite3.Error as exc:
        raise StoreFailure("migrate", "migrations", str(exc)) from exc
