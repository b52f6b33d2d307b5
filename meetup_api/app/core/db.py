"""
SQLite database integration and simple migration system.

The ``Database`` class is the single handle to the store.  One
instance is created by the application factory and shared by all
requests; nothing in this module keeps global state.  It hands out
connections through the ``connection`` context manager, which bounds
the number of simultaneously open connections, commits on success and
rolls back on error.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Append new migrations with an incremented version number; never edit
# a migration that has already shipped.
MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS meetups (
            meetup_id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            body_text TEXT NOT NULL
        );
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Turn ``DATABASE_URL`` into a filesystem path for ``sqlite3``.

    Accepts a plain path or a ``sqlite:///`` URL.  Relative paths are
    resolved against the current working directory.  In-memory
    databases are rejected because every pooled connection would see
    its own empty database.
    """
    path = database_url
    for prefix in ("sqlite:///", "sqlite://"):
        if path.startswith(prefix):
            path = path[len(prefix):]
            break
    if not path or path == ":memory:":
        raise ConfigurationError(f"DATABASE_URL must point to a database file, got {database_url!r}")
    return str(Path(path).expanduser().resolve())


class Database:
    """Bounded pool of SQLite connections to one database file."""

    def __init__(self, database_url: str, max_connections: int = 50):
        self.path = resolve_database_path(database_url)
        self.max_connections = max_connections
        self._slots = threading.BoundedSemaphore(max_connections)

    def __repr__(self) -> str:
        return f"Database(path={self.path!r}, max_connections={self.max_connections})"

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        The connection uses a row factory to access columns by name.
        It may be used from a worker thread other than the one that
        created it, but is never shared between two threads at once.
        """
        conn = sqlite3.connect(self.path, check_same_thread=False)
        # Return rows as dict‑like objects keyed by column name
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Check out a connection for the duration of one operation.

        Blocks while ``max_connections`` connections are already in use.
        """
        with self._slots:
            conn = self.connect()
            try:
                yield conn
                conn.commit()
            except BaseException:
                conn.rollback()
                raise
            finally:
                conn.close()

    def init_db(self) -> None:
        """Create the database file if needed and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks the
        current schema version, and applies any newer entries from
        ``MIGRATIONS``.
        """
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
                    logger.info("Applied migration %s to %s", version, self.path)
        logger.debug("Database %s at schema version %s", self.path, current_version)
