"""Database module for AuthGate.

Core owns one SQLite connection for the span of a request and gives access
to the user operations. It is always used as a context manager:

    with get_core(settings.database_path) as core:
        row = core.user.get_by_email(email)
    # Committed (or rolled back on exception) and closed here

The store's unique index on users.email is the source of truth for email
uniqueness. Callers must expect sqlite3.IntegrityError on insert even after
a lookup found nothing.
"""

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .user import UserOperations

SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.sql"


class Core:
    """
    Database Core with user operations.

    Commits on clean exit from the context manager, rolls back when an
    exception escapes, and always closes the connection.
    """

    def __init__(self, connection: sqlite3.Connection):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = connection
        self._user_ops = None

    @property
    def user(self) -> "UserOperations":
        """User operations, created on first access."""
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    def schema_version(self) -> str:
        """Schema version from _schema_metadata, or 'unknown' if missing."""
        row = self._conn.execute(
            "SELECT value FROM _schema_metadata WHERE key = 'version'"
        ).fetchone()
        return row[0] if row else "unknown"

    def __enter__(self) -> "Core":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()


def _create_connection(database_path: str) -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
    """
    db_path = Path(database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def get_core(database_path: str) -> Core:
    """
    Get a database Core for one unit of work.

    Args:
        database_path: SQLite database file

    Raises:
        sqlite3.Error: If the database cannot be opened
    """
    return Core(_create_connection(database_path))


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def init_db(database_path: str) -> bool:
    """Initialize database by running schema.sql if not already initialized.

    Returns:
        True if the schema was applied, False if the database was already set up.
    """
    db_path = Path(database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with closing(sqlite3.connect(str(db_path))) as db:
        cursor = db.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            return False

        db.executescript(SCHEMA_PATH.read_text())
        db.commit()
    return True


def get_schema_version(database_path: str) -> str:
    """
    Get current schema version from _schema_metadata table.

    Returns:
        Schema version string (e.g., '20261019')
    """
    with get_core(database_path) as core:
        return core.schema_version()
