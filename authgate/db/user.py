"""User table operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- Tests may wrap a bare connection: UserOperations(conn)
"""

import sqlite3


class UserOperations:
    """Lookup and insert operations on the users table.

    Store errors are not caught here; sqlite3.Error propagates to the caller.
    """

    def __init__(self, conn: sqlite3.Connection):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def get_by_email(self, email: str) -> sqlite3.Row | None:
        """Get the user row for an email (exact, case-sensitive match).

        Returns:
            Row with id, name, email and password, or None if not found
        """
        cursor = self._conn.execute(
            "SELECT id, name, email, password FROM users WHERE email = ?",
            (email,)
        )
        return cursor.fetchone()

    def create(self, name: str, email: str, password_hash: str) -> int:
        """Insert a user and return its auto-assigned id.

        Raises:
            sqlite3.IntegrityError: If the email is already taken
        """
        cursor = self._conn.execute(
            "INSERT INTO users (name, email, password) VALUES (?, ?, ?)",
            (name, email, password_hash)
        )
        return cursor.lastrowid
