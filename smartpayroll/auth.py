"""User accounts and login."""

from __future__ import annotations

import sqlite3


class AuthService:
    """Checks credentials and creates users."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def login(self, username: str, password: str) -> bool:
        """Return whether a user with this name and password exists."""
        row = self._conn.execute(
            "SELECT 1 FROM users WHERE username=? AND password=?",
            (username, password),
        ).fetchone()
        return row is not None

    def create_user(self, username: str, password: str, role: str) -> int:
        """Create a user (role is e.g. ``admin`` or ``hr``) and return its id."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO users(username, password, role) VALUES (?, ?, ?)",
                (username, password, role),
            )
        return cursor.lastrowid