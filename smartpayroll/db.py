"""SQLite storage for the payroll system."""

from __future__ import annotations

import os
import sqlite3

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    user_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL,
    password TEXT NOT NULL,
    role     TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS staff (
    staff_id       INTEGER PRIMARY KEY AUTOINCREMENT,
    name           TEXT NOT NULL,
    salary_per_day REAL NOT NULL,
    department     TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS attendance (
    attendance_id INTEGER PRIMARY KEY AUTOINCREMENT,
    staff_id      INTEGER NOT NULL,
    days_present  INTEGER NOT NULL,
    month         TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS payroll (
    payroll_id   INTEGER PRIMARY KEY AUTOINCREMENT,
    staff_id     INTEGER NOT NULL,
    month        TEXT NOT NULL,
    total_salary REAL NOT NULL,
    bonus        REAL NOT NULL,
    deduction    REAL NOT NULL
);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the users, staff, attendance and payroll tables if missing."""
    conn.executescript(_SCHEMA)
    conn.commit()


def connect(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the database at ``path`` with named-column rows and a ready schema."""
    conn = sqlite3.connect(os.fspath(path))
    conn.row_factory = sqlite3.Row
    create_schema(conn)
    return conn