"""Staff records."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True)
class StaffMember:
    """One member of staff."""

    staff_id: int
    name: str
    department: str
    salary_per_day: float

    @classmethod
    def _from_row(cls, row: sqlite3.Row) -> StaffMember:
        return cls(
            staff_id=row["staff_id"],
            name=row["name"],
            department=row["department"],
            salary_per_day=float(row["salary_per_day"]),
        )


class StaffRepository:
    """Adds, lists, finds, updates and deletes staff."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def add(self, name: str, department: str, salary_per_day: float) -> int:
        """Insert a member of staff and return the new staff id."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO staff(name, salary_per_day, department) VALUES(?,?,?)",
                (name, float(salary_per_day), department),
            )
        return cursor.lastrowid

    def list_all(self) -> list[StaffMember]:
        rows = self._conn.execute("SELECT * FROM staff ORDER BY staff_id").fetchall()
        return [StaffMember._from_row(row) for row in rows]

    def get(self, staff_id: int) -> StaffMember | None:
        row = self._conn.execute(
            "SELECT * FROM staff WHERE staff_id=?", (staff_id,)
        ).fetchone()
        return StaffMember._from_row(row) if row is not None else None

    def update(
        self, staff_id: int, name: str, department: str, salary_per_day: float
    ) -> bool:
        """Replace a member's details; return whether the id existed."""
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE staff SET name=?, department=?, salary_per_day=? WHERE staff_id=?",
                (name, department, float(salary_per_day), staff_id),
            )
        return cursor.rowcount > 0

    def delete(self, staff_id: int) -> bool:
        """Remove a member of staff; return whether the id existed."""
        with self._conn:
            cursor = self._conn.execute(
                "DELETE FROM staff WHERE staff_id=?", (staff_id,)
            )
        return cursor.rowcount > 0