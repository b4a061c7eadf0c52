"""Monthly attendance records."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

MAX_DAYS = 30
LOW_ATTENDANCE_THRESHOLD = 15


class InvalidAttendanceError(ValueError):
    """Raised when the days present fall outside 0 to 30."""


@dataclass(frozen=True)
class AttendanceRecord:
    """Days one member of staff was present in one month."""

    attendance_id: int
    staff_id: int
    month: str
    days_present: int

    @classmethod
    def _from_row(cls, row: sqlite3.Row) -> AttendanceRecord:
        return cls(
            attendance_id=row["attendance_id"],
            staff_id=row["staff_id"],
            month=row["month"],
            days_present=row["days_present"],
        )


class AttendanceRepository:
    """Records and queries attendance."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def mark(self, staff_id: int, month: str, days_present: int) -> int:
        """Record attendance and return the new attendance id."""
        if not 0 <= days_present <= MAX_DAYS:
            raise InvalidAttendanceError(
                f"days present must be between 0 and {MAX_DAYS}, got {days_present}"
            )
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO attendance(staff_id, days_present, month) VALUES(?,?,?)",
                (staff_id, days_present, month),
            )
        return cursor.lastrowid

    def list_all(self) -> list[AttendanceRecord]:
        rows = self._conn.execute(
            "SELECT * FROM attendance ORDER BY attendance_id"
        ).fetchall()
        return [AttendanceRecord._from_row(row) for row in rows]

    def low_attendance(
        self, threshold: int = LOW_ATTENDANCE_THRESHOLD
    ) -> list[AttendanceRecord]:
        """Records with fewer days present than ``threshold``."""
        rows = self._conn.execute(
            "SELECT * FROM attendance WHERE days_present < ? ORDER BY attendance_id",
            (threshold,),
        ).fetchall()
        return [AttendanceRecord._from_row(row) for row in rows]

    def latest_for(self, staff_id: int) -> AttendanceRecord | None:
        """The most recently recorded attendance of one member of staff."""
        row = self._conn.execute(
            "SELECT * FROM attendance WHERE staff_id=? "
            "ORDER BY attendance_id DESC LIMIT 1",
            (staff_id,),
        ).fetchone()
        return AttendanceRecord._from_row(row) if row is not None else None