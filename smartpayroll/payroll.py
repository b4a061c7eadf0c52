"""Payroll generation from staff rates and attendance."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .attendance import AttendanceRepository
from .staff import StaffRepository

NO_MONTH = "N/A"


def compute_pay(
    salary_per_day: float, days_present: int
) -> tuple[float, float, float, float]:
    """Return (base salary, bonus, deduction, total salary).

    28 days or more earn a 10% bonus, 25 or more a 5% bonus, and fewer
    than 20 cost a 10% deduction.
    """
    base_salary = salary_per_day * days_present
    bonus = 0.0
    deduction = 0.0
    if days_present >= 28:
        bonus = base_salary * 0.10
    elif days_present >= 25:
        bonus = base_salary * 0.05
    elif days_present < 20:
        deduction = base_salary * 0.10
    total_salary = base_salary + bonus - deduction
    return base_salary, bonus, deduction, total_salary


@dataclass(frozen=True)
class PayslipEntry:
    """Pay worked out for one member of staff."""

    staff_id: int
    name: str
    month: str
    days_present: int
    base_salary: float
    bonus: float
    deduction: float
    total_salary: float


class PayrollService:
    """Works out and stores pay for every member of staff."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._staff = StaffRepository(conn)
        self._attendance = AttendanceRepository(conn)

    def generate(self) -> list[PayslipEntry]:
        """Pay everyone on their latest attendance and store the results."""
        entries = []
        for member in self._staff.list_all():
            latest = self._attendance.latest_for(member.staff_id)
            days_present = latest.days_present if latest else 0
            month = latest.month if latest else NO_MONTH
            base, bonus, deduction, total = compute_pay(
                member.salary_per_day, days_present
            )
            entries.append(
                PayslipEntry(
                    staff_id=member.staff_id,
                    name=member.name,
                    month=month,
                    days_present=days_present,
                    base_salary=base,
                    bonus=bonus,
                    deduction=deduction,
                    total_salary=total,
                )
            )
        with self._conn:
            self._conn.executemany(
                "INSERT INTO payroll(staff_id, month, total_salary, bonus, deduction) "
                "VALUES(?,?,?,?,?)",
                [
                    (e.staff_id, e.month, e.total_salary, e.bonus, e.deduction)
                    for e in entries
                ],
            )
        return entries