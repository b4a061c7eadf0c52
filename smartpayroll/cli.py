"""Interactive menu for the payroll system."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import TextIO

from .attendance import AttendanceRepository, InvalidAttendanceError
from .db import connect
from .payroll import PayrollService
from .staff import StaffMember, StaffRepository

DEFAULT_DATABASE = "payroll.db"
EXIT_CHOICE = 10

_MENU = (
    "\n============================"
    "\n SMART PAYROLL SYSTEM"
    "\n============================"
    "\n1. Add Staff"
    "\n2. View Staff"
    "\n3. Search Staff"
    "\n4. Update Staff"
    "\n5. Delete Staff"
    "\n6. Mark Attendance"
    "\n7. View Attendance"
    "\n8. Low Attendance Warning"
    "\n9. Generate Payroll"
    "\n10. Exit"
)


def _num(value: float) -> str:
    return f"{value:g}"


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def write(self, text: str) -> None:
        self._out.write(text)

    def ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.strip()

    def ask_int(self, prompt: str) -> int:
        return int(self.ask(prompt))

    def ask_float(self, prompt: str) -> float:
        return float(self.ask(prompt))


class _Menu:
    def __init__(self, conn: sqlite3.Connection, console: _Console) -> None:
        self.console = console
        self.staff = StaffRepository(conn)
        self.attendance = AttendanceRepository(conn)
        self.payroll = PayrollService(conn)
        self.actions = {
            1: self.add_staff,
            2: self.view_staff,
            3: self.search_staff,
            4: self.update_staff,
            5: self.delete_staff,
            6: self.mark_attendance,
            7: self.view_attendance,
            8: self.low_attendance,
            9: self.generate_payroll,
        }

    def _show_member(self, member: StaffMember) -> None:
        self.console.write(
            f"\nName: {member.name}"
            f"\nDepartment: {member.department}"
            f"\nSalary/Day: {_num(member.salary_per_day)}"
        )

    def add_staff(self) -> None:
        name = self.console.ask("\nEnter Staff Name: ")
        department = self.console.ask("Enter Department: ")
        salary = self.console.ask_float("Enter Salary Per Day: ")
        self.staff.add(name, department, salary)
        self.console.write("\nStaff Added Successfully!\n")

    def view_staff(self) -> None:
        self.console.write("\n===== STAFF LIST =====\n")
        for member in self.staff.list_all():
            self.console.write(f"\nID: {member.staff_id}")
            self._show_member(member)
            self.console.write("\n----------------------\n")

    def search_staff(self) -> None:
        staff_id = self.console.ask_int("\nEnter Staff ID: ")
        member = self.staff.get(staff_id)
        if member is None:
            self.console.write("\nStaff Not Found!\n")
            return
        self.console.write(f"\nStaff Found!\nID: {member.staff_id}")
        self._show_member(member)
        self.console.write("\n")

    def update_staff(self) -> None:
        staff_id = self.console.ask_int("\nEnter Staff ID to Update: ")
        name = self.console.ask("Enter New Name: ")
        department = self.console.ask("Enter New Department: ")
        salary = self.console.ask_float("Enter New Salary Per Day: ")
        if self.staff.update(staff_id, name, department, salary):
            self.console.write("\nStaff Updated Successfully!\n")
        else:
            self.console.write("\nStaff ID Not Found!\n")

    def delete_staff(self) -> None:
        staff_id = self.console.ask_int("\nEnter Staff ID to Delete: ")
        if self.staff.delete(staff_id):
            self.console.write("\nStaff Deleted Successfully!\n")
        else:
            self.console.write("\nStaff ID Not Found!\n")

    def mark_attendance(self) -> None:
        staff_id = self.console.ask_int("\nEnter Staff ID: ")
        month = self.console.ask("Enter Month: ")
        days = self.console.ask_int("Enter Days Present: ")
        self.attendance.mark(staff_id, month, days)
        self.console.write("\nAttendance Recorded Successfully!\n")

    def view_attendance(self) -> None:
        self.console.write("\n===== ATTENDANCE RECORDS =====\n")
        for record in self.attendance.list_all():
            self.console.write(
                f"\nAttendance ID: {record.attendance_id}"
                f"\nStaff ID: {record.staff_id}"
                f"\nMonth: {record.month}"
                f"\nDays Present: {record.days_present}"
                "\n-----------------------------\n"
            )

    def low_attendance(self) -> None:
        self.console.write("\n===== LOW ATTENDANCE WARNING =====\n")
        records = self.attendance.low_attendance()
        for record in records:
            self.console.write(
                f"\nStaff ID: {record.staff_id}"
                f"\nMonth: {record.month}"
                f"\nDays Present: {record.days_present}"
                "\nWARNING: Low Attendance!\n"
                "\n-----------------------------\n"
            )
        if not records:
            self.console.write("\nNo Low Attendance Records Found.\n")

    def generate_payroll(self) -> None:
        self.console.write("\n===== GENERATING PAYROLL =====\n")
        for entry in self.payroll.generate():
            self.console.write(
                f"\nStaff: {entry.name}"
                f"\nDays Present: {entry.days_present}"
                f"\nBase Salary: {_num(entry.base_salary)}"
                f"\nBonus: {_num(entry.bonus)}"
                f"\nDeduction: {_num(entry.deduction)}"
                f"\nTOTAL SALARY: {_num(entry.total_salary)}"
                "\n-------------------------\n"
            )
        self.console.write("\nPAYROLL GENERATED SUCCESSFULLY!\n")


def run(conn: sqlite3.Connection, stdin: TextIO, stdout: TextIO) -> None:
    """Show the menu and carry out choices until Exit or end of input."""
    console = _Console(stdin, stdout)
    menu = _Menu(conn, console)
    while True:
        console.write(_MENU)
        try:
            answer = console.ask("\n\nEnter Choice: ")
        except EOFError:
            return
        try:
            choice = int(answer)
        except ValueError:
            choice = None
        if choice == EXIT_CHOICE:
            console.write("\nExiting...\n")
            return
        action = menu.actions.get(choice)
        if action is None:
            console.write("\nInvalid Choice!\n")
            continue
        try:
            action()
        except EOFError:
            return
        except InvalidAttendanceError:
            console.write("\nInvalid Attendance Days!\n")
        except ValueError:
            console.write("\nInvalid Input!\n")
        except sqlite3.Error as exc:
            console.write(f"ERROR: {exc}\n")
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="smartpayroll", description="Staff, attendance and payroll manager."
    )
    parser.add_argument(
        "--database",
        default=DEFAULT_DATABASE,
        help=f"SQLite database file (default: {DEFAULT_DATABASE})",
    )
    args = parser.parse_args(argv)
    conn = connect(args.database)
    try:
        run(conn, sys.stdin, sys.stdout)
    finally:
        conn.close()
    return 0