# smartpayroll

A small console application for keeping track of staff, monthly attendance
and payroll. All data is stored in a local SQLite database.

## Installation

```
pip install .
```

## Running

```
smartpayroll
```

This opens the database `payroll.db` in the current directory, creating the
tables if they are missing. To use another file:

```
smartpayroll --database /path/to/other.db
```

The interactive menu offers:

```
1. Add Staff
2. View Staff
3. Search Staff
4. Update Staff
5. Delete Staff
6. Mark Attendance
7. View Attendance
8. Low Attendance Warning
9. Generate Payroll
10. Exit
```

The menu runs until you choose 10 or input ends. A choice that is not on the
menu prints `Invalid Choice!`; a number that cannot be read prints
`Invalid Input!`. A database error is printed and ends the session.

## Payroll rules

For each member of staff, payroll uses the most recently recorded attendance
entry (or 0 days and month `N/A` if there is none):

- base salary = salary per day × days present
- 28 days or more: bonus of 10 % of the base salary
- 25–27 days: bonus of 5 %
- fewer than 20 days: deduction of 10 %
- total = base + bonus − deduction

Each run of "Generate Payroll" stores one row per member of staff in the
`payroll` table.

Attendance is accepted only for 0 to 30 days present; other values raise
`InvalidAttendanceError` (shown as `Invalid Attendance Days!` in the menu).
The low attendance warning lists records with fewer than 15 days present.

## Library use

```python
from smartpayroll.db import connect
from smartpayroll.staff import StaffRepository
from smartpayroll.attendance import AttendanceRepository
from smartpayroll.payroll import PayrollService, compute_pay

conn = connect(":memory:")  # also creates the schema

staff = StaffRepository(conn)
staff_id = staff.add("Asha", "Accounts", 500.0)

AttendanceRepository(conn).mark(staff_id, "March", 28)

for entry in PayrollService(conn).generate():
    print(entry.name, entry.month, entry.total_salary)

base, bonus, deduction, total = compute_pay(500.0, 28)
```

Modules:

- `smartpayroll.db` — `connect(path)` and `create_schema(conn)`.
- `smartpayroll.staff` — `StaffMember` and `StaffRepository` (`add`,
  `list_all`, `get`, `update`, `delete`; `update` and `delete` return whether
  the id existed).
- `smartpayroll.attendance` — `AttendanceRecord`, `InvalidAttendanceError`
  and `AttendanceRepository` (`mark`, `list_all`, `low_attendance`,
  `latest_for`).
- `smartpayroll.payroll` — `compute_pay`, `PayslipEntry` and
  `PayrollService.generate()`.
- `smartpayroll.auth` — `AuthService` with `login(username, password)` and
  `create_user(username, password, role)`.
- `smartpayroll.cli` — `run(conn, stdin, stdout)` and `main(argv=None)`.

## What it does not do

- The interactive menu does not ask for a login, and has no entry for
  creating users; `AuthService` is available only from Python.
- `AuthService` stores and compares passwords as plain text; it does no
  hashing.
- There is no export or printing of payslips; results are shown in the
  console and stored in the database only.

## Tests

```
pip install .[test]
pytest
```