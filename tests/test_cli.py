import io

import pytest

from smartpayroll.attendance import AttendanceRepository
from smartpayroll.cli import main, run
from smartpayroll.db import connect
from smartpayroll.staff import StaffRepository


@pytest.fixture
def conn():
    return connect(":memory:")


def _run(conn, text):
    out = io.StringIO()
    run(conn, io.StringIO(text), out)
    return out.getvalue()


def test_exit_choice(conn):
    output = _run(conn, "10\n")
    assert "SMART PAYROLL SYSTEM" in output
    assert output.endswith("\nExiting...\n")


def test_end_of_input_stops(conn):
    output = _run(conn, "")
    assert output.count("Enter Choice:") == 1
    assert "Exiting" not in output


def test_invalid_choice(conn):
    output = _run(conn, "42\nabc\n10\n")
    assert output.count("Invalid Choice!") == 2


def test_add_staff(conn):
    output = _run(conn, "1\nAnn Lee\nFinance\n120.5\n10\n")
    assert "Staff Added Successfully!" in output
    (member,) = StaffRepository(conn).list_all()
    assert (member.name, member.department, member.salary_per_day) == (
        "Ann Lee",
        "Finance",
        120.5,
    )


def test_view_and_search_staff(conn):
    sid = StaffRepository(conn).add("Bo", "IT", 75)
    output = _run(conn, f"2\n3\n{sid}\n3\n999\n10\n")
    assert "===== STAFF LIST =====" in output
    assert "Staff Found!" in output
    assert "Name: Bo" in output
    assert "Staff Not Found!" in output


def test_update_and_delete_staff(conn):
    repo = StaffRepository(conn)
    sid = repo.add("Bo", "IT", 75)
    output = _run(conn, f"4\n{sid}\nBob\nOps\n80\n5\n{sid}\n5\n{sid}\n10\n")
    assert "Staff Updated Successfully!" in output
    assert "Staff Deleted Successfully!" in output
    assert "Staff ID Not Found!" in output
    assert repo.get(sid) is None


def test_mark_attendance_validates_days(conn):
    output = _run(conn, "6\n1\nJan\n31\n6\n1\nJan\n12\n10\n")
    assert "Invalid Attendance Days!" in output
    assert "Attendance Recorded Successfully!" in output
    records = AttendanceRepository(conn).list_all()
    assert [(r.staff_id, r.month, r.days_present) for r in records] == [
        (1, "Jan", 12)
    ]


def test_non_numeric_id_is_reported(conn):
    output = _run(conn, "3\nxyz\n10\n")
    assert "Invalid Input!" in output
    assert output.endswith("\nExiting...\n")


def test_low_attendance_messages(conn):
    empty = _run(conn, "8\n10\n")
    assert "No Low Attendance Records Found." in empty
    AttendanceRepository(conn).mark(3, "Feb", 5)
    warned = _run(conn, "8\n10\n")
    assert "WARNING: Low Attendance!" in warned
    assert "No Low Attendance Records Found." not in warned


def test_generate_payroll(conn):
    StaffRepository(conn).add("Ann", "HR", 100)
    output = _run(conn, "9\n10\n")
    assert "Staff: Ann" in output
    assert "PAYROLL GENERATED SUCCESSFULLY!" in output
    assert conn.execute("SELECT COUNT(*) FROM payroll").fetchone()[0] == 1


def test_main_uses_database_file(tmp_path, monkeypatch, capsys):
    db_path = tmp_path / "pay.db"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nAnn\nHR\n50\n10\n"))
    assert main(["--database", str(db_path)]) == 0
    assert "Exiting..." in capsys.readouterr().out
    reopened = connect(db_path)
    assert [m.name for m in StaffRepository(reopened).list_all()] == ["Ann"]