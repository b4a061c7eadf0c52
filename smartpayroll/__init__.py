"""Staff, attendance and payroll management backed by SQLite."""

__version__ = "0.1.0"

__all__ = ["attendance", "auth", "cli", "db", "payroll", "staff"]