"""Helper utilities for tests."""

from itertools import count
from pathlib import Path
import sqlite3

from db.migrator import apply_pending
from models.user import User
from services import users

_user_numbers = count(1)


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    apply_pending(conn, migrations_dir)


def create_test_user(conn: sqlite3.Connection) -> User:
    """Insert a user with a unique email address."""
    number = next(_user_numbers)
    return users.create(conn, f"test-user-{number}@example.com", "$argon2id$test")


def category_count(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT COUNT(*) FROM categories").fetchone()[0]
