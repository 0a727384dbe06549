"""Plain SQL schema migrations.

Migrations are .sql files applied in file name order. Each applied file is
recorded in the schema_migrations table so it runs only once per database.
"""

import sqlite3
from pathlib import Path
from typing import List, Set

from logger import get_logger

logger = get_logger()


def init_schema_migrations_table(conn: sqlite3.Connection) -> None:
    conn.execute("""
        CREATE TABLE IF NOT EXISTS schema_migrations (
            migration_file TEXT PRIMARY KEY,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.commit()


def get_applied_migrations(conn: sqlite3.Connection) -> Set[str]:
    cursor = conn.execute(
        "SELECT migration_file FROM schema_migrations ORDER BY migration_file"
    )
    return {row[0] for row in cursor.fetchall()}


def get_available_migrations(migrations_dir: Path) -> List[str]:
    if not migrations_dir.exists():
        return []
    return sorted(path.name for path in migrations_dir.glob("*.sql"))


def get_pending_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> List[str]:
    applied = get_applied_migrations(conn)
    return [m for m in get_available_migrations(migrations_dir) if m not in applied]


def apply_migration(
    conn: sqlite3.Connection, migration_file: str, migrations_dir: Path
) -> None:
    """Run a single migration file and record it.

    Raises:
        sqlite3.Error: If the migration fails. The recording insert is rolled back.
    """
    sql = (migrations_dir / migration_file).read_text()

    try:
        conn.executescript(sql)
        conn.execute(
            "INSERT INTO schema_migrations (migration_file) VALUES (?)",
            (migration_file,),
        )
        conn.commit()
        logger.info(f"Applied migration: {migration_file}")
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"Error applying migration {migration_file}: {e}")
        raise


def apply_pending(conn: sqlite3.Connection, migrations_dir: Path) -> List[str]:
    """Apply every migration not yet recorded in the database.

    Returns:
        Names of the migrations that were applied, in order.
    """
    init_schema_migrations_table(conn)
    pending = get_pending_migrations(conn, migrations_dir)
    for migration in pending:
        apply_migration(conn, migration, migrations_dir)
    return pending
