from db.manager import DatabaseManager
from db.migrator import apply_pending, get_available_migrations, get_pending_migrations
from config import get_migrations_dir
from cli.migrate import cmd_apply


class TestMigrations:
    """Tests for the SQL migration runner."""

    def test_available_migrations_are_sorted(self):
        available = get_available_migrations(get_migrations_dir())

        assert available == sorted(available)
        assert "001_create_users.sql" in available
        assert "002_create_categories.sql" in available

    def test_missing_directory(self, tmp_path):
        assert get_available_migrations(tmp_path / "nope") == []

    def test_apply_is_idempotent(self, test_db):
        applied = apply_pending(test_db, get_migrations_dir())

        assert applied == get_available_migrations(get_migrations_dir())
        assert apply_pending(test_db, get_migrations_dir()) == []
        assert get_pending_migrations(test_db, get_migrations_dir()) == []

    def test_apply_creates_tables(self, test_db):
        apply_pending(test_db, get_migrations_dir())

        tables = {
            row[0]
            for row in test_db.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            )
        }
        assert {"users", "categories", "schema_migrations"} <= tables

    def test_cmd_apply_creates_database_file(self, test_config):
        db_manager = DatabaseManager(test_config)

        cmd_apply(None, db_manager)

        assert test_config.db_path.exists()
        with db_manager.connect() as conn:
            assert get_pending_migrations(conn, get_migrations_dir()) == []
            assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1
