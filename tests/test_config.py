from pathlib import Path

import tomli_w

from config import Config, load_config


class TestLoadConfig:
    """Tests for load_config()."""

    def test_writes_default_when_missing(self, tmp_path):
        config_path = tmp_path / ".config" / "firetrack.toml"

        config = load_config(config_path)

        assert config_path.exists()
        assert config == Config.default()
        assert config.enable_reset is False
        # Reading the written file gives the same result
        assert load_config(config_path) == config

    def test_reads_values(self, tmp_path):
        config_path = tmp_path / "firetrack.toml"
        with open(config_path, "wb") as f:
            tomli_w.dump(
                {
                    "base_dir": str(tmp_path / "data"),
                    "enable_reset": True,
                    "database": {"filename": "budget.db"},
                    "logging": {"level": "DEBUG"},
                },
                f,
            )

        config = load_config(config_path)

        assert config.base_dir == tmp_path / "data"
        assert config.db_path == tmp_path / "data" / "db" / "budget.db"
        assert config.log_level == "DEBUG"
        assert config.log_dir == tmp_path / "data" / "logs"
        assert config.enable_reset is True

    def test_db_path(self):
        config = Config(
            base_dir=Path("/tmp/ft"),
            db_data_dir=Path("/tmp/ft/db"),
            db_filename="x.db",
            log_level="INFO",
            log_dir=Path("/tmp/ft/logs"),
        )

        assert config.db_path == Path("/tmp/ft/db/x.db")
