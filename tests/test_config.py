"""Tests for Blockview configuration."""
import pytest

from blockview.core.config import (
    BlockviewConfig,
    ConfigError,
    get_config,
    reset_config,
    set_config,
)


class TestFromEnv:
    """Environment-driven defaults."""

    def test_defaults(self):
        config = BlockviewConfig.from_env()

        assert config.units == "si"
        assert config.log_file is None
        assert config.verbose is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BLOCKVIEW_UNITS", "IEC")
        monkeypatch.setenv("BLOCKVIEW_LOG_FILE", "/tmp/bv.log")
        monkeypatch.setenv("BLOCKVIEW_VERBOSE", "true")

        config = BlockviewConfig.from_env()

        assert config.units == "iec"
        assert config.log_file == "/tmp/bv.log"
        assert config.verbose is True

    def test_invalid_units(self, monkeypatch):
        monkeypatch.setenv("BLOCKVIEW_UNITS", "furlongs")
        with pytest.raises(ConfigError, match="Invalid units"):
            BlockviewConfig.from_env()


class TestFromFile:
    """YAML config files."""

    def test_overlay(self, tmp_path):
        config_file = tmp_path / "blockview.yml"
        config_file.write_text("units: iec\nverbose: true\n")

        config = BlockviewConfig.from_file(str(config_file))

        assert config.units == "iec"
        assert config.verbose is True
        assert config.log_file is None

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "blockview.yml"
        config_file.write_text("")

        assert BlockviewConfig.from_file(str(config_file)) == BlockviewConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            BlockviewConfig.from_file(str(tmp_path / "nope.yml"))

    def test_unknown_key(self, tmp_path):
        config_file = tmp_path / "blockview.yml"
        config_file.write_text("colour: blue\n")

        with pytest.raises(ConfigError, match="colour"):
            BlockviewConfig.from_file(str(config_file))

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "blockview.yml"
        config_file.write_text("- si\n- iec\n")

        with pytest.raises(ConfigError, match="mapping"):
            BlockviewConfig.from_file(str(config_file))

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "blockview.yml"
        config_file.write_text("units: [si\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            BlockviewConfig.from_file(str(config_file))

    def test_bad_verbose(self, tmp_path):
        config_file = tmp_path / "blockview.yml"
        config_file.write_text("verbose: loud\n")

        with pytest.raises(ConfigError, match="verbose"):
            BlockviewConfig.from_file(str(config_file))


class TestGlobalConfig:
    """Module-level config singleton."""

    def test_cached(self):
        assert get_config() is get_config()

    def test_set_and_reset(self):
        custom = BlockviewConfig(units="iec")
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config() is not custom
        assert get_config().units == "si"
