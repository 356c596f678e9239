"""Blockview runtime configuration and settings."""
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from blockview.core.errors import BlockviewError

UNIT_SYSTEMS = ("si", "iec")
_TRUTHY = ("1", "true", "yes", "on")


class ConfigError(BlockviewError):
    """Raised when a configuration file or value is invalid."""
    pass


@dataclass
class BlockviewConfig:
    """Runtime configuration for Blockview.

    Attributes:
        units: Unit system for displayed sizes, "si" or "iec" (default: si)
        log_file: Log file path; file logging stays off when unset
        verbose: Enable debug-level logging (default: False)
    """

    units: str = "si"
    log_file: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        if self.units not in UNIT_SYSTEMS:
            raise ConfigError(
                f"Invalid units '{self.units}'. Expected one of: {', '.join(UNIT_SYSTEMS)}"
            )

    @classmethod
    def from_env(cls) -> "BlockviewConfig":
        """Create config from environment variables.

        Environment variables:
            BLOCKVIEW_UNITS: "si" or "iec"
            BLOCKVIEW_LOG_FILE: Path to log file
            BLOCKVIEW_VERBOSE: "1"/"true" to enable debug logging

        Returns:
            BlockviewConfig instance with values from environment or defaults
        """
        return cls(
            units=os.getenv("BLOCKVIEW_UNITS", cls.units).lower(),
            log_file=os.getenv("BLOCKVIEW_LOG_FILE") or None,
            verbose=os.getenv("BLOCKVIEW_VERBOSE", "").lower() in _TRUTHY,
        )

    @classmethod
    def from_file(cls, path: str) -> "BlockviewConfig":
        """Load a YAML config file on top of the environment defaults."""
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            with open(config_path) as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        # Empty file means defaults
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        return cls.from_env().merge(raw)

    def merge(self, overrides: Dict[str, Any]) -> "BlockviewConfig":
        """Return a copy with the given settings applied."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values = dict(overrides)
        if "units" in values:
            values["units"] = str(values["units"]).lower()
        if "verbose" in values and not isinstance(values["verbose"], bool):
            raise ConfigError(f"'verbose' must be true or false, got {values['verbose']!r}")
        if values.get("log_file") is not None:
            values["log_file"] = str(values["log_file"])

        return replace(self, **values)


# Global config instance (can be overridden)
_config: Optional[BlockviewConfig] = None


def get_config() -> BlockviewConfig:
    """Get the global Blockview configuration.

    Returns:
        BlockviewConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = BlockviewConfig.from_env()
    return _config


def set_config(config: BlockviewConfig) -> None:
    """Replace the global configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Forget the global configuration so it is rebuilt on next access."""
    global _config
    _config = None
