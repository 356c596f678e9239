"""Shared utilities for Blockview CLI modules."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from blockview.core.config import BlockviewConfig, get_config, set_config
from blockview.core.errors import BlockviewError
from blockview.core.logger import get_logger, set_verbose, setup_file_logging
from blockview.discovery.decoder import decode_device_tree
from blockview.discovery.samples import SAMPLE_LSBLK_JSON
from blockview.models.device import DeviceTree

logger = get_logger(__name__)

# Default config search paths (ordered by proximity to current run)
CONFIG_PATHS = [
    "./blockview.yml",
    str(Path.home() / ".config" / "blockview" / "blockview.yml"),
    "/etc/blockview/blockview.yml",
]

STDIN_SOURCE = "-"


class SnapshotSourceError(BlockviewError):
    """Raised when no snapshot can be read."""
    pass


def find_config(config_path: Optional[str] = None) -> Optional[str]:
    """Locate the active Blockview configuration file, if any."""
    if config_path:
        return config_path

    if env_config := os.environ.get("BLOCKVIEW_CONFIG"):
        return env_config

    for path in CONFIG_PATHS:
        if Path(path).exists():
            return path

    return None


def is_mock() -> bool:
    """Return True when CLI runs in mock mode."""
    return os.environ.get("BLOCKVIEW_MOCK") == "1"


def configure(
    config_path: Optional[str] = None,
    verbose: bool = False,
    log_file: Optional[str] = None,
) -> BlockviewConfig:
    """Load configuration and apply its logging settings.

    Command-line flags win over the config file, which wins over the
    environment.
    """
    found = find_config(config_path)
    config = BlockviewConfig.from_file(found) if found else get_config()

    overrides = {}
    if verbose:
        overrides["verbose"] = True
    if log_file:
        overrides["log_file"] = log_file
    if overrides:
        config = config.merge(overrides)

    set_config(config)
    set_verbose(config.verbose)
    if config.log_file:
        setup_file_logging(log_file=config.log_file, verbose=config.verbose)

    logger.debug(f"Using config: {found or 'environment defaults'}")
    return config


def read_snapshot(source: Optional[str]) -> bytes:
    """Read raw lsblk JSON from a file, stdin ('-') or the mock sample."""
    if source is None:
        if is_mock():
            logger.debug("Mock mode: using built-in sample snapshot")
            return SAMPLE_LSBLK_JSON.encode()
        raise SnapshotSourceError(
            "No snapshot given. Pass a file saved from 'lsblk -pabOJ' or '-' for stdin."
        )

    if source == STDIN_SOURCE:
        try:
            return sys.stdin.buffer.read()
        except OSError as e:
            raise SnapshotSourceError(f"Cannot read snapshot from stdin: {e}") from e

    path = Path(source)
    if not path.is_file():
        raise SnapshotSourceError(f"Snapshot file not found: {path}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise SnapshotSourceError(f"Cannot read snapshot {path}: {e}") from e


def load_tree(source: Optional[str]) -> DeviceTree:
    """Read and decode a snapshot."""
    tree = decode_device_tree(read_snapshot(source))
    logger.debug(f"Decoded {len(tree)} top-level devices")
    return tree


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting.

    Args:
        console: Rich console for output
        message: Success message
        prefix: Prefix symbol (default: ✓)
    """
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting."""
    console.print(f"[red]{prefix}[/red] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")
