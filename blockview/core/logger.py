"""Unified logging for Blockview with console and file output."""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

FALLBACK_LOG_FILE = Path("/tmp/blockview.log")

# Log file currently receiving records, None until file logging is set up
_active_log_file: Optional[Path] = None


def setup_file_logging(log_file: str, verbose: bool = False) -> Path:
    """Set up file logging for Blockview.

    Args:
        log_file: Path to log file
        verbose: Enable debug-level logging

    Returns:
        Path of the log file actually in use

    Note:
        Only the first call attaches a handler; later calls return the
        active file. Falls back to /tmp if the directory is not writable.
    """
    global _active_log_file

    if _active_log_file is not None:
        return _active_log_file

    target_log_file = Path(log_file)
    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target_log_file = FALLBACK_LOG_FILE
        target_log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("blockview")
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    _active_log_file = target_log_file
    root_logger.info(f"Blockview logging initialized: {target_log_file}")
    return target_log_file


def set_verbose(verbose: bool) -> None:
    """Switch every blockview logger between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("blockview").setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("blockview.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
