"""Tests for Blockview logging setup."""
import logging

import pytest
from rich.logging import RichHandler

import blockview.core.logger as logger_module
from blockview.core.logger import get_logger, set_verbose, setup_file_logging


@pytest.fixture
def fresh_file_logging(monkeypatch):
    """Reset file logging state and detach any handler a test adds."""
    monkeypatch.setattr(logger_module, "_active_log_file", None)
    root_logger = logging.getLogger("blockview")
    handlers_before = list(root_logger.handlers)
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers_before:
            root_logger.removeHandler(handler)
            handler.close()


def test_get_logger_adds_single_rich_handler():
    logger = get_logger("blockview.test_single")
    get_logger("blockview.test_single")

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.INFO


def test_set_verbose_switches_levels():
    logger = get_logger("blockview.test_verbose")

    set_verbose(True)
    assert logger.level == logging.DEBUG

    set_verbose(False)
    assert logger.level == logging.INFO


def test_setup_file_logging_writes_to_file(tmp_path, fresh_file_logging):
    log_file = tmp_path / "logs" / "blockview.log"

    assert setup_file_logging(log_file=str(log_file)) == log_file
    assert log_file.exists()
    assert "Blockview logging initialized" in log_file.read_text()


def test_second_setup_returns_active_file(tmp_path, fresh_file_logging):
    """A later call keeps the first file and reports it, not the new request."""
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"

    setup_file_logging(log_file=str(first))

    assert setup_file_logging(log_file=str(second)) == first
    assert not second.exists()


def test_unwritable_directory_falls_back(tmp_path, monkeypatch, fresh_file_logging):
    """The returned path is the fallback file when the directory cannot be created."""
    fallback = tmp_path / "fallback.log"
    monkeypatch.setattr(logger_module, "FALLBACK_LOG_FILE", fallback)
    original_mkdir = type(tmp_path).mkdir

    def mkdir(self, *args, **kwargs):
        if self.name == "locked":
            raise PermissionError("denied")
        return original_mkdir(self, *args, **kwargs)

    monkeypatch.setattr(type(tmp_path), "mkdir", mkdir)

    assert setup_file_logging(log_file=str(tmp_path / "locked" / "bv.log")) == fallback
    assert setup_file_logging(log_file=str(tmp_path / "other.log")) == fallback
    assert fallback.exists()
