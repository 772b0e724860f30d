"""Tests for debug log configuration."""

import logging
from pathlib import Path

import pytest

from assertkit.helper import assert_equal
from assertkit.location import CallerLocation
from assertkit.reporter import RecordingReporter
from assertkit.verbose import setup_logger, teardown_logger


def test_logger_creates_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(tmp_path / "debug.log", verbose=True)

    assert len(logger.handlers) == 2
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert "StreamHandler" in handler_types
    assert "FileHandler" in handler_types


def test_non_verbose_mode_only_file_handler(tmp_path: Path):
    logger = setup_logger(tmp_path / "debug.log", verbose=False)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.FileHandler)


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    assert debug_file.exists()


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "one.log", logger_name="assertkit_shared_test")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "two.log", logger_name="assertkit_shared_test")

    assert "assertkit_shared_test" in str(exc_info.value)
    assert "already exists" in str(exc_info.value)


def test_teardown_allows_reconfiguring(tmp_path: Path):
    logger = setup_logger(tmp_path / "one.log")
    teardown_logger(logger)
    assert logger.handlers == []

    again = setup_logger(tmp_path / "two.log")
    assert again is logger
    assert len(again.handlers) == 1


def test_helper_failures_reach_the_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file)

    assert_equal(RecordingReporter(), 1, 2, "numbers", location=CallerLocation("t.py", 3))

    content = debug_file.read_text()
    assert "assertkit.helper: assert_equal failed at t.py:3: numbers" in content
