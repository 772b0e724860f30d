"""Pytest configuration and fixtures."""

import logging

import pytest

from assertkit.reporter import RecordingReporter
from assertkit.verbose import teardown_logger

pytest_plugins = ["pytester", "assertkit.plugin"]


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from assertkit loggers after each test.

    The loggers stay registered: module-level loggers in assertkit keep
    references to them.
    """
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("assertkit")
    ]

    for name in names:
        teardown_logger(logging.getLogger(name))


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()
