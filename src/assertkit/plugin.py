"""pytest integration for assertkit.

Enable it from a ``conftest.py``::

    pytest_plugins = ["assertkit.plugin"]

Tests then request the ``reporter`` fixture (for the module-level helpers)
or the ``assertions`` fixture (an ``AssertionHelper``). Failures marked with
``assert_equal``/``assert_contains`` fail the test once its body returns;
``require_*`` failures stop it immediately.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from assertkit.config import AssertSettings, load_settings
from assertkit.helper import AssertionHelper
from assertkit.reporter import PytestReporter
from assertkit.verbose import setup_logger, teardown_logger

_REPORTER_KEY = pytest.StashKey[PytestReporter]()
_SETTINGS_KEY = pytest.StashKey[AssertSettings]()
_LOGGER_KEY = pytest.StashKey[logging.Logger]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("assertkit")
    group.addoption(
        "--assertkit-log",
        default=None,
        metavar="PATH",
        help="Write the assertkit debug log to PATH",
    )
    parser.addini(
        "assertkit_settings",
        help="YAML file with assertkit settings, relative to the rootdir",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    settings_file = config.getini("assertkit_settings")
    if settings_file:
        settings = load_settings(config.rootpath / settings_file)
    else:
        settings = AssertSettings()
    config.stash[_SETTINGS_KEY] = settings

    log_path = config.getoption("assertkit_log")
    if log_path:
        logger = setup_logger(Path(log_path))
        logger.debug(f"assertkit settings: {settings.model_dump()}")
        config.stash[_LOGGER_KEY] = logger


def pytest_unconfigure(config: pytest.Config) -> None:
    logger = config.stash.get(_LOGGER_KEY, None)
    if logger is not None:
        teardown_logger(logger)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item):
    # Only reached when the test body itself did not raise
    result = yield
    reporter = item.stash.get(_REPORTER_KEY, None)
    if reporter is not None and reporter.failures:
        pytest.fail(f"{reporter.failures} assertion(s) failed", pytrace=False)
    return result


@pytest.fixture
def reporter(request: pytest.FixtureRequest) -> PytestReporter:
    """Reporter for the current test."""
    rep = PytestReporter(nodeid=request.node.nodeid)
    request.node.stash[_REPORTER_KEY] = rep
    return rep


@pytest.fixture
def assertions(reporter: PytestReporter, pytestconfig: pytest.Config) -> AssertionHelper:
    """AssertionHelper bound to the current test and the suite's settings."""
    return AssertionHelper(reporter, pytestconfig.stash[_SETTINGS_KEY])
