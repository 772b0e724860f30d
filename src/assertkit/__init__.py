"""Assertion helpers for test suites that report to an injected reporter."""

from assertkit.config import AssertSettings, load_settings
from assertkit.equality import deep_equal
from assertkit.helper import (
    AssertionHelper,
    assert_contains,
    assert_equal,
    create_file,
    require_error,
    require_no_error,
)
from assertkit.location import CallerLocation, caller_location, location_here
from assertkit.reporter import (
    PytestReporter,
    RecordingReporter,
    Reporter,
    ReporterContractError,
    TestAborted,
)

__all__ = [
    "AssertSettings",
    "AssertionHelper",
    "CallerLocation",
    "PytestReporter",
    "RecordingReporter",
    "Reporter",
    "ReporterContractError",
    "TestAborted",
    "assert_contains",
    "assert_equal",
    "caller_location",
    "create_file",
    "deep_equal",
    "load_settings",
    "location_here",
    "require_error",
    "require_no_error",
]
