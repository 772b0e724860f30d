"""Reporters carry an assertion's verdict back to the running test.

A reporter is anything with ``mark_failed()`` and ``abort_now()``. The
helpers never construct one; the caller passes it in, which keeps them
usable from any test framework.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import pytest

logger = logging.getLogger(__name__)


class TestAborted(AssertionError):
    """Raised by ``RecordingReporter.abort_now`` to unwind the current test."""

    __test__ = False


class ReporterContractError(RuntimeError):
    """A reporter's ``abort_now`` returned instead of unwinding the test."""


@runtime_checkable
class Reporter(Protocol):
    """Pass/fail state of the enclosing test.

    ``mark_failed`` records a failure and returns. ``abort_now`` records a
    failure and must not return: it unwinds the test, usually by raising.
    """

    def mark_failed(self) -> None: ...

    def abort_now(self) -> None: ...


@dataclass
class RecordingReporter:
    """Framework-agnostic reporter that counts failures.

    ``abort_now`` raises ``TestAborted``, an ``AssertionError``, so both
    unittest and pytest report an aborted test as failed.

    Attributes:
        failures: Number of ``mark_failed`` calls.
        aborted: Whether ``abort_now`` was called.
    """

    failures: int = 0
    aborted: bool = False

    @property
    def failed(self) -> bool:
        return self.aborted or self.failures > 0

    def mark_failed(self) -> None:
        self.failures += 1
        logger.debug(f"Failure recorded ({self.failures} so far)")

    def abort_now(self) -> None:
        self.aborted = True
        logger.debug("Aborting test")
        raise TestAborted("test aborted by a failed requirement")


@dataclass
class PytestReporter:
    """Reporter bound to a single pytest test item.

    ``abort_now`` goes through ``pytest.fail``. Marked failures are turned
    into a test failure by ``assertkit.plugin`` once the test body returns.
    """

    nodeid: str = ""
    failures: int = 0
    aborted: bool = False

    @property
    def failed(self) -> bool:
        return self.aborted or self.failures > 0

    def mark_failed(self) -> None:
        self.failures += 1
        logger.debug(f"{self.nodeid}: failure recorded ({self.failures} so far)")

    def abort_now(self) -> None:
        self.aborted = True
        logger.debug(f"{self.nodeid}: aborting test")
        pytest.fail(f"{self.nodeid or 'test'} aborted by a failed requirement", pytrace=False)
