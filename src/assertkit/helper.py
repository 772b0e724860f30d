"""Assertion helpers that report to an injected reporter.

Two families share one diagnostic routine:

* ``require_no_error`` / ``require_error`` abort the test on failure
  through ``reporter.abort_now()``.
* ``assert_equal`` / ``assert_contains`` call ``reporter.mark_failed()``
  and let the test keep running, so one test can report several failures.

Each failure prints the caller's position to stdout::

    \\tfile.py:12: message
    \\tfile.py:12: detail

``skips`` tells the helpers how many frames lie between the failing test
statement and the helper call. Code that wraps a helper in its own function
must add one per layer, or pass ``location=`` explicitly.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, NoReturn

from assertkit.config import AssertSettings
from assertkit.equality import deep_equal
from assertkit.location import CallerLocation, caller_location
from assertkit.reporter import Reporter, ReporterContractError

logger = logging.getLogger(__name__)

DEFAULT_SKIPS = 1
DEFAULT_TEMP_PREFIX = "example"


def _locate(skips: int, location: CallerLocation | None) -> CallerLocation:
    if location is not None:
        return location
    # +1 steps over _locate itself
    return caller_location(skips + 1)


def _print(location: CallerLocation, text: Any) -> None:
    print(f"\t{location}: {text}")


def _abort(reporter: Reporter) -> NoReturn:
    reporter.abort_now()
    raise ReporterContractError(
        f"{type(reporter).__name__}.abort_now() returned; it must unwind the test"
    )


def require_no_error(
    reporter: Reporter,
    err: BaseException | None,
    message: str,
    *,
    skips: int = DEFAULT_SKIPS,
    location: CallerLocation | None = None,
) -> None:
    """Abort the test if ``err`` is an exception.

    Prints the message and the error text, then calls ``reporter.abort_now()``.
    Does nothing when ``err`` is None.
    """
    if err is None:
        return

    location = _locate(skips, location)
    logger.info(f"require_no_error failed at {location}: {message}")

    _print(location, message)
    _print(location, str(err) or type(err).__name__)
    print()
    _abort(reporter)


def require_error(
    reporter: Reporter,
    err: BaseException | None,
    message: str,
    *,
    skips: int = DEFAULT_SKIPS,
    location: CallerLocation | None = None,
) -> None:
    """Abort the test if ``err`` is None, i.e. an expected failure did not happen."""
    if err is not None:
        return

    location = _locate(skips, location)
    logger.info(f"require_error failed at {location}: {message}")

    _print(location, message)
    _abort(reporter)


def assert_equal(
    reporter: Reporter,
    actual: Any,
    expected: Any,
    message: Any,
    *,
    skips: int = DEFAULT_SKIPS,
    location: CallerLocation | None = None,
) -> None:
    """Mark the test failed unless ``actual`` and ``expected`` are deeply equal.

    Equality is structural (see ``assertkit.equality.deep_equal``), never
    identity. ``message`` may be any value and is printed with ``str()``.
    """
    if deep_equal(actual, expected):
        return

    location = _locate(skips, location)
    logger.info(f"assert_equal failed at {location}: {message}")

    _print(location, message)
    _print(location, f"{actual!r} != {expected!r}")
    print()
    reporter.mark_failed()


def assert_contains(
    reporter: Reporter,
    total: str,
    part: str,
    message: str,
    *,
    skips: int = DEFAULT_SKIPS,
    location: CallerLocation | None = None,
) -> None:
    """Mark the test failed unless ``part`` occurs in ``total``.

    An empty ``part`` is contained in every string.
    """
    if part in total:
        return

    location = _locate(skips, location)
    logger.info(f"assert_contains failed at {location}: {message}")

    _print(location, message)
    _print(location, f"{total!r} doesn't contain {part!r}")
    print()
    reporter.mark_failed()


def create_file(
    reporter: Reporter,
    content: str | bytes,
    *,
    prefix: str = DEFAULT_TEMP_PREFIX,
    dir: str | None = None,
    skips: int = DEFAULT_SKIPS,
    location: CallerLocation | None = None,
) -> str:
    """Write ``content`` to a new temporary file and return its absolute path.

    Text is encoded as UTF-8 as part of the write step. Creating, writing
    and closing are each guarded by ``require_no_error``, so an OSError, or
    text that cannot be encoded, aborts the test. A file left behind by a
    failed step is not removed. On success the caller owns the file and
    must delete it.
    """
    # require_no_error is called from here, one frame below the caller
    inner_skips = skips + 1

    try:
        fd, name = tempfile.mkstemp(prefix=prefix, dir=dir)
    except OSError as exc:
        require_no_error(
            reporter, exc, "Expected no error creating temporary file",
            skips=inner_skips, location=location,
        )

    handle = os.fdopen(fd, "wb")
    try:
        data = content.encode("utf-8") if isinstance(content, str) else content
        handle.write(data)
    except (OSError, UnicodeError) as exc:
        require_no_error(
            reporter, exc, "Expected no error writing to temporary file",
            skips=inner_skips, location=location,
        )

    try:
        handle.close()
    except OSError as exc:
        require_no_error(
            reporter, exc, "Expected no error closing temporary file",
            skips=inner_skips, location=location,
        )

    path = os.path.abspath(name)
    logger.debug(f"Created temporary file {path} ({len(data)} bytes)")
    return path


class AssertionHelper:
    """The helpers bound to one reporter and one set of settings.

    Methods add their own frame to ``settings.skips``, so a test calling
    ``helper.assert_equal(...)`` gets its own line reported with the
    default settings.
    """

    def __init__(self, reporter: Reporter, settings: AssertSettings | None = None) -> None:
        self.reporter = reporter
        self.settings = settings or AssertSettings()

    @property
    def _skips(self) -> int:
        return self.settings.skips + 1

    def require_no_error(
        self, err: BaseException | None, message: str, *, location: CallerLocation | None = None
    ) -> None:
        require_no_error(self.reporter, err, message, skips=self._skips, location=location)

    def require_error(
        self, err: BaseException | None, message: str, *, location: CallerLocation | None = None
    ) -> None:
        require_error(self.reporter, err, message, skips=self._skips, location=location)

    def assert_equal(
        self, actual: Any, expected: Any, message: Any, *, location: CallerLocation | None = None
    ) -> None:
        assert_equal(self.reporter, actual, expected, message, skips=self._skips, location=location)

    def assert_contains(
        self, total: str, part: str, message: str, *, location: CallerLocation | None = None
    ) -> None:
        assert_contains(self.reporter, total, part, message, skips=self._skips, location=location)

    def create_file(self, content: str | bytes, *, location: CallerLocation | None = None) -> str:
        return create_file(
            self.reporter,
            content,
            prefix=self.settings.temp_prefix,
            dir=self.settings.temp_dir,
            skips=self._skips,
            location=location,
        )
