"""Call-site lookup for assertion diagnostics."""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CallerLocation:
    """Source position of an assertion call.

    Attributes:
        file: Base name of the source file, directory stripped.
        line: Line number inside that file.
    """

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


UNKNOWN_LOCATION = CallerLocation(file="???", line=0)


def caller_location(skips: int = 1) -> CallerLocation:
    """Return the location ``skips`` frames above the function that calls this.

    With ``skips=1`` an assertion function calling ``caller_location`` gets
    the line of the test statement that invoked it. Every extra wrapper
    between the test and the assertion needs one more skip, otherwise the
    reported line points into the wrapper.

    Returns ``UNKNOWN_LOCATION`` when the stack is shallower than requested.
    """
    if skips < 0:
        raise ValueError(f"skips must be >= 0, got {skips}")

    frame = inspect.currentframe()
    try:
        # +1 steps over this function's own frame
        for _ in range(skips + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_LOCATION
        return CallerLocation(
            file=os.path.basename(frame.f_code.co_filename),
            line=frame.f_lineno,
        )
    finally:
        del frame


def location_here() -> CallerLocation:
    """Capture the caller's own position, for passing as ``location=``."""
    return caller_location(1)
