"""Debug log configuration for the assertkit loggers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path, verbose: bool = False, logger_name: str = "assertkit"
) -> logging.Logger:
    """
    Configure and return a logger for debug output.

    Always writes to debug_file. Optionally also writes to stderr if verbose=True.
    Module loggers under ``assertkit.`` propagate here, so the default name
    collects every helper's log lines.

    Args:
        debug_file: Path to debug log file (always created)
        verbose: If True, also log to stderr. If False, only log to file.
        logger_name: Name of the logger instance

    Returns:
        Configured logger instance.

    Raises:
        RuntimeError: if a logger with this name is already configured.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "call teardown_logger() first or pick another name"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s: %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode="a")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger


def teardown_logger(logger: logging.Logger) -> None:
    """Close and detach every handler added by setup_logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
