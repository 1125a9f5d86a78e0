"""Logging setup for deploydoc runs.

Run progress (phase and step starts, failures) is logged to stderr through
rich. stdout stays free for the plan and run results.
"""

import logging
from enum import IntEnum
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """What a run logs at each verbosity."""

    QUIET = logging.WARNING  # failures only
    NORMAL = logging.INFO  # phases, steps and their commands
    VERBOSE = logging.DEBUG  # plus per-step timings


def resolve_level(verbosity: int = 0, quiet: bool = False) -> LogLevel:
    """Map -v/-q flags to a log level; quiet wins over verbosity."""
    if quiet:
        return LogLevel.QUIET
    if verbosity >= 1:
        return LogLevel.VERBOSE
    return LogLevel.NORMAL


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    json_mode: bool = False,
    stream: TextIO | None = None,
) -> Console:
    """Configure deploydoc logging from CLI options.

    Args:
        verbosity: Number of -v flags (2+ adds timestamps and source paths)
        quiet: Only log warnings and errors
        no_color: Disable colored output
        json_mode: Machine-readable run; log plain text without color codes
        stream: Output stream for logs (default: stderr)

    Returns:
        Rich console the log handler writes to
    """
    plain = no_color or json_mode
    console = Console(
        file=stream,
        stderr=True,
        force_terminal=not plain,
        no_color=plain,
    )

    handler = RichHandler(
        console=console,
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
        markup=False,
    )

    logging.basicConfig(
        level=resolve_level(verbosity, quiet),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return console
