"""Logging setup for the imgproc command line.

Verbosity comes from ``--log-level`` when given, otherwise from the balance
of ``-v`` and ``-q`` flags around INFO. Log records emitted while a batch
progress bar is running are routed through tqdm so they do not tear the bar.
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from tqdm.contrib.logging import logging_redirect_tqdm

from config import LOG_DATE_FORMAT, LOG_FORMAT, QUIET_LOGGERS

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Levels reachable with -v/-q, quietest last; INFO is the default step
_VERBOSITY_STEPS = (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR)
_DEFAULT_STEP = _VERBOSITY_STEPS.index(logging.INFO)


def add_logging_args(parser: argparse.ArgumentParser) -> None:
    """Add --log-level, -v and -q to a parser."""
    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        choices=tuple(LOG_LEVELS),
        help="Explicit log level; overrides -v and -q",
    )
    group.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="More output (-v shows one line per processed image)",
    )
    group.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Less output (-q hides progress messages, -qq leaves errors only)",
    )


def resolve_log_level(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    if log_level:
        return LOG_LEVELS[log_level.lower()]
    step = _DEFAULT_STEP + quiet - verbose
    return _VERBOSITY_STEPS[min(max(step, 0), len(_VERBOSITY_STEPS) - 1)]


def configure_logging(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
    stream: TextIO | None = None,
) -> int:
    """Configure root logging and return the active level.

    Existing root handlers (pytest's, for instance) are kept and only have
    their level adjusted. Loggers in QUIET_LOGGERS never go below WARNING.
    """
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            stream=stream or sys.stdout,
        )
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)
    return level


@contextmanager
def progress_logging() -> Iterator[None]:
    """Send console log output through tqdm.write while a bar is active."""
    with logging_redirect_tqdm():
        yield
