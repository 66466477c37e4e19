"""
Logging helpers for folder-manager.

Prompts and results are printed for the user on stdout; the logger
carries diagnostics on stderr, so by default only warnings (such as a
file browser that failed to launch) reach the terminal.
"""

from __future__ import annotations

import logging
import sys

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for_verbosity(verbosity: int) -> int:
    """
    Map a -v count to a logging level.

    0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG.
    """

    index = min(max(verbosity, 0), len(_LEVELS) - 1)
    return _LEVELS[index]


def configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=level_for_verbosity(verbosity),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
