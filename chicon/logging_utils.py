"""
Logging helpers for chicon.

Log records are developer tracing. Everything the user is meant to read
goes through the Writer, so the levels here only decide how much of the
tracing leaks onto standard error.
"""

from __future__ import annotations

import logging

from .config import Verbosity


def configure_logging(verbosity: Verbosity) -> None:
    """
    Configure the root logger based on the run verbosity.

    QUIET   -> CRITICAL
    NORMAL  -> WARNING
    VERBOSE -> INFO
    """

    if verbosity <= Verbosity.QUIET:
        level = logging.CRITICAL
    elif verbosity == Verbosity.NORMAL:
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
