"""
Command-line interface for chicon.

This module wires the real collaborators together and delegates the
whole command line to the dispatcher. Option handling lives in the
dispatcher rather than in argparse because option order, clustering
and "last one wins" are part of the tool's behaviour.
"""

from __future__ import annotations

import os
import sys
from typing import List, Optional

from . import PROG_NAME, __version__
from .dispatcher import Dispatcher
from .errors import ChiconError
from .filesystem import LocalFileSystem
from .icons.cocoa import CocoaIconService
from .output import Stream, Writer


def program_name(argv0: Optional[str] = None) -> str:
    """
    Return the name chicon was invoked as.

    Running the module directly (python -m chicon.cli) reports as
    "chicon" rather than "cli.py".
    """

    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""
    name = os.path.basename(argv0)
    if not name or name.endswith(".py"):
        return PROG_NAME
    return name


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    name = program_name()
    writer = Writer()
    dispatcher = Dispatcher(
        name=name,
        version=__version__,
        writer=writer,
        icons=CocoaIconService(),
        filesystem=LocalFileSystem(),
    )

    try:
        return dispatcher.run(argv)
    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        return 130
    except ChiconError as exc:
        writer.write_line(Stream.ERR, f"{name}: error: {exc}")
        return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
