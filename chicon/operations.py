"""
The two things chicon can do to a list of files: apply an icon, or
remove custom icons.

Each destination is handled independently. A missing file or a failed
icon call is reported, recorded in the exit status, and the loop moves
on to the next destination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from .config import Mode, Verbosity
from .filesystem import FileSystem
from .icons.interface import Icon, IconService
from .output import Stream, Writer

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass
class OperationContext:
    """
    Collaborators shared by the operations.

    name prefixes every diagnostic line.
    """

    name: str
    writer: Writer
    icons: IconService
    filesystem: FileSystem

    def report(self, message: str, verbosity: Verbosity) -> None:
        if verbosity > Verbosity.QUIET:
            self.writer.write_line(Stream.ERR, f"{self.name}: {message}")

    def trace(self, message: str, verbosity: Verbosity) -> None:
        if verbosity >= Verbosity.VERBOSE:
            self.writer.write_line(Stream.OUT, message)


def _resolve_icon(icons: IconService, mode: Mode, source: str) -> Optional[Icon]:
    loaders: Dict[Mode, Callable[[str], Optional[Icon]]] = {
        Mode.ADD: icons.load_from_file_contents,
        Mode.COPY: icons.load_existing_icon,
        Mode.TYPE: icons.load_for_type,
    }
    return loaders[mode](source)


def apply_icon(
    ctx: OperationContext,
    source: str,
    destinations: Sequence[str],
    mode: Mode = Mode.ADD,
    verbosity: Verbosity = Verbosity.NORMAL,
) -> int:
    """
    Resolve one icon from source and set it on every destination.

    source is a path, except in TYPE mode where it names a file type.
    Nothing is touched if the icon cannot be resolved. Returns 0 if
    every destination got the icon, 1 otherwise.
    """

    if mode is not Mode.TYPE and not ctx.filesystem.exists(source):
        ctx.report(f"No such file or directory: {source}", verbosity)
        return EXIT_FAILURE

    icon = _resolve_icon(ctx.icons, mode, source)
    if icon is None:
        if mode is Mode.TYPE:
            ctx.report(f"Failed to load icon for file type: {source}", verbosity)
        else:
            ctx.report(f"Failed to load icon from file: {source}", verbosity)
        return EXIT_FAILURE

    LOG.debug("Applying %s icon from %s to %d file(s)", mode.value, source, len(destinations))

    status = EXIT_OK
    for path in destinations:
        if not ctx.filesystem.exists(path):
            ctx.report(f"No such file or directory: {path}", verbosity)
            status = EXIT_FAILURE
            continue

        # Best effort; a file without a custom icon cannot be cleared.
        ctx.icons.clear_icon(path)
        if not ctx.icons.set_icon(icon, path):
            ctx.report(f"Failed to set icon on file: {path}", verbosity)
            status = EXIT_FAILURE
            continue

        ctx.trace(f"{source} -> {path}", verbosity)

    return status


def remove_icons(
    ctx: OperationContext,
    destinations: Sequence[str],
    verbosity: Verbosity = Verbosity.NORMAL,
) -> int:
    """
    Clear the custom icon of every destination.

    Returns 0 if every destination was cleared, 1 otherwise.
    """

    LOG.debug("Removing icons from %d file(s)", len(destinations))

    status = EXIT_OK
    for path in destinations:
        if not ctx.filesystem.exists(path):
            ctx.report(f"No such file or directory: {path}", verbosity)
            status = EXIT_FAILURE
            continue

        if not ctx.icons.clear_icon(path):
            ctx.report(f"Failed to remove icon from file: {path}", verbosity)
            status = EXIT_FAILURE
            continue

        ctx.trace(path, verbosity)

    return status
