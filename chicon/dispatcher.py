"""
Command dispatch for chicon.

The dispatcher turns a raw argument list into a RunConfig and hands it
to one of the operations. It is responsible for:
  - normalising the arguments,
  - matching options against a fixed table (help and version stop
    everything, the last verbosity and mode options win),
  - validating the operands, and
  - picking the icon source and the destinations.

It always returns an exit status. Usage problems and icon backend
failures are reported here, where the run's verbosity is known.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from . import PROG_NAME, __version__
from .arguments import SEPARATOR, normalize_arguments
from .config import Mode, RunConfig, Verbosity
from .errors import IconServiceError, UsageError
from .filesystem import FileSystem, LocalFileSystem
from .icons.interface import IconService
from .logging_utils import configure_logging
from .operations import EXIT_FAILURE, EXIT_OK, OperationContext, apply_icon, remove_icons
from .output import Stream, Writer
from .usage import brief_usage, full_help, version_line

LOG = logging.getLogger(__name__)

HELP_OPTIONS = ("-h", "--help")
VERSION_OPTIONS = ("-V", "--version")

VERBOSITY_OPTIONS: Dict[str, Verbosity] = {
    "-q": Verbosity.QUIET,
    "--quiet": Verbosity.QUIET,
    "-v": Verbosity.VERBOSE,
    "--verbose": Verbosity.VERBOSE,
}

MODE_OPTIONS: Dict[str, Mode] = {
    "-c": Mode.COPY,
    "--copy": Mode.COPY,
    "-r": Mode.REMOVE,
    "--remove": Mode.REMOVE,
    "-t": Mode.TYPE,
    "--type": Mode.TYPE,
}


def build_run_config(mode: Mode, verbosity: Verbosity, operands: Sequence[str]) -> RunConfig:
    """
    Interpret the operands for the given mode.

    The first operand is the icon source (a type name in TYPE mode) and
    the rest are destinations. A lone operand is both the source and the
    only destination. In REMOVE mode every operand is a destination.

    Raises UsageError if there are too few operands.
    """

    required = 2 if mode is Mode.TYPE else 1
    if len(operands) < required:
        raise UsageError("File path required")

    if mode is Mode.REMOVE:
        return RunConfig(mode=mode, verbosity=verbosity, destinations=tuple(operands))

    destinations = operands[1:] if len(operands) > 1 else operands[:1]
    return RunConfig(
        mode=mode,
        verbosity=verbosity,
        icon_source=operands[0],
        destinations=tuple(destinations),
    )


class Dispatcher:
    """
    Runs one chicon command line to completion.

    The writer, icon service and filesystem are injected so the whole
    command can be driven against in-memory fakes. When omitted, the
    real standard streams, the Cocoa backend and the local filesystem
    are used.
    """

    def __init__(
        self,
        name: str = PROG_NAME,
        version: str = __version__,
        writer: Optional[Writer] = None,
        icons: Optional[IconService] = None,
        filesystem: Optional[FileSystem] = None,
    ):
        if icons is None:
            from .icons.cocoa import CocoaIconService

            icons = CocoaIconService()

        self.name = name
        self.version = version
        self.writer = writer if writer is not None else Writer()
        self.icons = icons
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()

    def run(self, arguments: Sequence[str] = ()) -> int:
        args = normalize_arguments(arguments)
        mode = Mode.ADD
        verbosity = Verbosity.NORMAL
        operands: List[str] = []

        for index, arg in enumerate(args):
            if arg in HELP_OPTIONS:
                return self.do_help()
            if arg in VERSION_OPTIONS:
                return self.do_version()
            if arg in VERBOSITY_OPTIONS:
                verbosity = VERBOSITY_OPTIONS[arg]
            elif arg in MODE_OPTIONS:
                mode = MODE_OPTIONS[arg]
            elif arg == SEPARATOR:
                operands = args[index + 1 :]
                break
            else:
                return self.unrecognised_option(arg, verbosity)

        configure_logging(verbosity)

        try:
            config = build_run_config(mode, verbosity, operands)
        except UsageError as exc:
            return self.usage_error(exc.message, verbosity)

        try:
            return self.dispatch(config)
        except IconServiceError as exc:
            if not config.quiet:
                self.writer.write_line(Stream.ERR, f"{self.name}: error: {exc}")
            return EXIT_FAILURE

    def dispatch(self, config: RunConfig) -> int:
        LOG.debug("Dispatching chicon run: %s", config)

        ctx = OperationContext(
            name=self.name,
            writer=self.writer,
            icons=self.icons,
            filesystem=self.filesystem,
        )

        if config.mode is Mode.REMOVE:
            return remove_icons(ctx, config.destinations, verbosity=config.verbosity)

        return apply_icon(
            ctx,
            config.icon_source,
            config.destinations,
            mode=config.mode,
            verbosity=config.verbosity,
        )

    def do_help(self) -> int:
        for line in full_help(self.name):
            self.writer.write_line(Stream.OUT, line)
        return EXIT_OK

    def do_version(self) -> int:
        self.writer.write_line(Stream.OUT, version_line(self.name, self.version))
        return EXIT_OK

    def unrecognised_option(self, option: str, verbosity: Verbosity) -> int:
        """
        Reject an option that is not in the table.

        The brief usage is always written; Quiet only drops the line
        naming the option.
        """

        if verbosity > Verbosity.QUIET:
            self.writer.write_line(Stream.ERR, f"{self.name}: Unrecognised option: {option}")
        self.writer.write_line(Stream.ERR, brief_usage(self.name))
        return EXIT_FAILURE

    def usage_error(self, message: Optional[str], verbosity: Verbosity) -> int:
        """
        Report a usage problem followed by the brief usage.

        Quiet suppresses both lines; the exit status is 1 either way.
        """

        if verbosity > Verbosity.QUIET:
            if message:
                self.writer.write_line(Stream.ERR, f"{self.name}: {message}")
            self.writer.write_line(Stream.ERR, brief_usage(self.name))
        return EXIT_FAILURE
