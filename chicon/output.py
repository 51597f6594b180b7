"""
Line-oriented output for chicon.

All user-facing text goes through a Writer so that the dispatcher and
the operations can be exercised against in-memory streams. How a
write is joined and terminated, and which stream it goes to, is an
explicit WriteOptions record rather than a set of optional arguments.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, TextIO


class Stream(Enum):
    OUT = "stdout"
    ERR = "stderr"


DEFAULT_SEPARATOR = " "
DEFAULT_TERMINATOR = "\n"


@dataclass(frozen=True)
class WriteOptions:
    separator: str = DEFAULT_SEPARATOR
    terminator: str = DEFAULT_TERMINATOR
    stream: Stream = Stream.OUT


TO_OUT = WriteOptions(stream=Stream.OUT)
TO_ERR = WriteOptions(stream=Stream.ERR)


class Writer:
    """
    Writes to one of two text streams.

    The streams default to the process's standard output and standard
    error as they are when the Writer is created.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def write(self, items: Sequence[Any], options: WriteOptions = TO_OUT) -> int:
        """
        Join items with options.separator, append options.terminator and
        write the result to the selected stream.

        Returns the number of bytes written, as UTF-8.
        """

        text = options.separator.join(str(item) for item in items) + options.terminator
        handle = self.stdout if options.stream is Stream.OUT else self.stderr
        handle.write(text)
        handle.flush()
        return len(text.encode("utf-8"))

    def write_line(self, stream: Stream, text: str) -> int:
        return self.write([text], TO_OUT if stream is Stream.OUT else TO_ERR)
