"""
Run configuration for chicon.

The dispatcher builds a single RunConfig per invocation and passes it
down to the operations, so nothing below the command line relies on
global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Mode(Enum):
    """Where the icon comes from, or whether icons are removed instead."""

    ADD = "add"
    COPY = "copy"
    REMOVE = "remove"
    TYPE = "type"


class Verbosity(IntEnum):
    QUIET = -1
    NORMAL = 0
    VERBOSE = 1


@dataclass(frozen=True)
class RunConfig:
    """
    Top-level configuration for one chicon run.

    icon_source is the source path (or type name in TYPE mode) and is
    None in REMOVE mode, where every operand is a destination.
    """

    mode: Mode = Mode.ADD
    verbosity: Verbosity = Verbosity.NORMAL
    icon_source: Optional[str] = None
    destinations: Tuple[str, ...] = ()

    @property
    def quiet(self) -> bool:
        return self.verbosity <= Verbosity.QUIET

    @property
    def verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERBOSE
