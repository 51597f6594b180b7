"""
Fixed help, usage and version text.
"""

from __future__ import annotations

from typing import List

_OPERANDS = [
    "  iconfile       Path to icon file, or file type",
    "  destfile       Path to destination file(s)",
]

_OPTIONS = [
    "  -h, --help     Display this usage help",
    "  -V, --version  Display version information",
    "  -q, --quiet    Reduce output verbosity",
    "  -v, --verbose  Increase output verbosity",
    "  -c, --copy     Copy icon set on iconfile instead of using its contents",
    "  -r, --remove   Remove icons from specified files",
    "  -t, --type     Treat iconfile as a file type whose icon should be used",
]


def synopsis(name: str) -> str:
    return f"{name} [-h|-V] [-q|-v] [-c|-r|-t] [--] <iconfile> [<destfile> ...]"


def brief_usage(name: str) -> str:
    return f"usage: {synopsis(name)}"


def full_help(name: str) -> List[str]:
    return ["Usage:", f"  {synopsis(name)}", "Operands:", *_OPERANDS, "Options:", *_OPTIONS]


def version_line(name: str, version: str) -> str:
    return f"{name} version {version}"
