"""
Filesystem checks for chicon.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod


class FileSystem(ABC):
    """
    The only filesystem question chicon asks: does this path exist?
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if something exists at path."""


class LocalFileSystem(FileSystem):
    """
    Existence checks against the host filesystem.

    Symlinks are followed, so a dangling link does not exist.
    """

    def exists(self, path: str) -> bool:
        return os.path.exists(path)
