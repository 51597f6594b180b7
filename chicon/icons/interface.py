"""
Abstract interface for loading and setting file icons.

Keeping this separate from any platform bridge lets the dispatcher and
the operations run against in-memory fakes, and keeps the platform
import out of code paths that never touch an icon (help, version,
usage errors).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

# Whatever the backend hands back; the operations only pass it along.
Icon = Any


class IconService(ABC):
    """
    Load icons from files or file types and set or clear custom icons.

    Each call is attempted once. Failure is reported as None or False,
    never by raising.
    """

    @abstractmethod
    def load_from_file_contents(self, path: str) -> Optional[Icon]:
        """Return the image stored in the file at path, if it is one."""

    @abstractmethod
    def load_existing_icon(self, path: str) -> Optional[Icon]:
        """Return the icon currently shown for the file at path."""

    @abstractmethod
    def load_for_type(self, type_name: str) -> Optional[Icon]:
        """Return the default icon for a file type or extension."""

    @abstractmethod
    def clear_icon(self, path: str) -> bool:
        """Remove any custom icon from the file at path."""

    @abstractmethod
    def set_icon(self, icon: Icon, path: str) -> bool:
        """Set icon as the custom icon of the file at path."""
