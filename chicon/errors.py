"""
Custom exception types used across chicon.

Per-destination failures are reported through return values, not
exceptions. These classes cover the cases where a whole invocation
cannot proceed.
"""

from __future__ import annotations

from typing import Optional


class ChiconError(Exception):
    """Base class for all chicon specific errors."""


class UsageError(ChiconError):
    """
    Raised when the command line cannot be turned into a run.

    message is the diagnostic to print before the brief usage, or None
    when only the usage should be shown.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "invalid usage")
        self.message = message


class IconServiceError(ChiconError):
    """Raised when the icon backend itself fails."""


class IconServiceUnavailable(IconServiceError):
    """Raised when the platform icon bridge cannot be loaded."""
