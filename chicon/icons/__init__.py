"""
Icon backends for chicon.

The operations only talk to the IconService interface. The Cocoa
implementation is the one used on macOS.
"""

from .interface import Icon, IconService

__all__ = ["Icon", "IconService"]
