"""
macOS icon backend built on the pyobjc Cocoa bridge.

Custom icons are set through NSWorkspace, which is what the Finder
displays. The bridge is imported on first use so that importing this
module is safe on any platform.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..errors import IconServiceUnavailable
from .interface import Icon, IconService

LOG = logging.getLogger(__name__)

# NSWorkspaceIconCreationOptions: no flags.
_NO_OPTIONS = 0


class CocoaIconService(IconService):
    """
    IconService backed by NSImage and NSWorkspace.
    """

    def __init__(self) -> None:
        self._cocoa: Optional[Any] = None

    @property
    def cocoa(self) -> Any:
        if self._cocoa is None:
            try:
                import Cocoa

                self._cocoa = Cocoa
            except ImportError as exc:
                raise IconServiceUnavailable(
                    "setting file icons requires macOS with pyobjc-framework-Cocoa "
                    f"installed ({exc})"
                ) from exc
        return self._cocoa

    @property
    def workspace(self) -> Any:
        return self.cocoa.NSWorkspace.sharedWorkspace()

    def load_from_file_contents(self, path: str) -> Optional[Icon]:
        LOG.debug("Loading image from contents of %s", path)
        return self.cocoa.NSImage.alloc().initWithContentsOfFile_(path)

    def load_existing_icon(self, path: str) -> Optional[Icon]:
        LOG.debug("Loading icon shown for %s", path)
        return self.workspace.iconForFile_(path)

    def load_for_type(self, type_name: str) -> Optional[Icon]:
        LOG.debug("Loading default icon for file type %s", type_name)
        return self.workspace.iconForFileType_(type_name)

    def clear_icon(self, path: str) -> bool:
        LOG.debug("Clearing custom icon on %s", path)
        return bool(self.workspace.setIcon_forFile_options_(None, path, _NO_OPTIONS))

    def set_icon(self, icon: Icon, path: str) -> bool:
        LOG.debug("Setting custom icon on %s", path)
        return bool(self.workspace.setIcon_forFile_options_(icon, path, _NO_OPTIONS))
