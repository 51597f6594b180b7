import io
import sys
import types
from typing import Dict, List, Optional, Set, Tuple

import pytest

from chicon.dispatcher import Dispatcher
from chicon.filesystem import FileSystem
from chicon.icons import IconService
from chicon.operations import OperationContext
from chicon.output import Writer


class FakeIconService(IconService):
    """
    In-memory icon backend that records every call.

    Icons are plain strings such as "contents:a.png" so tests can see
    which loader produced the icon that was set.
    """

    def __init__(self):
        self.calls: List[Tuple[str, ...]] = []
        self.unloadable: Set[str] = set()
        self.failing_set: Set[str] = set()
        self.failing_clear: Set[str] = set()
        self.icons: Dict[str, str] = {}

    def load_from_file_contents(self, path: str) -> Optional[str]:
        self.calls.append(("load_from_file_contents", path))
        return None if path in self.unloadable else f"contents:{path}"

    def load_existing_icon(self, path: str) -> Optional[str]:
        self.calls.append(("load_existing_icon", path))
        return None if path in self.unloadable else f"existing:{path}"

    def load_for_type(self, type_name: str) -> Optional[str]:
        self.calls.append(("load_for_type", type_name))
        return None if type_name in self.unloadable else f"type:{type_name}"

    def clear_icon(self, path: str) -> bool:
        self.calls.append(("clear_icon", path))
        if path in self.failing_clear:
            return False
        self.icons.pop(path, None)
        return True

    def set_icon(self, icon, path: str) -> bool:
        self.calls.append(("set_icon", icon, path))
        if path in self.failing_set:
            return False
        self.icons[path] = icon
        return True

    def calls_named(self, name: str) -> List[Tuple[str, ...]]:
        return [call for call in self.calls if call[0] == name]


class FakeFileSystem(FileSystem):
    def __init__(self, existing=()):
        self.existing = set(existing)
        self.checked: List[str] = []

    def exists(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.existing


class Harness:
    """A dispatcher wired to fakes, with its output captured."""

    def __init__(self, existing=()):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.writer = Writer(stdout=self.stdout, stderr=self.stderr)
        self.icons = FakeIconService()
        self.filesystem = FakeFileSystem(existing)
        self.dispatcher = Dispatcher(
            name="chicon",
            version="9.9.9",
            writer=self.writer,
            icons=self.icons,
            filesystem=self.filesystem,
        )

    def run(self, *arguments: str) -> int:
        return self.dispatcher.run(list(arguments))

    def context(self) -> OperationContext:
        return OperationContext(
            name="chicon",
            writer=self.writer,
            icons=self.icons,
            filesystem=self.filesystem,
        )

    @property
    def out_lines(self) -> List[str]:
        return self.stdout.getvalue().splitlines()

    @property
    def err_lines(self) -> List[str]:
        return self.stderr.getvalue().splitlines()


@pytest.fixture
def harness():
    return Harness(existing={"a.txt", "b.txt", "c.txt", "icon.png"})


@pytest.fixture
def make_harness():
    return Harness


class FakeWorkspace:
    """Stands in for NSWorkspace.sharedWorkspace()."""

    def __init__(self):
        self.set_calls: List[Tuple[object, str, int]] = []
        self.refuse: Set[str] = set()

    def iconForFile_(self, path):
        return f"existing:{path}"

    def iconForFileType_(self, type_name):
        return f"type:{type_name}"

    def setIcon_forFile_options_(self, icon, path, options):
        self.set_calls.append((icon, path, options))
        return path not in self.refuse


class FakeNSImage:
    def initWithContentsOfFile_(self, path):
        # Only .png files count as images here.
        return f"contents:{path}" if path.endswith(".png") else None

    @classmethod
    def alloc(cls):
        return cls()


@pytest.fixture
def fake_cocoa(monkeypatch):
    """Install a stand-in Cocoa module and return its shared workspace."""

    workspace = FakeWorkspace()

    class NSWorkspace:
        @staticmethod
        def sharedWorkspace():
            return workspace

    module = types.ModuleType("Cocoa")
    module.NSWorkspace = NSWorkspace
    module.NSImage = FakeNSImage
    monkeypatch.setitem(sys.modules, "Cocoa", module)
    return workspace
