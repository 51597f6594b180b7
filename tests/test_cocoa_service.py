import sys

import pytest

from chicon.errors import IconServiceUnavailable
from chicon.icons.cocoa import CocoaIconService


def test_loaders_map_to_cocoa_calls(fake_cocoa):
    service = CocoaIconService()

    assert service.load_from_file_contents("icon.png") == "contents:icon.png"
    assert service.load_from_file_contents("notes.txt") is None
    assert service.load_existing_icon("a.txt") == "existing:a.txt"
    assert service.load_for_type("txt") == "type:txt"


def test_set_and_clear_go_through_set_icon_for_file(fake_cocoa):
    fake_cocoa.refuse.add("locked.txt")
    service = CocoaIconService()

    assert service.set_icon("icon", "a.txt") is True
    assert service.clear_icon("a.txt") is True
    assert service.set_icon("icon", "locked.txt") is False

    assert fake_cocoa.set_calls == [
        ("icon", "a.txt", 0),
        (None, "a.txt", 0),
        ("icon", "locked.txt", 0),
    ]


def test_missing_bridge_raises_on_first_use(monkeypatch):
    monkeypatch.setitem(sys.modules, "Cocoa", None)
    service = CocoaIconService()

    with pytest.raises(IconServiceUnavailable) as excinfo:
        service.load_existing_icon("a.txt")
    assert "pyobjc-framework-Cocoa" in str(excinfo.value)


def test_constructing_service_does_not_import_bridge(monkeypatch):
    monkeypatch.setitem(sys.modules, "Cocoa", None)
    CocoaIconService()
