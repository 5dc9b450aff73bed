"""Unit tests for Marker / Icon value types."""

import pytest

from mapmarkers.model.models import Icon, Marker, is_valid_color


class TestIcon:

    def test_to_dict_omits_unset_fields(self):
        assert Icon("pin.png").to_dict() == {"url": "pin.png"}

    def test_from_dict(self):
        icon = Icon.from_dict({"url": "pin.png", "origin": [0, 0], "size": [16, 16]})
        assert icon == Icon("pin.png", size=(16, 16), origin=(0, 0))

    def test_pairs_are_stored_as_tuples(self):
        icon = Icon("pin.png", size=[16, 16], anchor=[8, 16])
        assert icon.size == (16, 16)
        assert icon.anchor == (8, 16)
        assert hash(icon) == hash(Icon("pin.png", size=(16, 16), anchor=(8, 16)))

    def test_resolve_without_default_path(self):
        icon = Icon("pin.png")
        assert icon.resolve(None) is icon

    def test_resolve_relative(self):
        assert Icon("pin.png").resolve("icons/").url == "icons/pin.png"

    @pytest.mark.parametrize("url, absolute", [
        ("pin.png", False),
        ("sub/pin.png", False),
        ("/pin.png", True),
        ("http://example.com/pin.png", True),
        ("HTTPS://example.com/pin.png", True),
    ])
    def test_is_absolute(self, url, absolute):
        assert Icon(url).is_absolute() is absolute


class TestMarker:

    def test_to_dict_with_all_fields(self):
        marker = Marker(
            position=(1.0, 2.0),
            title="t",
            animation="BOUNCE",
            message="m",
            auto_open=True,
            icon=Icon("icons/pin.png"),
            color="0x112233",
        )
        assert marker.to_dict() == {
            "position": [1.0, 2.0],
            "title": "t",
            "animation": "BOUNCE",
            "visible": True,
            "message": "m",
            "autoOpen": True,
            "icon": {"url": "icons/pin.png"},
            "color": "0x112233",
        }

    def test_to_dict_copies_icon(self):
        marker = Marker(position=(1, 2), icon=Icon("pin.png", size=(16, 16)))
        marker.to_dict()["icon"]["size"][0] = 99
        assert marker.icon == Icon("pin.png", size=(16, 16))
        assert marker.to_dict()["icon"] == {"url": "pin.png", "size": [16, 16]}


@pytest.mark.parametrize("color, valid", [
    ("purple", True),
    ("yellow", True),
    ("orange", True),
    ("Red", False),
    ("0x0a0B0c", True),
    ("0x0a0B0c0", False),
    ("", False),
])
def test_is_valid_color(color, valid):
    assert is_valid_color(color) is valid
