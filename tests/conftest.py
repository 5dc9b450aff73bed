"""Pytest configuration and shared fixtures for mapmarkers tests."""

import json

import pytest

from mapmarkers import MarkerCollection


# ============================================================================
# Collection Fixtures
# ============================================================================


@pytest.fixture
def collection() -> MarkerCollection:
    """Empty marker collection."""
    return MarkerCollection()


@pytest.fixture
def descriptions() -> list:
    """Bulk-load marker descriptions covering every optional field."""
    return [
        {"coordinates": [50.08, 14.42], "title": "Prague", "animation": "DROP"},
        {"coordinates": {"lat": 49.19, "lng": 16.61}, "message": "Brno"},
        {
            "coordinates": [48.15, 17.11],
            "message": ["Bratislava", True],
            "icon": {"url": "city.png", "size": [20, 32], "anchor": [10, 32]},
            "color": "0x00FF00",
        },
        {"coordinates": [47.5, 19.04], "icon": "capital.png", "color": "red"},
    ]


@pytest.fixture
def marker_document(tmp_path, descriptions):
    """Write a marker document to a temporary file and return its path."""
    path = tmp_path / "markers.json"
    doc = {
        "default_icon_path": "icons",
        "marker_clusterer": True,
        "fit_bounds": True,
        "markers": descriptions,
    }
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path
