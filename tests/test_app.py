"""Tests for the Streamlit app, driven through streamlit.testing."""

import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = Path(__file__).parent.parent / "src" / "starmap3d" / "app.py"


@pytest.fixture
def twin_catalog(tmp_path, monkeypatch):
    """Two stars sharing a name at different distances."""
    rows = [
        {"name": "Twin", "ra": 0, "dec": 0, "distance_pc": 1.0,
         "luminosity": 1, "estimated_temperature": 5000},
        {"name": "Twin", "ra": 90, "dec": 0, "distance_pc": 10.0,
         "luminosity": 1, "estimated_temperature": 5000},
    ]
    path = tmp_path / "twins.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    monkeypatch.setenv("STARMAP3D_CATALOG", str(path))
    monkeypatch.setenv("STARMAP3D_LANG", "en")
    return path


def _info_boxes(at):
    return [m.value for m in at.markdown if "star-info" in m.value]


def test_loads_configured_catalog(twin_catalog):
    at = AppTest.from_file(str(APP), default_timeout=30).run()
    assert not at.exception
    assert list(at.selectbox[0].options) == ["Sun", "Twin #1", "Twin #2"]
    assert _info_boxes(at) == []


def test_duplicate_names_select_the_chosen_star(twin_catalog):
    at = AppTest.from_file(str(APP), default_timeout=30).run()
    at.selectbox[0].set_value(2).run()
    (info,) = _info_boxes(at)
    assert "32.62 light years" in info

    at.selectbox[0].set_value(1).run()
    (info,) = _info_boxes(at)
    assert "3.26 light years" in info


def test_bad_catalog_shows_error(tmp_path, monkeypatch):
    monkeypatch.setenv("STARMAP3D_CATALOG", str(tmp_path / "missing.json"))
    monkeypatch.setenv("STARMAP3D_LANG", "en")
    at = AppTest.from_file(str(APP), default_timeout=30).run()
    assert not at.exception
    assert any("Could not load the catalog" in m.value for m in at.markdown)
