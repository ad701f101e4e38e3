"""Tests for the Plotly and matplotlib renderers."""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.figure import Figure

from starmap3d.catalog import build_catalog, load_catalog
from starmap3d.models import RGB, Camera
from starmap3d.renderers.plotly_3d import eye_position, marker_sizes, render_plotly_chart
from starmap3d.renderers.static import render_static_chart, save_static_chart


@pytest.fixture
def catalog(catalog_file):
    return build_catalog(load_catalog(catalog_file), str(catalog_file))


class TestPlotly:
    def test_glow_under_stars(self, catalog):
        fig = render_plotly_chart(catalog)
        assert [trace.name for trace in fig.data] == ["glow", "stars"]

    def test_one_marker_per_entity(self, catalog):
        fig = render_plotly_chart(catalog)
        glow, stars = fig.data
        assert len(stars.x) == len(catalog.entities) == 3
        assert len(glow.x) == 3

    def test_positions_and_colors(self, catalog):
        stars = render_plotly_chart(catalog).data[1]
        for i, entity in enumerate(catalog.entities):
            assert stars.x[i] == pytest.approx(entity.position.x)
            assert stars.z[i] == pytest.approx(entity.position.z)
            assert stars.marker.color[i] == entity.visual.color.to_css()

    def test_glow_is_larger(self, catalog):
        glow, stars = render_plotly_chart(catalog).data
        for g, s in zip(glow.marker.size, stars.marker.size):
            assert g == pytest.approx(6 * s)

    def test_hover_text(self, catalog):
        stars = render_plotly_chart(catalog).data[1]
        assert stars.text[0] == "Star: Sun<br>Distance: N/A light years"
        assert stars.text[1].startswith("Star: Sirius<br>Distance: 8.60")
        assert list(stars.customdata) == ["Sun", "Sirius", "Axis"]

    def test_hover_text_korean(self, catalog):
        stars = render_plotly_chart(catalog, lang="ko").data[1]
        assert stars.text[0].startswith("별: Sun")

    def test_camera_on_z_axis(self, catalog):
        eye = render_plotly_chart(catalog).layout.scene.camera.eye
        assert eye.x == 0 and eye.y == 0 and eye.z > 0

    def test_marker_sizes_minimum(self):
        sizes = marker_sizes(np.array([0.0, 0.02, 0.4]))
        assert sizes[0] == 1.0
        assert sizes[1] < sizes[2]

    def test_eye_scales_with_camera_distance(self):
        assert eye_position(Camera()).tolist() == pytest.approx([0, 0, 10 / 18 * 2.5])

    def test_eye_clamped_to_max_distance(self):
        far = eye_position(Camera(position=(0.0, 0.0, 100.0))).tolist()
        assert far == pytest.approx([0, 0, 2.5])

    def test_eye_clamped_to_min_distance(self):
        near = eye_position(Camera(position=(0.0, 0.2, 0.0))).tolist()
        assert near == pytest.approx([0, 1 / 18 * 2.5, 0])


class TestStatic:
    def test_render_returns_figure(self, catalog):
        fig = render_static_chart(catalog, chart_size=4)
        assert isinstance(fig, Figure)
        plt.close(fig)

    def test_save_png(self, catalog, tmp_path):
        out = save_static_chart(catalog, tmp_path / "out" / "chart.png")
        assert out.exists()
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_rgb_encodings():
    c = RGB(255, 65, 0)
    assert c.to_hex() == "#ff4100"
    assert c.to_css() == "rgb(255, 65, 0)"
    assert c.to_rgba(0.6) == "rgba(255, 65, 0, 0.6)"
    assert c.to_int() == 0xFF4100
    assert RGB.from_int(c.to_int()) == c
    assert c.to_unit() == (1.0, 65 / 255, 0.0)
