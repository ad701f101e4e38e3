"""Plotly 3D interactive star map renderer.

Each star is drawn twice: a large translucent glow marker under a solid
core marker. Hovering a star shows the same readout the picker produces.
"""

import numpy as np
import plotly.graph_objects as go

from starmap3d.models import Camera, CatalogData
from starmap3d.picker import format_star_info

_BG = "#000000"
_GLOW_SCALE = 6  # Glow diameter relative to the star
_GLOW_OPACITY = 0.25
_PIXELS_PER_UNIT = 40  # Scene radius -> marker pixel size
_EYE_AT_MAX_DISTANCE = 2.5


def marker_sizes(radii: np.ndarray) -> np.ndarray:
    """Sphere radius (scene units) to Plotly marker diameter (px)."""
    return np.maximum(2 * radii * _PIXELS_PER_UNIT, 1.0)


def eye_position(camera: Camera) -> np.ndarray:
    """Plotly scene eye for camera, orbit distance clamped to its zoom limits.

    Plotly's eye is in normalized scene units: max_distance maps to
    _EYE_AT_MAX_DISTANCE and nearer cameras scale down linearly.
    """
    offset = np.asarray(camera.position, dtype=float) - np.asarray(camera.target, dtype=float)
    distance = float(np.linalg.norm(offset))
    if distance == 0:
        offset, distance = np.array([0.0, 0.0, 1.0]), 1.0
    clamped = min(max(distance, camera.min_distance), camera.max_distance)
    return offset / distance * clamped / camera.max_distance * _EYE_AT_MAX_DISTANCE


def render_plotly_chart(
    catalog: CatalogData, lang: str = "en", camera: Camera | None = None
) -> go.Figure:
    """Render CatalogData as a Plotly 3D interactive star map.

    Args:
        catalog: Fully computed catalog.
        lang: Language code ('ko' or 'en') for hover labels.
        camera: Initial viewpoint. Defaults to Camera() on the +z axis.

    Returns:
        Plotly Figure object.
    """
    camera = camera or Camera()
    entities = catalog.entities

    xs = [e.position.x for e in entities]
    ys = [e.position.y for e in entities]
    zs = [e.position.z for e in entities]
    colors = [e.visual.color.to_css() for e in entities]
    sizes = marker_sizes(np.array([e.visual.radius for e in entities], dtype=float))
    hover = [format_star_info(e, lang).replace("\n", "<br>") for e in entities]

    glow_trace = go.Scatter3d(
        x=xs,
        y=ys,
        z=zs,
        mode="markers",
        marker=dict(
            size=list(sizes * _GLOW_SCALE),
            color=colors,
            opacity=_GLOW_OPACITY,
            line=dict(width=0),
        ),
        hoverinfo="skip",
        name="glow",
    )

    star_trace = go.Scatter3d(
        x=xs,
        y=ys,
        z=zs,
        mode="markers",
        marker=dict(
            size=list(sizes),
            color=colors,
            opacity=1.0,
            line=dict(width=0),
        ),
        text=hover,
        hovertemplate="%{text}<extra></extra>",
        customdata=[e.name for e in entities],
        name="stars",
    )

    fig = go.Figure(data=[glow_trace, star_trace])

    eye = eye_position(camera)
    hidden_axis = dict(visible=False, showbackground=False)

    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        scene=dict(
            xaxis=hidden_axis,
            yaxis=hidden_axis,
            zaxis=hidden_axis,
            bgcolor=_BG,
            aspectmode="data",
            camera=dict(
                eye=dict(x=float(eye[0]), y=float(eye[1]), z=float(eye[2])),
                up=dict(x=camera.up[0], y=camera.up[1], z=camera.up[2]),
                projection=dict(type="perspective"),
            ),
        ),
        hoverlabel=dict(bgcolor="rgba(255, 255, 255, 0.8)", font=dict(color="#000000")),
    )

    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]

    return fig
