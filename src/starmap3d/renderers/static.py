"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from starmap3d.models import CatalogData

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(catalog: CatalogData, chart_size: int = 10) -> Figure:
    """Render CatalogData as a static matplotlib 3D scatter.

    Args:
        catalog: Fully computed catalog.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig = plt.figure(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("black")
    ax = fig.add_subplot(projection="3d")
    ax.set_facecolor("black")

    entities = catalog.entities
    xyz = np.array([e.position.as_tuple() for e in entities], dtype=float).reshape(-1, 3)
    colors = [e.visual.color.to_unit() for e in entities]
    radii = np.array([e.visual.radius for e in entities], dtype=float)

    # Glow underneath, core on top; marker area grows with radius squared
    core_size = (radii * 100) ** 2
    ax.scatter(
        xyz[:, 0], xyz[:, 1], xyz[:, 2],
        s=core_size * 36, c=colors, alpha=0.15, linewidths=0, depthshade=False,
    )
    ax.scatter(
        xyz[:, 0], xyz[:, 1], xyz[:, 2],
        s=core_size, c=colors, alpha=1.0, linewidths=0, depthshade=False,
    )

    if len(entities):
        span = float(np.abs(xyz).max()) or 1.0
        ax.set_xlim(-span, span)
        ax.set_ylim(-span, span)
        ax.set_zlim(-span, span)
    ax.axis("off")

    return fig


def save_static_chart(catalog: CatalogData, output_path: Path | None = None) -> Path:
    """Save CatalogData as a PNG file.

    Args:
        catalog: Fully computed catalog.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        stem = Path(catalog.source.rstrip("/")).stem or "catalog"
        output_path = _ROOT / "results" / f"{stem}__3d.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(catalog)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
