"""Ray-based star selection and the selected-star info readout."""

import logging
import math
from typing import Sequence

import numpy as np

from starmap3d.i18n import t
from starmap3d.models import Camera, Pick, Ray, StarEntity

logger = logging.getLogger(__name__)

LIGHT_YEARS_PER_PARSEC = 3.262


def _unit(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def ndc_from_pixels(px: float, py: float, width: float, height: float) -> tuple[float, float]:
    """Window pixel (origin top-left) to normalized device coordinates, +y up."""
    return (px / width) * 2 - 1, -(py / height) * 2 + 1


def ray_from_ndc(ndc_x: float, ndc_y: float, camera: Camera) -> Ray:
    """Perspective ray from the camera through an NDC point.

    Args:
        ndc_x: Horizontal NDC in [-1, 1], -1 = left edge.
        ndc_y: Vertical NDC in [-1, 1], -1 = bottom edge.
        camera: Viewing camera.

    Returns:
        Ray starting at the camera position with a unit direction.
    """
    position = np.asarray(camera.position, dtype=float)
    forward = _unit(np.asarray(camera.target, dtype=float) - position)
    right = _unit(np.cross(forward, np.asarray(camera.up, dtype=float)))
    up = np.cross(right, forward)

    tan_half = math.tan(math.radians(camera.fov_deg) / 2)
    direction = _unit(
        forward + ndc_x * tan_half * camera.aspect * right + ndc_y * tan_half * up
    )
    return Ray(origin=tuple(position.tolist()), direction=tuple(direction.tolist()))


def intersect(ray: Ray, entities: Sequence[StarEntity]) -> list[Pick]:
    """Intersect a ray with every entity's sphere, nearest hit first.

    Only hits at or in front of the ray origin count. A ray starting inside
    a sphere hits its far side.
    """
    if not entities:
        return []

    origin = np.asarray(ray.origin, dtype=float)
    direction = _unit(np.asarray(ray.direction, dtype=float))
    centers = np.array([e.position.as_tuple() for e in entities])
    radii = np.array([e.visual.radius for e in entities])

    # |origin + s*direction - center|^2 = r^2, direction unit length
    oc = centers - origin
    b = oc @ direction
    c = np.einsum("ij,ij->i", oc, oc) - radii**2
    disc = b**2 - c

    hit = disc >= 0
    root = np.sqrt(np.where(hit, disc, 0.0))
    near = b - root
    far = b + root
    dist = np.where(near >= 0, near, far)
    hit &= dist >= 0

    order = np.argsort(dist[hit], kind="stable")
    indices = np.flatnonzero(hit)[order]
    return [Pick(entity=entities[i], distance=float(dist[i])) for i in indices]


def pick(ray: Ray, entities: Sequence[StarEntity]) -> Pick | None:
    """Return the nearest entity hit by ray, or None."""
    hits = intersect(ray, entities)
    if not hits:
        logger.debug("No star hit by ray from %s", ray.origin)
        return None
    logger.debug("Star selected: %s", hits[0].entity.name)
    return hits[0]


def light_years(distance_pc: float) -> float | None:
    """Parsecs to light years. None for the reference body (distance 0)."""
    if distance_pc == 0:
        return None
    return distance_pc * LIGHT_YEARS_PER_PARSEC


def format_distance(distance_pc: float, lang: str = "en") -> str:
    ly = light_years(distance_pc)
    value = t("not_applicable", lang) if ly is None else f"{ly:.2f}"
    return f"{value} {t('unit_light_years', lang)}"


def format_star_info(entity: StarEntity, lang: str = "en") -> str:
    """Two-line readout for a selected star.

    Example:
        Star: Sirius
        Distance: 8.60 light years
    """
    return (
        f"{t('label_star', lang)}: {entity.name}\n"
        f"{t('label_distance', lang)}: {format_distance(entity.distance_pc, lang)}"
    )


def selection_labels(entities: Sequence[StarEntity]) -> list[str]:
    """One distinct label per entity, in order.

    Repeated names get a " #n" occurrence suffix so each label maps back to
    exactly one entity.
    """
    totals: dict[str, int] = {}
    for e in entities:
        totals[e.name] = totals.get(e.name, 0) + 1
    seen: dict[str, int] = {}
    labels = []
    for e in entities:
        if totals[e.name] == 1:
            labels.append(e.name)
            continue
        seen[e.name] = seen.get(e.name, 0) + 1
        labels.append(f"{e.name} #{seen[e.name]}")
    return labels
