"""Astrophysical-to-visual transforms: color ramp, size scale and coordinate projection.

Every function here is pure: no I/O, no logging, no mutable module state.
"""

import math

from starmap3d.models import (
    RGB,
    CalibrationPoint,
    Position3D,
    StarRecord,
    VisualAttributes,
)

MIN_TEMPERATURE_K = 2000.0  # Coolest stars
MAX_TEMPERATURE_K = 40000.0  # Hottest stars

COLOR_TABLE: tuple[CalibrationPoint, ...] = (
    CalibrationPoint(2000, RGB(255, 50, 0)),
    CalibrationPoint(3000, RGB(255, 80, 0)),
    CalibrationPoint(4000, RGB(255, 140, 0)),
    CalibrationPoint(5000, RGB(255, 255, 0)),
    CalibrationPoint(6000, RGB(255, 255, 240)),
    CalibrationPoint(8000, RGB(255, 255, 255)),
    CalibrationPoint(10000, RGB(201, 215, 255)),
    CalibrationPoint(12000, RGB(100, 150, 255)),
    CalibrationPoint(20000, RGB(64, 156, 255)),
    CalibrationPoint(30000, RGB(0, 80, 255)),
    CalibrationPoint(40000, RGB(0, 0, 255)),
)

MIN_SIZE = 0.02
MAX_SIZE = 0.4
MIN_LUMINOSITY = 0.0001
MAX_LUMINOSITY = 30.0


class CalibrationError(RuntimeError):
    """Color table is malformed. A programming error, never a data error."""


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def lerp(a: float, b: float, f: float) -> float:
    return a + f * (b - a)


def _round_half_up(value: float) -> int:
    # round() would use banker's rounding: 64.5 -> 64
    return math.floor(value + 0.5)


def validate_table(table: tuple[CalibrationPoint, ...]) -> None:
    """Raise CalibrationError unless table has >= 2 strictly ascending points."""
    if len(table) < 2:
        raise CalibrationError(f"color table needs at least 2 points, got {len(table)}")
    for lower, upper in zip(table, table[1:]):
        if not lower.temperature_k < upper.temperature_k:
            raise CalibrationError(
                f"color table not ascending at {lower.temperature_k}K -> {upper.temperature_k}K"
            )


def _interpolate(t: float, table: tuple[CalibrationPoint, ...]) -> RGB:
    """Interpolate t within table. Raises CalibrationError if no pair brackets t."""
    for lower, upper in zip(table, table[1:]):
        if lower.temperature_k <= t <= upper.temperature_k:
            break
    else:
        validate_table(table)
        raise CalibrationError(f"no color table interval contains {t}K")

    f = (t - lower.temperature_k) / (upper.temperature_k - lower.temperature_k)
    lc, uc = lower.color, upper.color
    return RGB(
        r=_round_half_up(lerp(lc.r, uc.r, f)),
        g=_round_half_up(lerp(lc.g, uc.g, f)),
        b=_round_half_up(lerp(lc.b, uc.b, f)),
    )


def color_for_temperature(temperature_k: float) -> RGB:
    """Map a temperature to a display color by piecewise-linear interpolation.

    The input is clamped to [2000, 40000] K first, so cool and hot stars
    saturate at the COLOR_TABLE endpoints instead of raising.

    Args:
        temperature_k: Effective temperature in Kelvin. Any float.

    Returns:
        Interpolated RGB, channels rounded half up.

    Raises:
        CalibrationError: If COLOR_TABLE has no pair bracketing the clamped input.
    """
    t = clamp(temperature_k, MIN_TEMPERATURE_K, MAX_TEMPERATURE_K)
    return _interpolate(t, COLOR_TABLE)


def size_for_luminosity(luminosity: float) -> float:
    """Map luminosity (solar units) to a sphere radius in [MIN_SIZE, MAX_SIZE].

    Luminosity outside [MIN_LUMINOSITY, MAX_LUMINOSITY] is extrapolated
    linearly; only the resulting size is clamped.
    """
    f = (luminosity - MIN_LUMINOSITY) / (MAX_LUMINOSITY - MIN_LUMINOSITY)
    return clamp(lerp(MIN_SIZE, MAX_SIZE, f), MIN_SIZE, MAX_SIZE)


def project(ra_deg: float, dec_deg: float, distance: float) -> Position3D:
    """Equatorial (RA, Dec, distance) to Cartesian, same unit as distance.

    RA is the azimuth; declination is converted to colatitude. No range
    checks: out-of-range angles still give a point at the given distance.
    """
    phi = math.radians(ra_deg)
    theta = math.radians(90 - dec_deg)
    return Position3D(
        x=distance * math.sin(theta) * math.cos(phi),
        y=distance * math.sin(theta) * math.sin(phi),
        z=distance * math.cos(theta),
    )


def visual_attributes(record: StarRecord) -> VisualAttributes:
    return VisualAttributes(
        color=color_for_temperature(record.temperature_k),
        radius=size_for_luminosity(record.luminosity),
    )
