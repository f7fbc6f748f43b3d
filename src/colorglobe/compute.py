"""Globe computation layer: dot sampling and perspective projection."""

import logging
import math

import numpy as np

from colorglobe.models import (
    DotSpec,
    GlobeFrame,
    GlobeGeometry,
    GlobeQuery,
    ProjectedPoint,
    RGBColor,
)

logger = logging.getLogger(__name__)

GLOBE_RADIUS_FACTOR = 0.7
DOT_RADIUS_FACTOR = 0.005
FIELD_OF_VIEW_FACTOR = 0.8
TWO_PI = 2 * math.pi

ROTATION_PERIOD_MS = 20000  # One full turn
DEFAULT_TOTAL_DOTS = 1000
MIN_TOTAL_DOTS = 100
MAX_TOTAL_DOTS = 1000
_DOT_SLIDER_STEPS = 7  # Intermediate stops between min and max

# Slider positions, truncated to int: 100, 212, 325, ..., 1000
DOT_COUNT_CHOICES: tuple[int, ...] = tuple(
    int(
        MIN_TOTAL_DOTS
        + i * (MAX_TOTAL_DOTS - MIN_TOTAL_DOTS) / (_DOT_SLIDER_STEPS + 1)
    )
    for i in range(_DOT_SLIDER_STEPS + 2)
)

GLOBE_SWATCHES: dict[str, RGBColor] = {
    "red": RGBColor(255, 0, 0),
    "cyan": RGBColor(0, 255, 255),
    "magenta": RGBColor(255, 0, 255),
    "green": RGBColor(0, 255, 0),
    "light_gray": RGBColor(204, 204, 204),
}
DEFAULT_SWATCH = "magenta"


class InvalidSurfaceError(ValueError):
    """Render surface has no positive extent."""


def generate_dots(
    total: int, rng: np.random.Generator | int | None = None
) -> tuple[DotSpec, ...]:
    """Sample dot placements uniformly over the sphere surface.

    Azimuth is drawn as arccos(2u - 1) rather than uniformly, otherwise dots
    cluster at the poles. Polar angle is uniform in [0, 2pi).

    Args:
        total: Number of dots.
        rng: numpy Generator, integer seed, or None for fresh entropy.

    Returns:
        Tuple of DotSpec, regenerated in full whenever the count changes.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    generator = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    u = generator.random(total)
    v = generator.random(total)
    azimuth = np.arccos(u * 2 - 1)
    polar = v * TWO_PI
    logger.debug("Generated %d globe dots", total)
    return tuple(
        DotSpec(azimuth_angle=float(a), polar_angle=float(p))
        for a, p in zip(azimuth, polar)
    )


def globe_geometry(width: float, height: float) -> GlobeGeometry:
    """Derive globe radius, camera distance, and dot radius from surface size.

    Raises:
        InvalidSurfaceError: If min(width, height) is not positive.
    """
    min_dimension = min(width, height)
    if not min_dimension > 0:
        raise InvalidSurfaceError(f"Surface must be positive: {width}x{height}")
    return GlobeGeometry(
        min_dimension=min_dimension,
        globe_radius=min_dimension * GLOBE_RADIUS_FACTOR,
        field_of_view=min_dimension * FIELD_OF_VIEW_FACTOR,
        dot_radius=min_dimension * DOT_RADIUS_FACTOR,
    )


def rotation_angle(progress: float) -> float:
    """Map animation progress (wraps every 1.0) to a rotation in [0, 2pi)."""
    return (progress % 1.0) * TWO_PI


def rotation_at(elapsed_ms: float, period_ms: float = ROTATION_PERIOD_MS) -> float:
    """Rotation for a linear, infinitely repeating turn of period_ms."""
    if period_ms <= 0:
        raise ValueError(f"period_ms must be positive, got {period_ms}")
    return rotation_angle(elapsed_ms / period_ms)


def project_dot(
    dot: DotSpec, rotation: float, width: float, height: float
) -> ProjectedPoint:
    """Rotate a single dot about the y axis and project it onto the surface.

    The sphere is translated so its near pole sits at z=0; the camera looks
    down -z from distance field_of_view.
    """
    geo = globe_geometry(width, height)
    r = geo.globe_radius

    # Position on the sphere surface
    x = r * math.sin(dot.azimuth_angle) * math.cos(dot.polar_angle)
    y = r * math.sin(dot.azimuth_angle) * math.sin(dot.polar_angle)
    z = r * math.cos(dot.azimuth_angle) - r

    # Rotation about the y axis (y unchanged)
    rotated_x = math.cos(rotation) * x + math.sin(rotation) * (z + r)
    rotated_z = -math.sin(rotation) * x + math.cos(rotation) * (z + r) - r

    scale = geo.field_of_view / (geo.field_of_view - rotated_z)
    return ProjectedPoint(
        screen_x=rotated_x * scale + width / 2,
        screen_y=y * scale + height / 2,
        radius=geo.dot_radius * scale,
    )


def project_arrays(
    dots: tuple[DotSpec, ...], rotation: float, width: float, height: float
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vectorized projection. Returns (screen_x, screen_y, radius) arrays."""
    geo = globe_geometry(width, height)
    r = geo.globe_radius
    azimuth = np.array([d.azimuth_angle for d in dots], dtype=float)
    polar = np.array([d.polar_angle for d in dots], dtype=float)

    x = r * np.sin(azimuth) * np.cos(polar)
    y = r * np.sin(azimuth) * np.sin(polar)
    z = r * np.cos(azimuth) - r

    cos_t = math.cos(rotation)
    sin_t = math.sin(rotation)
    rotated_x = cos_t * x + sin_t * (z + r)
    rotated_z = -sin_t * x + cos_t * (z + r) - r

    scale = geo.field_of_view / (geo.field_of_view - rotated_z)
    return (
        rotated_x * scale + width / 2,
        y * scale + height / 2,
        geo.dot_radius * scale,
    )


def project_dots(
    dots: tuple[DotSpec, ...], rotation: float, width: float, height: float
) -> tuple[ProjectedPoint, ...]:
    """Project every dot for one frame, preserving input order."""
    xs, ys, radii = project_arrays(dots, rotation, width, height)
    return tuple(
        ProjectedPoint(screen_x=float(x), screen_y=float(y), radius=float(rad))
        for x, y, rad in zip(xs, ys, radii)
    )


def compute_frame(
    dots: tuple[DotSpec, ...],
    rotation: float,
    width: float,
    height: float,
    dot_color: RGBColor = GLOBE_SWATCHES[DEFAULT_SWATCH],
) -> GlobeFrame:
    """Project dots into a GlobeFrame ready for rendering."""
    return GlobeFrame(
        width=width,
        height=height,
        rotation=rotation,
        points=project_dots(dots, rotation, width, height),
        dot_color=dot_color,
    )


def compute_frames(
    dots: tuple[DotSpec, ...],
    n_frames: int,
    width: float,
    height: float,
    dot_color: RGBColor = GLOBE_SWATCHES[DEFAULT_SWATCH],
) -> tuple[GlobeFrame, ...]:
    """Sample one full turn at n_frames evenly spaced rotations.

    Args:
        dots: Fixed dot placements, reused for every frame.
        n_frames: Number of frames (>= 1). Frame i has rotation 2pi * i / n.
        width: Surface width.
        height: Surface height.
        dot_color: Dot fill color.

    Returns:
        Tuple of GlobeFrame in rotation order.
    """
    if n_frames < 1:
        raise ValueError(f"n_frames must be at least 1, got {n_frames}")
    return tuple(
        compute_frame(dots, rotation_angle(i / n_frames), width, height, dot_color)
        for i in range(n_frames)
    )


def run(query: GlobeQuery) -> GlobeFrame:
    """Top-level entry point: takes a GlobeQuery and returns a GlobeFrame.

    Args:
        query: Dot count, animation progress, surface size, seed, color.

    Returns:
        Fully computed GlobeFrame.

    Raises:
        ColorParseError: If query.dot_color is not a hex color.
        InvalidSurfaceError: If the surface has no positive extent.
    """
    dot_color = RGBColor.from_hex(query.dot_color)
    dots = generate_dots(query.total_dots, query.seed)
    frame = compute_frame(
        dots, rotation_angle(query.progress), query.width, query.height, dot_color
    )
    logger.info(
        "Computed globe frame: %d dots, rotation %.3f rad, %gx%g",
        len(frame.points),
        frame.rotation,
        query.width,
        query.height,
    )
    return frame
