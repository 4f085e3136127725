"""Point-in-closed-shape test.

Order of checks, first decisive one wins:
  1. bounding-box reject (zero tolerance)
  2. boundary tolerance: within ``tolerance`` of the boundary counts as inside
  3. ray cast with a jittered direction, inside iff the deduplicated
     forward crossing count is odd

Any geometric failure classifies the point as outside.
"""

from __future__ import annotations

import logging

from areamanager.engine.config import EngineConfig
from areamanager.geometry.provider import GeometryProvider, ShapelyGeometry
from areamanager.geometry.shapes import BoundingBox, ClosedShape, Point
from areamanager.utils.geometry import distance, normalize

logger = logging.getLogger(__name__)

_DEFAULT_GEOMETRY = ShapelyGeometry()


def ray_direction(box: BoundingBox, offset_fraction: float) -> tuple[float, float]:
    """Bounding-box diagonal nudged along its perpendicular by ``offset_fraction``.

    The nudge keeps the ray off axis-aligned edges and away from vertices
    that sit exactly on the diagonal.
    """
    dx, dy = box.diagonal
    if abs(dx) < 1e-15 and abs(dy) < 1e-15:
        dx, dy = 1.0, 0.0
    px, py = -dy, dx
    return normalize(dx + offset_fraction * px, dy + offset_fraction * py)


def _dedupe_crossings(
    hits: list[Point],
    origin: Point,
    direction: tuple[float, float],
    tolerance: float,
) -> list[Point]:
    kept: list[Point] = []
    start = origin.xy()
    for hit in hits:
        rel_x = hit.x - origin.x
        rel_y = hit.y - origin.y
        # Behind the origin
        if rel_x * direction[0] + rel_y * direction[1] < 0:
            continue
        if distance(hit.xy(), start) <= tolerance:
            continue
        if any(distance(hit.xy(), other.xy()) <= tolerance for other in kept):
            continue
        kept.append(hit)
    return kept


def contains(
    shape: ClosedShape,
    point: Point,
    *,
    geometry: GeometryProvider | None = None,
    tolerance: float | None = None,
    config: EngineConfig | None = None,
) -> bool:
    """True if ``point`` lies inside or on the boundary of ``shape``."""
    cfg = config or EngineConfig()
    geo = geometry or _DEFAULT_GEOMETRY
    tol = cfg.containment_tolerance if tolerance is None else tolerance

    try:
        box = geo.bounding_box(shape)
        if not box.contains_point(point):
            return False

        nearest = geo.closest_point_on_boundary(shape, point)
        if distance(nearest.xy(), point.xy()) <= tol:
            return True

        direction = ray_direction(box, cfg.ray_offset_fraction)
        hits = geo.intersect_ray(shape, point, direction)
        crossings = _dedupe_crossings(hits, point, direction, tol)
        return len(crossings) % 2 == 1
    except Exception as e:
        logger.warning("Containment test failed for shape %s: %s", shape.id, e)
        return False


def containing_shapes(
    point: Point,
    candidates: list[ClosedShape],
    *,
    geometry: GeometryProvider | None = None,
    config: EngineConfig | None = None,
) -> list[ClosedShape]:
    """Every candidate containing ``point``, in candidate order."""
    return [
        shape
        for shape in candidates
        if contains(shape, point, geometry=geometry, config=config)
    ]
