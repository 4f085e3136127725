"""Geometry capability consumed by the engine, plus the shapely-backed default.

The host drawing application may supply its own provider (anything that
satisfies ``GeometryProvider``); tests and the HTTP surface use
``ShapelyGeometry``.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

from shapely.geometry import LineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry.base import BaseGeometry
from shapely.ops import nearest_points

from areamanager.geometry.shapes import BoundingBox, ClosedShape, Point

logger = logging.getLogger(__name__)


class GeometryProvider(Protocol):
    def planar_area(self, shape: ClosedShape) -> float: ...

    def bounding_box(self, shape: ClosedShape) -> BoundingBox: ...

    def closest_point_on_boundary(self, shape: ClosedShape, point: Point) -> Point: ...

    def intersect_ray(
        self,
        shape: ClosedShape,
        origin: Point,
        direction: tuple[float, float],
    ) -> list[Point]: ...


def _require_polygon(shape: ClosedShape):
    if shape.is_degenerate:
        raise ValueError(f"Shape {shape.id} has no usable boundary")
    return shape.polygon


def _collect_points(geom: BaseGeometry) -> list[Point]:
    """Flatten an intersection result into points.

    Collinear overlaps come back as line pieces; their endpoints stand in for
    the crossing.
    """
    if geom.is_empty:
        return []
    kind = geom.geom_type
    if kind == "Point":
        return [Point(geom.x, geom.y)]
    if kind in ("LineString", "LinearRing"):
        coords = list(geom.coords)
        return [Point(coords[0][0], coords[0][1]), Point(coords[-1][0], coords[-1][1])]
    if hasattr(geom, "geoms"):
        found: list[Point] = []
        for part in geom.geoms:
            found.extend(_collect_points(part))
        return found
    logger.debug("Ignoring intersection part of type %s", kind)
    return []


class ShapelyGeometry:
    """GeometryProvider built on shapely polygons."""

    def planar_area(self, shape: ClosedShape) -> float:
        return float(_require_polygon(shape).area)

    def bounding_box(self, shape: ClosedShape) -> BoundingBox:
        if shape.polygon is not None and not shape.polygon.is_empty:
            return BoundingBox.from_tuple(tuple(float(v) for v in shape.polygon.bounds))
        return shape.bbox

    def closest_point_on_boundary(self, shape: ClosedShape, point: Point) -> Point:
        ring = _require_polygon(shape).exterior
        nearest, _ = nearest_points(ring, ShapelyPoint(point.x, point.y))
        return Point(float(nearest.x), float(nearest.y))

    def intersect_ray(
        self,
        shape: ClosedShape,
        origin: Point,
        direction: tuple[float, float],
    ) -> list[Point]:
        """Intersections of the half-line origin + t·direction (t ≥ 0) with the boundary."""
        ring = _require_polygon(shape).exterior
        dx, dy = direction
        norm = math.hypot(dx, dy)
        if norm < 1e-15:
            raise ValueError("Ray direction must be non-zero")

        # Long enough to leave the bounding box from anywhere inside it
        box = self.bounding_box(shape)
        reach = max(
            math.hypot(corner[0] - origin.x, corner[1] - origin.y)
            for corner in (
                (box.min_x, box.min_y),
                (box.min_x, box.max_y),
                (box.max_x, box.min_y),
                (box.max_x, box.max_y),
            )
        )
        length = 2.0 * reach + 1.0
        end = (origin.x + dx / norm * length, origin.y + dy / norm * length)
        ray = LineString([(origin.x, origin.y), end])
        return _collect_points(ring.intersection(ray))
