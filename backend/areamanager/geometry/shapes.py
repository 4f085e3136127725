"""Shape value types handed to the engine by the drawing collaborator.

The engine only reads these. A ``ClosedShape`` keeps the sampled boundary
ring (Nx2 numpy array) alongside the shapely polygon built from it, the
same way sub-paths carry both representations elsewhere in the codebase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon

from areamanager.utils.geometry import bbox, bbox_contains_point, bbox_within


@dataclass(frozen=True)
class Point:
    """Planar coordinate. ``z`` is carried but ignored by containment."""

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def of(cls, coords: Sequence[float]) -> Point:
        if len(coords) < 2:
            raise ValueError(f"Point needs at least 2 coordinates, got {len(coords)}")
        z = float(coords[2]) if len(coords) > 2 else 0.0
        return cls(float(coords[0]), float(coords[1]), z)

    def xy(self) -> tuple[float, float]:
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy, self.z)


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_tuple(cls, box: tuple[float, float, float, float]) -> BoundingBox:
        return cls(*box)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def diagonal(self) -> tuple[float, float]:
        return (self.width, self.height)

    def contains_point(self, point: Point) -> bool:
        return bbox_contains_point(self.as_tuple(), point.x, point.y)

    def contains_box(self, other: BoundingBox) -> bool:
        return bbox_within(other.as_tuple(), self.as_tuple())


@dataclass
class ClosedShape:
    """A closed planar boundary with an opaque identity and a category tag."""

    id: str
    # Boundary ring: Nx2 array of (x, y), not repeated at the end
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    polygon: Polygon | None = None
    bbox: BoundingBox = field(default_factory=lambda: BoundingBox(0.0, 0.0, 0.0, 0.0))
    category: str = ""
    layer: str = ""

    @classmethod
    def from_points(
        cls,
        id: str,
        points: Iterable[Sequence[float]],
        *,
        category: str = "",
        layer: str = "",
    ) -> ClosedShape:
        """Build a shape from vertex coordinates (z dropped, closing vertex optional)."""
        coords = [list(p) for p in points]
        for i, p in enumerate(coords):
            if len(p) < 2:
                raise ValueError(f"Shape {id}: vertex {i} needs at least 2 coordinates, got {len(p)}")
        pts = np.array([(float(p[0]), float(p[1])) for p in coords], dtype=np.float64).reshape(-1, 2)
        if len(pts) > 1 and np.allclose(pts[0], pts[-1]):
            pts = pts[:-1]

        polygon: Polygon | None = None
        if len(pts) >= 3:
            polygon = Polygon(pts)

        return cls(
            id=id,
            points=pts,
            polygon=polygon,
            bbox=BoundingBox.from_tuple(bbox(pts)),
            category=category,
            layer=layer,
        )

    @property
    def is_degenerate(self) -> bool:
        return self.polygon is None or self.polygon.is_empty or len(self.points) < 3

    def translated(self, dx: float, dy: float) -> ClosedShape:
        return ClosedShape.from_points(
            self.id,
            self.points + np.array([dx, dy]),
            category=self.category,
            layer=self.layer,
        )
