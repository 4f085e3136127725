"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_contains_point(
    box: tuple[float, float, float, float],
    x: float,
    y: float,
) -> bool:
    """Inclusive point-in-box test with zero tolerance."""
    return box[0] <= x <= box[2] and box[1] <= y <= box[3]


def bbox_within(
    inner: tuple[float, float, float, float],
    outer: tuple[float, float, float, float],
) -> bool:
    """All four edges of ``inner`` lie inside (or on) ``outer``."""
    return (
        inner[0] >= outer[0]
        and inner[1] >= outer[1]
        and inner[2] <= outer[2]
        and inner[3] <= outer[3]
    )


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def normalize(dx: float, dy: float) -> tuple[float, float]:
    """Unit vector; raises ValueError on a zero-length input."""
    length = math.hypot(dx, dy)
    if length < 1e-15:
        raise ValueError("Cannot normalize a zero-length vector")
    return (dx / length, dy / length)
