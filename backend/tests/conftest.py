"""Shared test fixtures."""

from __future__ import annotations

import pytest

from areamanager.geometry.shapes import ClosedShape
from areamanager.store.object_data import InMemoryObjectDataStore

WORKSPACE_LAYER = "P-TEMP_WORKSPACE"

# 100 m × 100 m = 1.000 ha
HECTARE_SQUARE = [[0, 0], [100, 0], [100, 100], [0, 100]]

# 10 × 10 squares, the second one well to the right of the first
SQUARE_A = [[0, 0], [10, 0], [10, 10], [0, 10]]
SQUARE_B = [[20, 0], [30, 0], [30, 10], [20, 10]]
# Overlaps the upper-right quarter of SQUARE_A
SQUARE_C = [[5, 5], [15, 5], [15, 15], [5, 15]]

# L-shaped boundary: the notch (4..10, 4..10) is inside the bounding box but outside the shape
L_SHAPE = [[0, 0], [10, 0], [10, 4], [4, 4], [4, 10], [0, 10]]

TEMP_AREAS_TABLE = [
    [
        "DESCRIPTION", "ID", "WIDTH", "LENGTH", "AREA (ha)",
        "WITHIN EXISTING DISPOSITIONS", "EXISTING CUT DISTURBANCE (ha)", "NEW CUT DISTURBANCE (ha)",
    ],
    ["WORKSPACE", "W1", "10.0", "50.0", "0.050", "No", "0.050", "0.000"],
    ["WORKSPACE", "W2", "IRREGULAR", "IRREGULAR", "1.000", "0.400", "0.400", "0.600"],
    ["LOG DECK", "LD1", "20.0", "30.0", "0.060", "Yes", "0.060", "0.000"],
]


def square_shape(id: str, points=SQUARE_A, category: str = "", layer: str = WORKSPACE_LAYER) -> ClosedShape:
    return ClosedShape.from_points(id, points, category=category, layer=layer)


def rect(x0: float, y0: float, x1: float, y1: float) -> list[list[float]]:
    return [[x0, y0], [x1, y0], [x1, y1], [x0, y1]]


@pytest.fixture
def square():
    return square_shape("A")


@pytest.fixture
def l_shape():
    return ClosedShape.from_points("L", L_SHAPE, layer=WORKSPACE_LAYER)


@pytest.fixture
def candidates():
    return [
        square_shape("A", SQUARE_A),
        square_shape("B", SQUARE_B),
    ]


@pytest.fixture
def store():
    return InMemoryObjectDataStore()
