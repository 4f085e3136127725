"""Tests for shape value types."""

import numpy as np
import pytest

from areamanager.geometry.shapes import BoundingBox, ClosedShape, Point


def test_point_of_drops_nothing():
    p = Point.of([1, 2, 3])
    assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)
    assert Point.of((4, 5)).z == 0.0


def test_point_of_rejects_short_input():
    with pytest.raises(ValueError):
        Point.of([1])


def test_from_points_drops_closing_vertex_and_z():
    shape = ClosedShape.from_points("S", [[0, 0, 7], [4, 0, 7], [4, 3, 7], [0, 0, 7]], category="cut")
    assert shape.points.shape == (3, 2)
    assert shape.polygon is not None
    assert shape.bbox == BoundingBox(0.0, 0.0, 4.0, 3.0)
    assert shape.category == "cut"
    assert not shape.is_degenerate


def test_degenerate_shape():
    shape = ClosedShape.from_points("S", [[0, 0], [1, 1]])
    assert shape.polygon is None
    assert shape.is_degenerate


def test_translated_shape():
    shape = ClosedShape.from_points("S", [[0, 0], [2, 0], [2, 2]], layer="P-TEMP-BLUE")
    moved = shape.translated(10, -5)
    assert moved.id == "S"
    assert moved.layer == "P-TEMP-BLUE"
    assert np.allclose(moved.points[0], [10, -5])
    assert moved.bbox.as_tuple() == (10.0, -5.0, 12.0, -3.0)


def test_bounding_box_relations():
    outer = BoundingBox(0, 0, 10, 10)
    assert outer.contains_point(Point(10, 0))
    assert not outer.contains_point(Point(10.0001, 0))
    assert outer.contains_box(BoundingBox(0, 0, 10, 10))
    assert outer.contains_box(BoundingBox(2, 2, 3, 3))
    assert not outer.contains_box(BoundingBox(2, 2, 11, 3))
    assert outer.diagonal == (10, 10)


def test_from_points_rejects_short_vertex():
    with pytest.raises(ValueError, match="vertex 0"):
        ClosedShape.from_points("S", [[0], [1, 1], [2, 0]])
