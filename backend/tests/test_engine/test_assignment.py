"""Tests for vertex → shape label assignment."""

from __future__ import annotations

import pytest

from areamanager.engine.assignment import compute_vertex_assignments, filter_candidates, vertex_label
from areamanager.engine.errors import UnassignedVertexError
from areamanager.geometry.shapes import ClosedShape, Point
from tests.conftest import SQUARE_A, SQUARE_C, square_shape


def test_one_vertex_per_shape(candidates):
    result = compute_vertex_assignments([Point(5, 5), Point(25, 5)], candidates, "W")
    assert result == {"A": "W1", "B": "W2"}


def test_labels_are_one_based_with_prefix(candidates):
    result = compute_vertex_assignments([Point(25, 5)], candidates, "LD")
    assert result == {"B": "LD1"}


def test_overlapping_shapes_all_receive_label():
    shapes = [square_shape("A", SQUARE_A), square_shape("C", SQUARE_C)]
    result = compute_vertex_assignments([Point(7, 7)], shapes, "W")
    assert result == {"A": "W1", "C": "W1"}


def test_later_vertex_overwrites():
    shapes = [square_shape("A", SQUARE_A), square_shape("C", SQUARE_C)]
    result = compute_vertex_assignments([Point(2, 2), Point(7, 7)], shapes, "W")
    assert result == {"A": "W2", "C": "W2"}


def test_unassigned_vertex_aborts(candidates):
    with pytest.raises(UnassignedVertexError) as excinfo:
        compute_vertex_assignments([Point(5, 5), Point(50, 50), Point(25, 5)], candidates, "W")
    assert excinfo.value.vertex_index == 2
    assert excinfo.value.label == "W2"
    assert "vertex 2" in str(excinfo.value)


def test_prefix_is_trimmed(candidates):
    assert compute_vertex_assignments([Point(5, 5)], candidates, " W ") == {"A": "W1"}


def test_empty_prefix_rejected(candidates):
    with pytest.raises(ValueError):
        compute_vertex_assignments([Point(5, 5)], candidates, "  ")


def test_no_vertices_rejected(candidates):
    with pytest.raises(ValueError):
        compute_vertex_assignments([], candidates, "W")


def test_vertex_label():
    assert vertex_label("AR", 12) == "AR12"


def test_filter_candidates_by_layer():
    shapes = [
        ClosedShape.from_points("A", SQUARE_A, layer="p-temp_workspace"),
        ClosedShape.from_points("B", SQUARE_A, layer="P-TEMP-BLUE"),
        ClosedShape.from_points("C", SQUARE_A, layer="0"),
        ClosedShape.from_points("D", [[0, 0], [1, 1]], layer="P-TEMP_WORKSPACE"),
    ]
    assert [s.id for s in filter_candidates(shapes)] == ["A", "B"]
