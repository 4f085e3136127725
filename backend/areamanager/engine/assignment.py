"""Vertex assignment — ordered reference vertices → labels on containing shapes.

Vertex ``i`` (1-based) labels every candidate that contains it with
``prefix + str(i)``. Overlapping candidates all receive the label; a shape
matched by several vertices keeps the label of the last one. A vertex with
no containing shape fails the whole computation.

Side-effect free: nothing here touches the object-data store.
"""

from __future__ import annotations

import logging
from typing import Sequence

from areamanager.engine.config import EngineConfig
from areamanager.engine.containment import containing_shapes
from areamanager.engine.errors import UnassignedVertexError
from areamanager.geometry.provider import GeometryProvider
from areamanager.geometry.shapes import ClosedShape, Point

logger = logging.getLogger(__name__)


def vertex_label(prefix: str, index: int) -> str:
    return f"{prefix}{index}"


def filter_candidates(
    shapes: Sequence[ClosedShape],
    config: EngineConfig | None = None,
) -> list[ClosedShape]:
    """Closed shapes drawn on one of the configured boundary layers."""
    cfg = config or EngineConfig()
    return [s for s in shapes if cfg.is_boundary_layer(s.layer) and not s.is_degenerate]


def compute_vertex_assignments(
    vertices: Sequence[Point],
    candidates: Sequence[ClosedShape],
    prefix: str,
    *,
    geometry: GeometryProvider | None = None,
    config: EngineConfig | None = None,
) -> dict[str, str]:
    """Map shape id → label for every candidate containing a reference vertex.

    Raises ``UnassignedVertexError`` (with the 1-based vertex index) as soon as
    a vertex has no containing candidate; no partial mapping is returned.
    """
    prefix = prefix.strip()
    if not prefix:
        raise ValueError("Label prefix is required")
    if not vertices:
        raise ValueError("No reference vertices supplied")

    candidate_list = list(candidates)
    assignments: dict[str, str] = {}

    for index, vertex in enumerate(vertices, start=1):
        label = vertex_label(prefix, index)
        matches = containing_shapes(vertex, candidate_list, geometry=geometry, config=config)
        if not matches:
            logger.info("Vertex %d (%s) is not inside any candidate shape", index, label)
            raise UnassignedVertexError(index, label)

        logger.debug("Vertex %d (%s) matched %d shape(s)", index, label, len(matches))
        for shape in matches:
            assignments[shape.id] = label

    return assignments
