"""AreaManager engine — geometric assignment and area aggregation."""

from areamanager.engine.aggregation import aggregate_boundary, aggregate_workspaces, build_boundary_map
from areamanager.engine.assignment import compute_vertex_assignments
from areamanager.engine.config import EngineConfig
from areamanager.engine.containment import contains
from areamanager.engine.dimensions import DimensionRecord, parse_dimension
from areamanager.engine.errors import AreaManagerError, DuplicateLabelError, UnassignedVertexError
from areamanager.engine.grouping import group_and_summarize
from areamanager.engine.labeling import apply_assignments, assign_labels

# Operations exposed to the host application
OPERATIONS = (
    "compute_vertex_assignments",
    "parse_dimension",
    "aggregate_boundary",
    "group_and_summarize",
)

__all__ = [
    "AreaManagerError",
    "DimensionRecord",
    "DuplicateLabelError",
    "EngineConfig",
    "OPERATIONS",
    "UnassignedVertexError",
    "aggregate_boundary",
    "aggregate_workspaces",
    "apply_assignments",
    "assign_labels",
    "build_boundary_map",
    "compute_vertex_assignments",
    "contains",
    "group_and_summarize",
    "parse_dimension",
]
