"""Two-phase label application.

Phase 1 (read-only) computes every assignment. Phase 2 runs only when
phase 1 succeeded in full: a clear pass blanks each candidate label that
belongs to this prefix's series, then a write pass stores the new labels.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from areamanager.engine.assignment import compute_vertex_assignments
from areamanager.engine.config import EngineConfig
from areamanager.engine.errors import AssignmentIntegrityError
from areamanager.geometry.provider import GeometryProvider
from areamanager.geometry.shapes import ClosedShape, Point
from areamanager.store.object_data import ObjectDataStore

logger = logging.getLogger(__name__)


@dataclass
class LabelUpdateSummary:
    prefix: str
    written: dict[str, str] = field(default_factory=dict)
    cleared: list[str] = field(default_factory=list)

    @property
    def stale(self) -> list[str]:
        """Cleared shapes that did not get a fresh label."""
        return [sid for sid in self.cleared if sid not in self.written]


def belongs_to_series(label: str | None, prefix: str) -> bool:
    """``W12`` belongs to the ``W`` series, ``WX1`` and ``LD3`` do not."""
    if not label:
        return False
    pattern = re.compile(rf"^{re.escape(prefix.strip())}\d+$", re.IGNORECASE)
    return bool(pattern.match(label.strip()))


def apply_assignments(
    store: ObjectDataStore,
    assignments: Mapping[str, str],
    candidates: Sequence[ClosedShape],
    prefix: str,
) -> LabelUpdateSummary:
    """Clear this prefix's labels on every candidate, then write ``assignments``."""
    candidate_ids = [shape.id for shape in candidates]
    known = set(candidate_ids)
    unknown = sorted(sid for sid in assignments if sid not in known)
    if unknown:
        raise AssignmentIntegrityError(unknown)

    summary = LabelUpdateSummary(prefix=prefix)

    for sid in candidate_ids:
        if belongs_to_series(store.read_label(sid), prefix):
            store.clear_label(sid)
            summary.cleared.append(sid)

    for sid, label in assignments.items():
        store.write_label(sid, label)
        summary.written[sid] = label

    logger.info(
        "Updated %d shape(s) with %s values (%d stale label(s) cleared)",
        len(summary.written),
        prefix,
        len(summary.stale),
    )
    return summary


def assign_labels(
    store: ObjectDataStore,
    vertices: Sequence[Point],
    candidates: Sequence[ClosedShape],
    prefix: str,
    *,
    geometry: GeometryProvider | None = None,
    config: EngineConfig | None = None,
) -> LabelUpdateSummary:
    """Compute then apply. A computation failure leaves ``store`` untouched."""
    assignments = compute_vertex_assignments(
        vertices, candidates, prefix, geometry=geometry, config=config
    )
    return apply_assignments(store, assignments, candidates, prefix.strip())
