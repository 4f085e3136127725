"""Area aggregation — disturbance areas summed per labeled boundary.

A disturbance shape counts toward a boundary when its bounding box lies
entirely within the boundary's bounding box. Disturbance shapes are drawn
wholly inside their workspace, so the box test stands in for a polygon
intersection; a shape that only partly overlaps is not split.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from areamanager.engine.config import CATEGORY_DISPOSITION, EngineConfig
from areamanager.engine.dimensions import DimensionRecord
from areamanager.engine.errors import DuplicateLabelError
from areamanager.engine.records import WITHIN_NO, WITHIN_YES, BoundaryAggregate
from areamanager.geometry.provider import GeometryProvider, ShapelyGeometry
from areamanager.geometry.shapes import ClosedShape
from areamanager.store.object_data import ObjectDataStore
from areamanager.utils.text import format_area, identifier_sort_key

logger = logging.getLogger(__name__)

_DEFAULT_GEOMETRY = ShapelyGeometry()


def shape_area_ha(
    shape: ClosedShape,
    geometry: GeometryProvider | None = None,
    config: EngineConfig | None = None,
) -> float | None:
    """Planar area in hectares, or None when the shape cannot be measured."""
    cfg = config or EngineConfig()
    geo = geometry or _DEFAULT_GEOMETRY
    try:
        return abs(geo.planar_area(shape)) / cfg.area_divisor
    except Exception as e:
        logger.warning("Area evaluation failed for shape %s: %s", shape.id, e)
        return None


def classify_within_disposition(
    within_ha: float,
    total_ha: float,
    config: EngineConfig | None = None,
) -> str:
    """No / Yes (whole boundary) / the rounded area as text."""
    cfg = config or EngineConfig()
    if format_area(within_ha) == format_area(0.0):
        return WITHIN_NO
    if abs(within_ha - total_ha) <= cfg.full_disposition_tolerance:
        return WITHIN_YES
    return format_area(within_ha)


def enclosed_disturbances(
    boundary: ClosedShape,
    disturbances: Sequence[ClosedShape],
    geometry: GeometryProvider | None = None,
    config: EngineConfig | None = None,
) -> list[ClosedShape]:
    cfg = config or EngineConfig()
    geo = geometry or _DEFAULT_GEOMETRY
    try:
        outer = geo.bounding_box(boundary)
    except Exception as e:
        logger.warning("Bounding box failed for boundary %s: %s", boundary.id, e)
        return []

    enclosed = []
    for shape in disturbances:
        if shape.id == boundary.id:
            continue
        if shape.category.lower() not in cfg.disturbance_categories:
            continue
        try:
            inner = geo.bounding_box(shape)
        except Exception as e:
            logger.warning("Bounding box failed for shape %s: %s", shape.id, e)
            continue
        if outer.contains_box(inner):
            enclosed.append(shape)
    return enclosed


def aggregate_boundary(
    boundary: ClosedShape,
    disturbances: Sequence[ClosedShape],
    *,
    identifier: str | None = None,
    fallback_area_ha: float | None = None,
    geometry: GeometryProvider | None = None,
    config: EngineConfig | None = None,
) -> BoundaryAggregate:
    """Existing cut/disposition and new cut totals for one boundary.

    The boundary's measured area is preferred; ``fallback_area_ha`` (usually
    the parsed dimension area) is used when the shape cannot be measured.
    """
    cfg = config or EngineConfig()
    geo = geometry or _DEFAULT_GEOMETRY

    total = shape_area_ha(boundary, geo, cfg)
    if total is None:
        total = fallback_area_ha if fallback_area_ha is not None else 0.0

    disturbance_ha = 0.0
    disposition_ha = 0.0
    enclosed = enclosed_disturbances(boundary, disturbances, geo, cfg)
    for shape in enclosed:
        area = shape_area_ha(shape, geo, cfg)
        if area is None:
            continue
        disturbance_ha += area
        if shape.category.lower() == CATEGORY_DISPOSITION:
            disposition_ha += area

    return BoundaryAggregate(
        identifier=identifier if identifier is not None else boundary.id,
        shape_id=boundary.id,
        boundary_area_ha=total,
        existing_cut_ha=max(0.0, disturbance_ha - disposition_ha),
        within_disposition_ha=disposition_ha,
        existing_cut_disturbance_ha=disturbance_ha,
        new_cut_disturbance_ha=max(0.0, total - disturbance_ha),
        within_disposition=classify_within_disposition(disposition_ha, total, cfg),
        enclosed_shape_ids=tuple(s.id for s in enclosed),
    )


def build_boundary_map(
    boundaries: Sequence[ClosedShape],
    store: ObjectDataStore,
) -> dict[str, ClosedShape]:
    """Label → boundary shape, read from the object-data store.

    Labels compare case-insensitively after trimming. Every shape of every
    label claimed more than once is reported, and nothing is returned.
    """
    claimed: dict[str, list[tuple[str, ClosedShape]]] = {}
    for shape in boundaries:
        label = (store.read_label(shape.id) or "").strip()
        if not label:
            continue
        claimed.setdefault(label.upper(), []).append((label, shape))

    conflicts = {
        entries[0][0]: [shape.id for _, shape in entries]
        for entries in claimed.values()
        if len({shape.id for _, shape in entries}) > 1
    }
    if conflicts:
        logger.warning("Duplicate labels: %s", conflicts)
        raise DuplicateLabelError(conflicts)

    return {entries[0][0]: entries[0][1] for entries in claimed.values()}


def aggregate_workspaces(
    boundaries: Sequence[ClosedShape],
    disturbances: Sequence[ClosedShape],
    store: ObjectDataStore,
    *,
    dimensions: Mapping[str, DimensionRecord] | None = None,
    geometry: GeometryProvider | None = None,
    config: EngineConfig | None = None,
) -> list[BoundaryAggregate]:
    """Aggregate every labeled boundary, sorted by workspace identifier."""
    boundary_map = build_boundary_map(boundaries, store)
    parsed = {key.strip().upper(): rec for key, rec in (dimensions or {}).items()}

    results = []
    for label, shape in boundary_map.items():
        record = parsed.get(label.upper())
        results.append(
            aggregate_boundary(
                shape,
                disturbances,
                identifier=label,
                fallback_area_ha=record.area_ha if record is not None else None,
                geometry=geometry,
                config=config,
            )
        )

    results.sort(key=lambda agg: identifier_sort_key(agg.identifier))
    logger.info("Aggregated %d workspace boundary(ies)", len(results))
    return results
