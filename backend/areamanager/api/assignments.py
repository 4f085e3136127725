"""POST /api/assignments — label candidate shapes from a reference polyline."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from areamanager.config import Settings
from areamanager.dependencies import get_engine_config, get_settings
from areamanager.engine.assignment import filter_candidates
from areamanager.engine.config import EngineConfig
from areamanager.engine.errors import AreaManagerError
from areamanager.engine.labeling import assign_labels
from areamanager.geometry.shapes import Point
from areamanager.models.requests import AssignmentRequest
from areamanager.models.responses import AssignmentResponse
from areamanager.store.object_data import InMemoryObjectDataStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/assignments", response_model=AssignmentResponse)
async def assignments(
    req: AssignmentRequest,
    config: EngineConfig = Depends(get_engine_config),
    app_settings: Settings = Depends(get_settings),
) -> AssignmentResponse:
    try:
        vertices = [Point.of(v) for v in req.vertices]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    try:
        candidates = [c.to_shape() for c in req.candidates]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    if req.filter_layers:
        candidates = filter_candidates(candidates, config)

    store = InMemoryObjectDataStore(req.labels)
    try:
        summary = assign_labels(store, vertices, candidates, req.prefix, config=config)
    except (AreaManagerError, ValueError) as e:
        logger.info("Assignment for prefix %r cancelled: %s", req.prefix, e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return AssignmentResponse(
        prefix=summary.prefix,
        label_field=app_settings.label_field,
        assignments=summary.written,
        cleared=summary.cleared,
        stale=summary.stale,
        labels=store.labels(),
    )
