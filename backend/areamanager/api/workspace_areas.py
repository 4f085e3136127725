"""POST /api/workspace-areas — per-workspace disturbance totals, grouped.

``/workspace-areas`` measures labeled boundaries; ``/workspace-areas/table``
re-reads rows from an already rendered table.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from areamanager.dependencies import get_engine_config
from areamanager.engine.aggregation import aggregate_workspaces
from areamanager.engine.config import EngineConfig
from areamanager.engine.dimensions import parse_dimension
from areamanager.engine.errors import DuplicateLabelError
from areamanager.engine.grouping import group_and_summarize
from areamanager.engine.units import workspace_totals_rows
from areamanager.engine.workspace_table import read_workspace_table
from areamanager.models.requests import WorkspaceAreasRequest, WorkspaceTableRequest
from areamanager.models.responses import (
    AggregateOut,
    GroupOut,
    TotalsRowOut,
    WorkspaceAreasResponse,
    WorkspaceRowOut,
    WorkspaceTableResponse,
)
from areamanager.store.object_data import InMemoryObjectDataStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/workspace-areas", response_model=WorkspaceAreasResponse)
async def workspace_areas(
    req: WorkspaceAreasRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> WorkspaceAreasResponse:
    try:
        boundaries = [b.to_shape() for b in req.boundaries]
        disturbances = [d.to_shape() for d in req.disturbances]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    store = InMemoryObjectDataStore(req.labels)
    dimensions = {
        label: parse_dimension(text, label, config=config)
        for label, text in req.dimensions.items()
    }

    try:
        aggregates = aggregate_workspaces(
            boundaries, disturbances, store, dimensions=dimensions, config=config
        )
    except DuplicateLabelError as e:
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "conflicts": e.conflicts},
        ) from e

    rows = [agg.to_row() for agg in aggregates]
    return WorkspaceAreasResponse(
        aggregates=[AggregateOut.from_aggregate(agg) for agg in aggregates],
        rows=[WorkspaceRowOut.from_row(r) for r in rows],
        groups=[GroupOut.from_summary(s) for s in group_and_summarize(rows)],
        totals=[TotalsRowOut.from_row(t) for t in workspace_totals_rows(rows, config)],
    )


@router.post("/workspace-areas/table", response_model=WorkspaceTableResponse)
async def workspace_table(
    req: WorkspaceTableRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> WorkspaceTableResponse:
    result = read_workspace_table(req.cells, config)
    if not result.rows:
        logger.info("No workspace rows found in %d table row(s)", len(req.cells))

    return WorkspaceTableResponse(
        rows=[WorkspaceRowOut.from_row(r) for r in result.rows],
        groups=[GroupOut.from_summary(s) for s in group_and_summarize(result.rows)],
        totals=[TotalsRowOut.from_row(t) for t in workspace_totals_rows(result.rows, config)],
        warnings=result.warnings,
    )
