"""POST /api/dimensions/parse and /api/temp-areas — annotation text → area rows."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from areamanager.dependencies import get_engine_config
from areamanager.engine.config import EngineConfig
from areamanager.engine.dimensions import parse_dimension
from areamanager.engine.temp_areas import build_temp_area_rows
from areamanager.models.requests import DimensionParseRequest, TempAreasRequest
from areamanager.models.responses import DimensionOut, TempAreaRowOut, TempAreasResponse
from areamanager.store.blocks import BlockReference, collect_attribute_pairs

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/dimensions/parse", response_model=DimensionOut)
async def parse(
    req: DimensionParseRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> DimensionOut:
    record = parse_dimension(req.text, req.identifier, config=config)
    return DimensionOut.from_record(record)


@router.post("/temp-areas", response_model=TempAreasResponse)
async def temp_areas(
    req: TempAreasRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> TempAreasResponse:
    blocks = [BlockReference(name=b.name, attributes=dict(b.attributes)) for b in req.blocks]
    pairs = collect_attribute_pairs(blocks)
    rows = build_temp_area_rows(pairs, config=config)
    logger.info("temp-areas: %d block(s) → %d row(s)", len(blocks), len(rows))
    return TempAreasResponse(
        pairs=[[identifier, text] for identifier, text in pairs],
        rows=[TempAreaRowOut.from_row(row) for row in rows],
    )
