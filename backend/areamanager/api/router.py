"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from areamanager.api import assignments, dimensions, health, workspace_areas

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(dimensions.router)
api_router.include_router(assignments.router)
api_router.include_router(workspace_areas.router)
