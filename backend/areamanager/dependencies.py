"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Depends

from areamanager.config import Settings, settings
from areamanager.engine.config import EngineConfig


def get_settings() -> Settings:
    return settings


def get_engine_config(app_settings: Settings = Depends(get_settings)) -> EngineConfig:
    """Engine tolerances, with the containment tolerance taken from settings."""
    return EngineConfig(containment_tolerance=app_settings.containment_tolerance)
