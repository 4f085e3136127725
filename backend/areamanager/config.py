"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    areamanager_env: str = "development"
    areamanager_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Geometry
    containment_tolerance: float = 1e-7

    # Object data table/field holding the workspace label
    label_field: str = "WORKSPACENUM"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
