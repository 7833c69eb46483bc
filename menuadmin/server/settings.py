from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from menuadmin.hierarchy.builder import DEFAULT_CONTAINER_ICON, DEFAULT_LEAF_ICON, NodeBuilderConfig
from menuadmin.models.menu_tree import OrphanPolicy

load_dotenv(override=False)


DEFAULT_CORS_ORIGINS = [
    "http://localhost:4200",
    "http://127.0.0.1:4200",
]


class Settings(BaseModel):
    """Runtime configuration for the FastAPI server."""

    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "dev"))
    db_path: Path = Field(default_factory=lambda: Path(os.getenv("MENU_DB_PATH", "artifacts/menuadmin.db")))
    cors_origins: List[str] = Field(default_factory=lambda: os.getenv("CORS_ORIGINS") or list(DEFAULT_CORS_ORIGINS))
    leaf_icon: str = Field(default_factory=lambda: os.getenv("MENU_LEAF_ICON", DEFAULT_LEAF_ICON))
    container_icon: str = Field(default_factory=lambda: os.getenv("MENU_CONTAINER_ICON", DEFAULT_CONTAINER_ICON))
    orphan_policy: OrphanPolicy = Field(
        default_factory=lambda: os.getenv("MENU_ORPHAN_POLICY", OrphanPolicy.DROP.value)
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_json: bool = Field(
        default_factory=lambda: os.getenv("LOG_JSON", "true").lower() not in {"0", "false"}
    )

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_CORS_ORIGINS)
        if isinstance(value, str):
            if not value.strip():
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return list(value)

    @field_validator("orphan_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported LOG_LEVEL '{value}'")
        return level

    @field_validator("leaf_icon", "container_icon")
    @classmethod
    def _require_icon(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("menu icons must not be empty")
        return value

    def node_builder_config(self) -> NodeBuilderConfig:
        return NodeBuilderConfig(leaf_icon=self.leaf_icon, container_icon=self.container_icon)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_CORS_ORIGINS"]
