"""
Configuration settings for recordlens.

Uses Pydantic Settings to load environment variables for logging, profiling,
and the simulated delay of the lazy-evaluation demo. The employee data itself
is a fixed in-memory seed set and is not configurable.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Operations
    heavy_computation_delay_ms: int = Field(500, ge=0, alias="HEAVY_COMPUTATION_DELAY_MS")
    profile_queries: bool = Field(True, alias="PROFILE_QUERIES")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def heavy_computation_delay_seconds(self) -> float:
        return self.heavy_computation_delay_ms / 1000.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
