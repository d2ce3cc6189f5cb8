"""Application configuration for the wallpaper service."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BING_HOST, DEFAULT_DIMENSION, DPI_MAPPINGS
from .resolution import parse_dimension


class Settings(BaseSettings):
    """Pydantic settings sourced from environment variables."""

    upstream_host: str = Field(
        default=BING_HOST,
        description="Origin serving both the image archive and the image files.",
    )
    cache_max_age_seconds: int = Field(
        default=86400,
        ge=0,
        description="max-age sent with image responses.",
    )
    emit_cors_header: bool = Field(
        default=False,
        description="When true, JSON responses carry 'Access-Control-Allow-Origin: *'.",
    )
    require_path_prefix: str | None = Field(
        default=None,
        description="If set, requests whose path does not start with it get a plain 404.",
    )
    default_dimension: str = Field(
        default=DEFAULT_DIMENSION,
        description='Dimension listed first in the cover table, e.g. "1920x1080".',
    )
    upstream_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout applied to every outbound request.",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("upstream_host")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("require_path_prefix")
    @classmethod
    def _blank_prefix_disables_guard(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("default_dimension")
    @classmethod
    def _validate_default_dimension(cls, value: str) -> str:
        parse_dimension(value)
        value_lower = value.lower()
        if value_lower not in set(DPI_MAPPINGS.values()):
            raise ValueError("DEFAULT_DIMENSION must be one of the known dimensions")
        return value_lower


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
