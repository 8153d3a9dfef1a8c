"""Application configuration and settings management."""

from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="CITYBITES_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "CityBites Route Sequencer API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level for the service.")
    two_opt_max_passes: int = Field(
        default=2000,
        ge=1,
        description="Upper bound on full 2-opt passes per optimization call.",
    )
    two_opt_epsilon_km: float = Field(
        default=1e-4,
        ge=0.0,
        description="Minimum gain (km) for a 2-opt reversal to be accepted.",
    )
    max_route_points: int = Field(
        default=300,
        ge=2,
        description="Largest point list accepted by the optimize endpoint.",
    )
    route_cache_ttl_seconds: int = Field(
        default=3600,
        ge=0,
        description="Lifetime of cached optimization results. 0 disables caching.",
    )
    route_cache_max_entries: int = Field(default=512, ge=1)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "https://citybites.vercel.app",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
