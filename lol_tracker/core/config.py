"""Configuration settings for the LoL Tracker client."""

from __future__ import annotations

import logging
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend API Configuration
    backend_base_url: str = Field(default="http://localhost:8080")
    backend_timeout_seconds: float = Field(default=10.0, gt=0)

    # Asset CDN Configuration
    ddragon_versions_url: str = Field(
        default="https://ddragon.leagueoflegends.com/api/versions.json"
    )
    ddragon_cdn_url: str = Field(default="https://ddragon.leagueoflegends.com/cdn")
    community_dragon_base_url: str = Field(
        default="https://raw.communitydragon.org/latest/plugins/rcp-be-lol-game-data/global/default"
    )
    augments_url: str = Field(
        default="https://raw.communitydragon.org/latest/plugins/rcp-be-lol-game-data/global/default/v1/cherry-augments.json"
    )
    fallback_patch_version: str = Field(default="15.1.1")

    # Match window used for stats and match lists
    match_window_size: int = Field(default=10, ge=1, le=100)

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # CORS Configuration
    cors_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    @field_validator("backend_base_url", "ddragon_cdn_url", "community_dragon_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store base URLs without a trailing slash so paths can be appended."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject log levels the stdlib logging module does not know."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
