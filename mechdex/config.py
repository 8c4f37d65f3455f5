"""
Configuration and settings for the Mech-Dex backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")

    # Firebase Realtime Database
    firebase_rtdb_base_url: Optional[str] = Field(default=None)
    firebase_auth_token: Optional[str] = Field(default=None)
    key_switch_collection: str = Field(default="Switch")
    # None keeps the transport default (no timeout).
    request_timeout_seconds: Optional[float] = Field(default=None)

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "MECHDEX_USE_IN_MEMORY_BACKENDS", "use_in_memory_backends"
        ),
    )
    in_memory_seed_count: int = Field(default=5, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
