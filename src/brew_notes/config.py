"""Application configuration."""

import os
from datetime import time

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "sqlite"
    database_path: str = "brew_notes.db"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    timezone: str = "UTC"
    recent_limit: int = 5
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_reminder_time(raw: str | None) -> time | None:
    """Parse an ``HH:MM`` or ``HH:MM:SS`` reminder time."""
    if raw is None:
        return None
    parts = raw.strip().split(":")
    if len(parts) not in (2, 3) or not all(part.isdigit() for part in parts):
        return None
    try:
        return time(*(int(part) for part in parts))
    except ValueError:
        return None
