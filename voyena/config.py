"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VOYENA_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Voyena"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Storage
    # One SQLite file per application-data directory
    data_dir: Path = Path.home() / ".voyena"
    database_filename: str = "voyena.db"

    @computed_field
    @property
    def database_path(self) -> Path:
        """Absolute path of the SQLite file."""
        return self.data_dir.expanduser() / self.database_filename

    @computed_field
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the store (aiosqlite driver)."""
        return f"sqlite+aiosqlite:///{self.database_path}"

    # CORS (desktop webview origins)
    cors_origins: list[str] = ["http://localhost:1420", "tauri://localhost"]

    # Brain map defaults
    default_map_title: str = "Untitled Map"
    default_center_text: str = "Central Idea"
    center_node_color: str = "#6366f1"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def sanitize_error(error: Exception, *, generic_message: str = "An internal error occurred.") -> str:
    """
    Return a user-safe error message.

    In development, returns the full exception string for debugging.
    In staging/production, returns a generic message to avoid leaking internals.
    """
    settings = get_settings()
    if settings.environment == "development":
        return str(error)
    return generic_message
