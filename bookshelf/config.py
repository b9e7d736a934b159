"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Bookshelf Service"
    debug: bool = False

    # Logging
    log_json: bool = False

    # API
    api_prefix: str = ""  # e.g. "/api" to serve the catalog at /api/books
    # Non-empty lists answer 201 instead of 200. Not REST semantics; kept
    # for compatibility with existing clients.
    list_created_status: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    workers: int = 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
