"""
Configuration management using Pydantic Settings.
Challenge: Env-driven deployment (container orchestrators inject SERVER_PORT / MONGO_URI).
Design: Single source of truth; a variable that is set always wins, even when empty.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Survey API"
    log_level: str = "INFO"

    # Kept as a string: an unusable port surfaces when the server binds
    server_port: str = "8080"

    # Document store (MongoDB)
    mongo_uri: str = "mongodb://mongo-local:27017"
    mongo_database: str = "surveyDB"
    mongo_collection: str = "answers"

    # Per-call timeouts (seconds)
    connect_timeout_seconds: float = 10
    ready_timeout_seconds: float = 2
    write_timeout_seconds: float = 5


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request."""
    return Settings()
