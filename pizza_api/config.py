"""
Configuration management using Pydantic Settings.
Cluster credentials are required: a missing one fails at startup.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Pizza API"
    debug: bool = False
    log_level: str = "INFO"

    # Elastic Cloud (API key credentials, no defaults)
    api_key: str
    api_key_id: str
    cloud_id: str

    # Server: loopback only, two worker processes
    host: str = "127.0.0.1"
    port: int = 8080
    workers: int = 2


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Read once per process."""
    return Settings()
