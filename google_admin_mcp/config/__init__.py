from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .google import GoogleAdminSettings

__all__ = ["AppSettings", "GoogleAdminSettings", "get_settings"]


class AppSettings(BaseSettings):
    """Settings for the Google Admin MCP application."""

    google: GoogleAdminSettings = Field(default_factory=GoogleAdminSettings)

    log_level: str = "INFO"
    server_name: str = "Google Admin MCP"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the process-wide settings, read once from the environment."""
    return AppSettings()
