from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleAdminSettings(BaseSettings):
    """Settings for Google Admin SDK configuration."""

    # Base64 encoded JSON: a service account key or an authorized user token
    TOKEN_JSON: str | None = Field(default=None, repr=False)
    # Subject for domain-wide delegation when TOKEN_JSON is a service account
    ADMIN_EMAIL: str | None = None

    # Google Admin SDK scopes
    SCOPES: list[str] = [
        "https://www.googleapis.com/auth/admin.directory.user",
        "https://www.googleapis.com/auth/admin.directory.group",
    ]

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
