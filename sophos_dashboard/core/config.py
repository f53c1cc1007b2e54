"""
Application configuration models and helpers.

Centralizes settings management so the HTTP surface, the CLI and the
retrieval pipeline share a consistent configuration surface.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SophosSettings(BaseSettings):
    """Fixed vendor endpoints used by the token and inventory clients."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    token_url: str = Field(
        "https://id.sophos.com/api/v2/oauth2/token",
        validation_alias="SOPHOS_TOKEN_URL",
    )
    token_scope: str = Field("token", validation_alias="SOPHOS_TOKEN_SCOPE")
    api_host_template: str = Field(
        "https://api-{region}.central.sophos.com",
        validation_alias="SOPHOS_API_HOST_TEMPLATE",
        description="Regional API host; '{region}' is replaced by the tenant region.",
    )
    default_region: str = Field("us01", validation_alias="SOPHOS_DEFAULT_REGION")


class AppSettings(BaseSettings):
    """Root settings object for the dashboard backend."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    data_dir: Optional[Path] = Field(
        None,
        validation_alias="SOPHOS_DASHBOARD_DATA_DIR",
        description="Overrides the per-user application data directory.",
    )
    http_timeout_seconds: float = Field(10.0, validation_alias="SOPHOS_HTTP_TIMEOUT")
    use_mock_data: bool = Field(
        False,
        validation_alias="SOPHOS_USE_MOCK_DATA",
        description="Serve the built-in demo endpoints instead of calling the API.",
    )
    sophos: SophosSettings = Field(default_factory=SophosSettings)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("data_dir", mode="before")
    @classmethod
    def _blank_data_dir_is_unset(cls, value: object) -> object:
        """Treat an empty environment value as 'use the default directory'."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "SophosSettings",
    "get_settings",
]
