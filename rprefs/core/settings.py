"""Application settings and configuration management."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RPREFS_",
        env_file=(".env",),
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="RPrefs Service")
    app_version: str = Field(default="0.1.0")
    environment: str = Field(default="development")

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="List of origins permitted by CORS configuration.",
    )

    prefs_source_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("RPREFS_PREFS_SOURCE_URL", "PREFS_SOURCE_URL"),
        description="URL serving the preferences bundle as a JSON object.",
    )
    prefs_source_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("RPREFS_PREFS_SOURCE_TOKEN", "PREFS_SOURCE_TOKEN"),
        description="Bearer token sent when fetching the preferences bundle.",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for upstream preference requests.",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_allowed_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of application settings."""

    return Settings()
