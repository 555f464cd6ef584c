"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    reactor_url: str = Field(
        default="https://reactor.adobe.io",
        description="Base URL of the Reactor JSON:API service",
        min_length=1,
    )
    ims_token_url: str = Field(
        default="https://ims-na1.adobelogin.com/ims/token/v3",
        description="Endpoint used to exchange client credentials for an access token",
        min_length=1,
    )
    ims_scope: str = Field(
        default=(
            "AdobeID,openid,read_organizations,additional_info.job_function,"
            "additional_info.projectedProductContext,additional_info.roles"
        ),
        description="Scopes requested during the client credentials exchange",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout applied to every outbound HTTP request",
        gt=0,
    )
    max_pages: int = Field(
        default=10_000,
        description="Upper bound on page requests for a single paginated listing",
        gt=0,
    )
    default_page_size: int = Field(
        default=100,
        description="Page size used by regular listings",
        gt=0,
    )
    rule_scan_page_size: int = Field(
        default=1000,
        description="Page size used when listing rules during a property scan",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("reactor_url", "ims_token_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
