"""Configuration for cloud agent images."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class CloudAgentsConfig(BaseSettings):
    """Configuration for the image editor, catalog client and client factory.

    Loaded from environment variables with CLOUD_AGENTS_ prefix
    or from a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOUD_AGENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog endpoint
    resource_url: str = Field(
        default="http://localhost:8111/plugins/cloud-google/resources.html",
        description="Plugin resource endpoint that serves catalog documents",
    )

    # Host identity
    plugin_resources_path: str = Field(
        default="/plugins/cloud-google/",
        description="Path prefix for plugin resources such as the settings page",
    )
    server_id: str = Field(
        default="",
        description="Identity of the server installation owning the agents",
    )

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )


@lru_cache
def get_config() -> CloudAgentsConfig:
    """Return the process-wide configuration."""
    return CloudAgentsConfig()
