"""
Shared configuration base.

Every settings class reads the same ``.env`` file and ignores keys that
belong to other classes.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Settings read by the application factory and lifespan."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name reported in startup logs",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
