"""
Entity store configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Pagination and startup behavior of the entity store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from aksara.configs.base import BaseSettings


class StoreSettings(BaseSettings):
    """Entity store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AKSARA_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    default_page_size: int = Field(
        default=20,
        ge=1,
        description="Records per page when a listing does not pass a limit",
    )
    create_tables: bool = Field(
        default=True,
        description="Create the key-value table on application startup",
    )
