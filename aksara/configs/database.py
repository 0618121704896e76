"""
Database configuration settings.

Manages connection parameters for the SQLAlchemy engine backing the
key-value store. PostgreSQL is assembled from parts; any other backend
(SQLite for local runs and tests) is selected with an explicit URL.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the backing store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from aksara.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Backing store database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Explicit async SQLAlchemy URL, overrides the PostgreSQL parts",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="aksara", description="PostgreSQL database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(default="disable", description="SSL mode for PostgreSQL connections")

    @property
    def async_database_url(self) -> str:
        """
        Construct async connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL (asyncpg uses 'ssl' param)
        """
        if self.url:
            return self.url

        ssl_param = "ssl=require" if self.sslmode == "require" else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}?{ssl_param}"
        )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL points at SQLite."""
        return self.async_database_url.startswith("sqlite")

    @property
    def is_sqlite_memory(self) -> bool:
        """Whether the configured URL is an in-memory SQLite database."""
        return self.is_sqlite and ":memory:" in self.async_database_url
