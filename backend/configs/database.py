"""
Database configuration settings.

Manages PostgreSQL connection parameters for SQLAlchemy. Footprints,
summaries, posts, tags and the Steam game cache all live here.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="haloplugins", description="PostgreSQL database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    ssl: bool = Field(default=False, description="Require SSL for the connection")
    url_override: str | None = Field(
        default=None,
        description="Full async SQLAlchemy URL, e.g. sqlite+aiosqlite:///./halo.db",
    )
    create_tables: bool = Field(
        default=True,
        description="Create missing tables on application startup",
    )

    @property
    def async_database_url(self) -> str:
        """
        Construct async database connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL. The override wins
            when set; otherwise an asyncpg URL is built from the parts.
        """
        if self.url_override:
            return self.url_override
        ssl_param = "?ssl=require" if self.ssl else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}{ssl_param}"
        )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL targets SQLite (no pool tuning)."""
        return self.async_database_url.startswith("sqlite")
