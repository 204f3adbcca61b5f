"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The store connection string comes from DATABASE_URL (read once per process)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - Defaults target a local SQLite file so the service runs without a database server
    - postgresql:// URLs are rewritten for the asyncpg driver
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./threadboard.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = False

    # GraphQL
    graphql_ide: bool = True
    graph_surface_faults: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
