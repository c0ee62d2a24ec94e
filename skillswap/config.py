"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Secrets (database credentials) come from environment variables or .env

Design Decisions:
    - Lifecycle policy switches live here, not in code: enforce_terminal_status,
      allow_duplicate_feedback, match_jitter
    - Defaults provided for all settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Database
    database_url: str = (
        "postgresql+asyncpg://skillswap:skillswap@db:5432/skillswap"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Local runs only; deployed databases are migrated with Alembic
    database_create_tables: bool = False

    # Store
    store_backend: Literal["sql", "memory"] = "sql"
    seed_demo_data: bool = False

    # Lifecycle policies
    enforce_terminal_status: bool = True
    allow_duplicate_feedback: bool = False
    match_jitter: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
