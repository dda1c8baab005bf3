"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables in deployed environments
    - get_settings() is cached (lru_cache), one instance per process

Design Decisions:
    - Defaults provided for every setting: runs out-of-the-box on a local SQLite file
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./jokes.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # create_all on startup; turn off when alembic owns the schema
    database_create_schema: bool = True

    # Session cookie (signed, see infrastructure/identity.py)
    session_secret: str = "dev-insecure-session-secret"
    session_cookie_name: str = "RJ_session"
    session_max_age_seconds: int = 60 * 60 * 24 * 30
    session_https_only: bool = False

    # Jokes
    jokes_list_limit: int = 5

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
