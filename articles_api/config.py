from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Articles API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    app_port: int = 8080

    # PostgreSQL connection parts (DB_HOST, DB_PORT, ...)
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "articles"
    db_ssl: bool = False

    # Full SQLAlchemy URL; takes precedence over the DB_* parts when set
    database_url: str = ""

    # "sqlalchemy" talks to the relational store, "memory" keeps articles in-process
    repository_backend: Literal["sqlalchemy", "memory"] = "sqlalchemy"
    sql_echo: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_repository: str = "INFO"       # article repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def postgres_dsn(self, hide_password: bool = False) -> str:
        """libpq-style connection string, as used by external tooling (psql, migrate)."""
        password = "***" if hide_password and self.db_password else self.db_password
        return (
            f"postgres://{self.db_user}:{password}@{self.db_host}:{self.db_port}"
            f"/{self.db_name}?sslmode={'require' if self.db_ssl else 'disable'}"
        )

    @property
    def async_database_url(self) -> str | URL:
        """URL for the async SQLAlchemy engine."""
        if self.database_url:
            return _get_async_url(self.database_url)
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
