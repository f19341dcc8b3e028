"""Application settings and environment loading utilities."""
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_FILE)

_DRIVER_PREFIXES = ("postgres://", "postgresql://")
PSYCOPG_PREFIX = "postgresql+psycopg://"


class Settings(BaseSettings):
    """Central application configuration."""

    app_name: str = "Shiftboard API"
    environment: str = Field(default="development", alias="ENVIRONMENT")
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy database URL",
        alias="DATABASE_URL",
    )
    database_pool_size: int = Field(default=10, ge=1, alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(default=5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    database_pool_timeout: float = Field(default=30.0, gt=0, alias="DATABASE_POOL_TIMEOUT")
    database_statement_timeout: float = Field(default=30.0, ge=0, alias="DATABASE_STATEMENT_TIMEOUT")
    run_migrations: bool = Field(default=False, alias="RUN_MIGRATIONS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    shutdown_timeout: int = Field(default=5, ge=0, alias="SHUTDOWN_TIMEOUT")

    class Config:
        env_file = ENV_FILE
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    @field_validator("database_url")
    @classmethod
    def use_psycopg_driver(cls, value: str | None) -> str | None:
        # libpq-style URLs (postgres://user@host/db) carry no SQLAlchemy driver
        if not value:
            return None
        for prefix in _DRIVER_PREFIXES:
            if value.startswith(prefix):
                return PSYCOPG_PREFIX + value.removeprefix(prefix)
        return value


@lru_cache
def get_settings() -> "Settings":
    """Return cached settings instance."""

    return Settings()
