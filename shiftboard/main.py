"""Application entrypoint and FastAPI factory."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import uvicorn
from alembic import command
from alembic.config import Config
from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from shiftboard.api.cors import cors_middleware
from shiftboard.api.endpoints import health
from shiftboard.api.errors import install_error_handlers
from shiftboard.api.router import router as api_router
from shiftboard.core.database import Database
from shiftboard.core.observability import configure_logging
from shiftboard.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "db" / "migrations"


class StartupError(RuntimeError):
    """Raised when the service cannot start serving traffic."""


def _run_migrations(database_url: str) -> None:
    """Upgrade the schema to the latest Alembic revision."""

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation treats '%' specially (URL-encoded passwords)
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    command.upgrade(config, "head")


def open_database(settings: Settings) -> Database:
    """Build the connection pool and verify the store answers."""

    if not settings.database_url:
        raise StartupError("DATABASE_URL is not set")
    database = Database.from_settings(settings)
    try:
        database.ping()
    except SQLAlchemyError as exc:
        database.dispose()
        raise StartupError(f"database is unreachable: {exc}") from exc
    return database


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan, ensuring shared resources are initialized/closed."""

    settings = get_settings()
    configure_logging(settings.log_level)
    database = open_database(settings)
    if settings.run_migrations:
        _run_migrations(settings.database_url)
    app.state.settings = settings
    app.state.database = database
    logger.info("%s ready (environment=%s)", settings.app_name, settings.environment)
    try:
        yield
    finally:
        logger.info("Shutting down, releasing connection pool")
        database.dispose()


def create_app() -> FastAPI:
    """Application factory used by ASGI servers."""

    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
    )

    install_error_handlers(application)
    application.middleware("http")(cors_middleware)
    application.include_router(health.router)
    application.include_router(api_router, prefix="/api")

    return application


app = create_app()


def run() -> None:
    """Serve the API until interrupted; exit non-zero if startup fails."""

    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.database_url:
        logger.critical("DATABASE_URL is not set")
        raise SystemExit(1)
    # lifespan="on" makes a failed startup (unreachable store) fatal
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover
    run()
