"""Database engine and session management utilities."""
from __future__ import annotations

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from shiftboard.db import Base, models  # noqa: F401  # Ensure models are imported for metadata registration

from .settings import Settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def _connect_args(database_url: str, statement_timeout: float | None) -> dict[str, str]:
    """Driver arguments bounding how long the server runs any one statement."""

    if not statement_timeout or make_url(database_url).get_backend_name() != "postgresql":
        return {}
    return {"options": f"-c statement_timeout={int(statement_timeout * 1000)}"}


class Database:
    """Process-scoped connection pool and session factory."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_timeout: float = 30.0,
        statement_timeout: float | None = None,
    ) -> None:
        if database_url.startswith("sqlite"):
            # SQLite ignores pool sizing; sessions hop between worker threads
            self.engine: Engine = create_engine(
                database_url,
                future=True,
                connect_args={"check_same_thread": False},
            )
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        else:
            self.engine = create_engine(
                database_url,
                future=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_pre_ping=True,
                connect_args=_connect_args(database_url, statement_timeout),
            )
        self.session_factory = sessionmaker(
            bind=self.engine,
            class_=Session,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is not set")
        return cls(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_timeout=settings.database_pool_timeout,
            statement_timeout=settings.database_statement_timeout,
        )

    def ping(self) -> None:
        """Round-trip a trivial query; raises the driver error on failure."""

        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def create_schema(self) -> None:
        """Create database tables based on ORM metadata."""

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the pool installed on the application by its lifespan."""

    return request.app.state.database


def get_db_session(request: Request) -> Generator[Session, None, None]:
    """Yield a database session and ensure closure."""

    session = get_database(request).session_factory()
    try:
        yield session
    finally:
        session.close()
