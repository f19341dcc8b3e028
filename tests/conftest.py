"""Shared pytest fixtures for Shiftboard tests."""
from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from shiftboard.core.database import Database
from shiftboard.core.settings import get_settings
from shiftboard.db.base import Base
from shiftboard.db.models import Tenant
from shiftboard.main import create_app


@pytest.fixture()
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'shiftboard.db'}"


@pytest.fixture()
def database(database_url: str) -> Generator[Database, None, None]:
    db = Database(database_url)
    db.create_schema()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=db.engine)
        db.dispose()


@pytest.fixture()
def session(database: Database) -> Generator[Session, None, None]:
    db_session = database.session_factory()
    try:
        yield db_session
    finally:
        db_session.close()


@pytest.fixture()
def tenant(session: Session) -> Tenant:
    tenant = Tenant(name="Test Tenant")
    session.add(tenant)
    session.commit()
    session.refresh(tenant)
    return tenant


@pytest.fixture()
def client(
    database: Database,
    database_url: str,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[TestClient, None, None]:
    """Client running the real lifespan against the per-test SQLite file."""

    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.delenv("RUN_MIGRATIONS", raising=False)
    get_settings.cache_clear()

    application = create_app()
    with TestClient(application) as test_client:
        yield test_client

    get_settings.cache_clear()
