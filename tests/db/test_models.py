"""Tests covering ORM models in shiftboard.db.models."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import Uuid, select
from sqlalchemy.exc import IntegrityError

from shiftboard.db import models


def test_table_names() -> None:
    assert models.Tenant.__tablename__ == "tenants"
    assert models.Shift.__tablename__ == "shifts"


def test_tenant_defaults_generate_id_and_timestamp(session) -> None:
    first = models.Tenant(name="Acme Security")
    second = models.Tenant(name="Acme Security")
    session.add_all([first, second])
    session.commit()

    assert first.id and second.id
    assert first.id != second.id
    assert len(first.id) == 36
    assert isinstance(first.created_at, datetime)


def test_shift_optional_timestamps_default_to_none(session, tenant) -> None:
    shift = models.Shift(tenant_id=tenant.id, title="Night watch")
    session.add(shift)
    session.commit()
    session.refresh(shift)

    assert shift.starts_at is None
    assert shift.ends_at is None
    assert shift.tenant.id == tenant.id


def test_shift_requires_existing_tenant(session) -> None:
    session.add(models.Shift(tenant_id="00000000-0000-0000-0000-000000000000", title="Orphan"))

    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()

    assert session.scalars(select(models.Shift)).all() == []


def test_deleting_tenant_in_store_cascades_to_shifts(session, tenant) -> None:
    session.add(
        models.Shift(
            tenant_id=tenant.id,
            title="Day shift",
            starts_at=datetime(2024, 1, 1, 8, tzinfo=timezone.utc),
        )
    )
    session.commit()

    session.delete(tenant)
    session.commit()

    assert session.scalars(select(models.Shift)).all() == []


def test_identifiers_use_uuid_columns() -> None:
    assert isinstance(models.Tenant.__table__.c.id.type, Uuid)
    assert isinstance(models.Shift.__table__.c.id.type, Uuid)
    assert isinstance(models.Shift.__table__.c.tenant_id.type, Uuid)


def test_identifiers_read_back_as_hyphenated_strings(session, tenant) -> None:
    session.add(models.Shift(tenant_id=tenant.id, title="Night watch"))
    session.commit()
    session.expire_all()

    shift = session.scalars(select(models.Shift)).one()

    assert isinstance(shift.id, str) and len(shift.id) == 36
    assert shift.tenant_id == tenant.id
