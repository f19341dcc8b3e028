"""Shift service handling creation and listing."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shiftboard.repositories.shift import ShiftRepository
from shiftboard.schemas.shift import ShiftCreate, ShiftRead
from shiftboard.utils.identifiers import canonical_uuid

from .exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)

UNKNOWN_TENANT_MESSAGE = "tenant_id does not reference an existing tenant"


class ShiftService:
    """Service responsible for shift scheduling records."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.shifts = ShiftRepository(session)

    def create(self, payload: ShiftCreate) -> ShiftRead:
        tenant_id = canonical_uuid(payload.tenant_id)
        if tenant_id is None:
            # cannot match any tenant key; the uuid column would reject it anyway
            raise ValidationError(UNKNOWN_TENANT_MESSAGE)
        shift = self.shifts.add(
            self.shifts.model(
                tenant_id=tenant_id,
                title=payload.title,
                starts_at=payload.starts_at,
                ends_at=payload.ends_at,
            )
        )
        try:
            self.session.commit()
        except IntegrityError as exc:
            # NOT NULL columns are validated upstream; the foreign key is the
            # only constraint left to trip.
            self.session.rollback()
            logger.info("Shift rejected for tenant %s: %s", tenant_id, exc.orig)
            raise ValidationError(UNKNOWN_TENANT_MESSAGE) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Shift insert failed")
            raise StorageError("failed to create shift") from exc
        self.session.refresh(shift)
        return ShiftRead.model_validate(shift)

    def list(self, tenant_id: str | None = None) -> list[ShiftRead]:
        if tenant_id:
            tenant_key = canonical_uuid(tenant_id)
            if tenant_key is None:
                return []
            tenant_id = tenant_key
        try:
            results = self.shifts.list_for_tenant(tenant_id)
        except SQLAlchemyError as exc:
            logger.exception("Shift listing failed")
            raise StorageError("failed to list shifts") from exc
        return [ShiftRead.model_validate(row) for row in results]
