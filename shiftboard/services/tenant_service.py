"""Tenant service handling CRUD operations."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shiftboard.repositories.tenant import TenantRepository
from shiftboard.schemas.tenant import TenantCreate, TenantRead

from .exceptions import StorageError

logger = logging.getLogger(__name__)


class TenantService:
    """Service responsible for tenant lifecycle actions."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.tenants = TenantRepository(session)

    def create(self, payload: TenantCreate) -> TenantRead:
        tenant = self.tenants.add(self.tenants.model(name=payload.name))
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Tenant insert failed")
            raise StorageError("failed to create tenant") from exc
        self.session.refresh(tenant)
        return TenantRead.model_validate(tenant)

    def list(self) -> list[TenantRead]:
        try:
            results = self.tenants.list()
        except SQLAlchemyError as exc:
            logger.exception("Tenant listing failed")
            raise StorageError("failed to list tenants") from exc
        return [TenantRead.model_validate(row) for row in results]
