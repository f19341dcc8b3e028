"""Shift repository with optional tenant filtering."""
from __future__ import annotations

from typing import Sequence

from shiftboard.db.models import Shift

from .base import Repository


class ShiftRepository(Repository[Shift]):
    """Shift repository; filtering by tenant is optional."""

    model = Shift

    def list_for_tenant(self, tenant_id: str | None = None) -> Sequence[Shift]:
        statement = self._base_query()
        if tenant_id:
            statement = statement.where(self.model.tenant_id == tenant_id)
        return self.session.scalars(statement).all()
