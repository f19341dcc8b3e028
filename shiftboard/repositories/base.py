"""Repository abstractions for database access."""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from shiftboard.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Base repository for append-only entities listed newest first."""

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        return instance

    def list(self) -> Sequence[ModelT]:
        return self.session.scalars(self._base_query()).all()

    def _base_query(self) -> Select[tuple[ModelT]]:
        return select(self.model).order_by(self.model.created_at.desc())  # type: ignore[attr-defined]
