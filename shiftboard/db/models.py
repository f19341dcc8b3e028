"""ORM model definitions for Shiftboard."""
from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

# ids travel as canonical strings; native uuid columns where the store has them
UUID_ID = Uuid(as_uuid=False)


def _new_id() -> str:
    return str(uuid4())


class Tenant(Base, TimestampMixin):
    """Tenant represents an organization owning shifts."""

    id: Mapped[str] = mapped_column(UUID_ID, primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    shifts: Mapped[list["Shift"]] = relationship(
        "Shift",
        back_populates="tenant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Shift(Base, TimestampMixin):
    """Scheduled work period belonging to exactly one tenant."""

    id: Mapped[str] = mapped_column(UUID_ID, primary_key=True, default=_new_id)
    tenant_id: Mapped[str] = mapped_column(
        UUID_ID, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    starts_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    ends_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    tenant: Mapped[Tenant] = relationship("Tenant", back_populates="shifts")

    __table_args__ = (Index("idx_shifts_tenant", "tenant_id"),)


__all__ = [
    "Tenant",
    "Shift",
]
