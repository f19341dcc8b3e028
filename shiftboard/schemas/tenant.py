"""Pydantic schemas for tenant operations."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from shiftboard.utils.identifiers import uuid_to_str
from shiftboard.utils.timestamps import ensure_utc

NAME_MIN_LENGTH = 2


class TenantCreate(BaseModel):
    """Payload to create a new tenant."""

    name: str | None = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_long_enough(cls, value: str | None) -> str:
        if value is None or len(value) < NAME_MIN_LENGTH:
            raise ValueError(f"name must be at least {NAME_MIN_LENGTH} characters")
        return value


class TenantRead(BaseModel):
    """Tenant representation returned by APIs."""

    id: str
    name: str
    created_at: datetime

    class Config:
        from_attributes = True

    normalize_id = field_validator("id", mode="before")(uuid_to_str)
    normalize_created_at = field_validator("created_at")(ensure_utc)
