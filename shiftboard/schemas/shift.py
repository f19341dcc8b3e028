"""Pydantic schemas for shift operations."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from shiftboard.utils.identifiers import uuid_to_str
from shiftboard.utils.timestamps import ensure_utc, parse_rfc3339

REQUIRED_MESSAGE = "tenant_id and title required"


class ShiftCreate(BaseModel):
    """Payload to create a shift.

    ``starts_at`` and ``ends_at`` are independent: a missing key, ``null`` and
    ``""`` all mean "not scheduled". No ordering between them is enforced.
    """

    tenant_id: str | None = Field(default=None, validate_default=True)
    title: str | None = Field(default=None, validate_default=True)
    starts_at: datetime | None = None
    ends_at: datetime | None = None

    @field_validator("tenant_id", "title")
    @classmethod
    def required(cls, value: str | None) -> str:
        if not value:
            raise ValueError(REQUIRED_MESSAGE)
        return value

    @field_validator("starts_at", "ends_at", mode="before")
    @classmethod
    def rfc3339(cls, value: Any, info: ValidationInfo) -> datetime | None:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError("string_type", "Input should be a valid string")
        try:
            parsed = parse_rfc3339(value)
        except ValueError:
            raise ValueError(f"invalid {info.field_name} format (RFC3339)") from None
        # zone-less stores keep wall-clock time only, so persist UTC
        return parsed.astimezone(timezone.utc)


class ShiftRead(BaseModel):
    """Shift representation returned by APIs."""

    id: str
    tenant_id: str
    title: str
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    created_at: datetime

    class Config:
        from_attributes = True

    normalize_ids = field_validator("id", "tenant_id", mode="before")(uuid_to_str)
    normalize_timestamps = field_validator("starts_at", "ends_at", "created_at")(ensure_utc)
