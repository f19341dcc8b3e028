"""Shift REST endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from shiftboard.api.dependencies import get_shift_service, json_payload
from shiftboard.api.errors import map_service_error
from shiftboard.schemas.shift import ShiftCreate, ShiftRead
from shiftboard.services.exceptions import ServiceError
from shiftboard.services.shift_service import ShiftService

router = APIRouter(prefix="/shifts", tags=["shifts"])


@router.post(
    "",
    response_model=ShiftRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_shift(
    payload: ShiftCreate = Depends(json_payload(ShiftCreate)),
    service: ShiftService = Depends(get_shift_service),
) -> ShiftRead:
    """Create a shift for an existing tenant."""

    try:
        return service.create(payload)
    except ServiceError as exc:
        raise map_service_error(exc) from exc


@router.get("", response_model=list[ShiftRead], response_model_exclude_none=True)
def list_shifts(
    tenant_id: str | None = Query(default=None, description="Only shifts of this tenant"),
    service: ShiftService = Depends(get_shift_service),
) -> list[ShiftRead]:
    """List shifts newest first, optionally for a single tenant."""

    try:
        return service.list(tenant_id)
    except ServiceError as exc:
        raise map_service_error(exc) from exc
