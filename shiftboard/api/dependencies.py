"""FastAPI dependency utilities wiring services to the request session."""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from shiftboard.core.database import get_db_session
from shiftboard.services.shift_service import ShiftService
from shiftboard.services.tenant_service import TenantService

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def get_tenant_service(session: Session = Depends(get_db_session)) -> TenantService:
    """Provide tenant service with database session."""

    return TenantService(session)


def get_shift_service(session: Session = Depends(get_db_session)) -> ShiftService:
    """Provide shift service with database session."""

    return ShiftService(session)


def json_payload(schema: type[PayloadT]) -> Callable[[Request], Awaitable[PayloadT]]:
    """Build a dependency that decodes the request body as JSON into ``schema``.

    The body is parsed whatever ``Content-Type`` the client sent. Errors are
    raised as ``RequestValidationError`` located under ``body`` so the shared
    handler treats them exactly like FastAPI's own body errors.
    """

    async def decode(request: Request) -> PayloadT:
        body = await request.body()
        try:
            return schema.model_validate_json(body)
        except PydanticValidationError as exc:
            errors = [
                {**error, "loc": ("body", *error["loc"])}
                for error in exc.errors(include_url=False)
            ]
            raise RequestValidationError(errors) from exc

    return decode
