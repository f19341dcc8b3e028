"""Liveness and readiness probes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from shiftboard.core.database import Database, get_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/healthz", response_class=PlainTextResponse, summary="Liveness probe")
def healthz() -> str:
    """Return ``ok`` while the process is serving."""

    return "ok"


@router.get("/readyz", response_class=PlainTextResponse, summary="Readiness probe")
def readyz(database: Database = Depends(get_database)) -> Response:
    """Return ``ok`` when the store answers, 503 otherwise."""

    try:
        database.ping()
    except SQLAlchemyError:
        logger.exception("Readiness check failed")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "storage unavailable"},
        )
    return PlainTextResponse("ok")
