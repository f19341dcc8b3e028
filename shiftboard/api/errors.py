"""HTTP error helpers: service-error mapping and the ``{"error": ...}`` envelope."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shiftboard.api.cors import CORS_HEADERS, is_api_path
from shiftboard.services.exceptions import ServiceError, StorageError, ValidationError

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "invalid json"
INTERNAL_ERROR_MESSAGE = "internal server error"
VALUE_ERROR_PREFIX = "Value error, "


def map_service_error(exc: ServiceError) -> HTTPException:
    """Translate service-layer errors into HTTP exceptions."""

    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    if isinstance(exc, StorageError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal service error")


def _is_decode_error(error: dict[str, Any]) -> bool:
    # Unparseable, empty or non-object bodies, and fields of the wrong JSON
    # type, are all rejected before any field rule is looked at.
    if error["type"] == "json_invalid":
        return True
    loc = tuple(error.get("loc", ()))
    if len(loc) <= 1:
        return True
    return error["type"].endswith("_type")


def describe_validation_errors(errors: list[dict[str, Any]]) -> tuple[int, str]:
    """Pick the status code and message for a failed request validation.

    Decoding problems win over field problems; among field problems the first
    reported one wins, which follows field declaration order.
    """

    if not errors or any(_is_decode_error(error) for error in errors):
        return status.HTTP_400_BAD_REQUEST, INVALID_JSON_MESSAGE
    message = str(errors[0].get("msg", ""))
    return status.HTTP_422_UNPROCESSABLE_ENTITY, message.removeprefix(VALUE_ERROR_PREFIX)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    status_code, message = describe_validation_errors(list(exc.errors()))
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status_code, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Served by the outermost middleware, so the CORS middleware never sees it
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    headers = dict(CORS_HEADERS) if is_api_path(request.url.path) else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
        headers=headers,
    )


def install_error_handlers(application: FastAPI) -> None:
    """Render every HTTP, validation and unexpected error as ``{"error": message}``."""

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
