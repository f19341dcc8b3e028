"""Permissive CORS policy for the JSON API."""
from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status

API_PREFIX = "/api"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


def is_api_path(path: str) -> bool:
    return path == API_PREFIX or path.startswith(f"{API_PREFIX}/")


async def cors_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Attach CORS headers to API responses and answer preflights directly.

    ``OPTIONS`` never reaches routing, so it gets a 204 for any API path,
    including ones with no route behind them.
    """

    if not is_api_path(request.url.path):
        return await call_next(request)
    if request.method == "OPTIONS":
        response = Response(status_code=status.HTTP_204_NO_CONTENT)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
