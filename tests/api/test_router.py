"""Unit tests for the root API router configuration."""
from __future__ import annotations

from fastapi import FastAPI

from shiftboard.api.router import router


def _schema_paths() -> dict:
    application = FastAPI()
    application.include_router(router)
    return application.openapi()["paths"]


def test_router_exposes_tenant_and_shift_collections() -> None:
    paths = _schema_paths()

    assert set(paths) == {"/tenants", "/shifts"}


def test_router_paths_and_methods() -> None:
    paths = _schema_paths()

    assert set(paths["/tenants"]) == {"get", "post"}
    assert set(paths["/shifts"]) == {"get", "post"}
    assert paths["/shifts"]["get"]["parameters"][0]["name"] == "tenant_id"
