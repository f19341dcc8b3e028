"""Root API router for REST endpoints."""
from fastapi import APIRouter

from shiftboard.api.endpoints import shifts, tenants

router = APIRouter()

router.include_router(tenants.router)
router.include_router(shifts.router)
