"""Pydantic schemas exposed by the API layer."""
from .tenant import TenantCreate, TenantRead
from .shift import ShiftCreate, ShiftRead

__all__ = [
    "TenantCreate",
    "TenantRead",
    "ShiftCreate",
    "ShiftRead",
]
