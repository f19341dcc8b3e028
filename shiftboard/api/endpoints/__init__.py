"""REST endpoint routers exposed by the API."""
from . import health, shifts, tenants

__all__ = [
    "health",
    "shifts",
    "tenants",
]
