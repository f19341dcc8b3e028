"""Service-layer exception hierarchy."""
from __future__ import annotations


class ServiceError(Exception):
    """Base service error."""


class ValidationError(ServiceError):
    """Raised when input is well-formed but cannot be accepted, e.g. an unknown tenant."""


class StorageError(ServiceError):
    """Raised when the store rejects a statement or cannot be reached."""
