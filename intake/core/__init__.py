"""Core application components."""

from intake.core.config import settings
from intake.core.exceptions import (
    IntakeError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from intake.core.storage import ApplicationStorage, Base, get_storage

__all__ = [
    "ApplicationStorage",
    "Base",
    "IntakeError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "get_storage",
    "settings",
]
