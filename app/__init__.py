"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and bearer token helpers.
"""

from app.config import settings
from app.exceptions import (
    PlanITError,
    ServiceValidationError,
    NotFoundError,
    UnauthorizedError,
    OperationFailedError,
)

__all__ = [
    "settings",
    "PlanITError",
    "ServiceValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "OperationFailedError",
]
