"""
App package - Application configuration and core utilities.
Contains settings and the domain exception hierarchy.
"""

from app.config import Settings, settings
from app.exceptions import (
    DailyDietError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
)

__all__ = [
    "Settings",
    "settings",
    "DailyDietError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
]
