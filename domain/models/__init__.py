"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    build_engine,
    build_session_factory,
    init_database,
)
from domain.models.user import AppUser
from domain.models.meal import Meal

__all__ = [
    # Database
    "Base",
    "build_engine",
    "build_session_factory",
    "init_database",
    # Models
    "AppUser",
    "Meal",
]
