"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate
from domain.schemas.meal_schemas import (
    MealWrite,
    MealResponse,
    MealEnvelope,
    MealListResponse,
    MealMetricsResponse,
    coerce_epoch_millis,
)

__all__ = [
    # User schemas
    "UserCreate",
    # Meal schemas
    "MealWrite",
    "MealResponse",
    "MealEnvelope",
    "MealListResponse",
    "MealMetricsResponse",
    "coerce_epoch_millis",
]
