"""
Request and response shapes for the meal endpoints.

Meal dates travel as integer epoch milliseconds. Requests may also send an
ISO-8601 date/datetime string or a numeric string; ``coerce_epoch_millis``
normalises all of them before the service layer sees the value.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# 100,000,000 days either side of the epoch, in milliseconds
MAX_EPOCH_MILLIS = 8_640_000_000_000_000


def _in_range(millis: int) -> int:
    if not -MAX_EPOCH_MILLIS <= millis <= MAX_EPOCH_MILLIS:
        raise ValueError("date is out of range")
    return millis


def coerce_epoch_millis(value: Any) -> int:
    """Convert a timestamp-like value to integer epoch milliseconds.

    Numbers are taken as milliseconds already. Naive datetimes are read as UTC.
    Results must lie within +-MAX_EPOCH_MILLIS.

    Raises:
        ValueError: if the value cannot be read as a point in time
    """
    if isinstance(value, bool):
        raise ValueError("date must be a timestamp, not a boolean")

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError("date must be a finite number")
        return _in_range(int(value))

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("date must not be empty")
        try:
            return coerce_epoch_millis(float(text))
        except ValueError:
            pass
        try:
            # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
            value = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"invalid date: {value!r}") from e

    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return _in_range((value - _EPOCH) // _ONE_MS)

    raise ValueError(f"invalid date: {value!r}")


class MealWrite(BaseModel):
    """Body of POST /meals and PUT /meals/{id}; every field is required"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    date: int = Field(..., description="Occurrence time; stored as epoch milliseconds")
    is_on_diet: StrictBool = Field(..., alias="isOnDiet")

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v):
        return coerce_epoch_millis(v)


class MealResponse(BaseModel):
    """A stored meal as returned to its owner"""

    id: UUID
    user_id: UUID
    name: str
    description: str
    date: int
    is_on_diet: bool
    created_at: Optional[datetime] = None


class MealEnvelope(BaseModel):
    meal: MealResponse


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class MealMetricsResponse(BaseModel):
    """Diet adherence over the caller's whole history"""

    model_config = ConfigDict(populate_by_name=True)

    total_meals: int = Field(..., alias="totalMeals")
    total_meals_on_diet: int = Field(..., alias="totalMealsOnDiet")
    total_meals_off_diet: int = Field(..., alias="totalMealsOffDiet")
    best_on_diet_sequence: int = Field(..., alias="bestOnDietSequence")
