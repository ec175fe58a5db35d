"""
Meal domain mappers.
Handles transformation between the Meal ORM model and its response DTOs.
"""

from typing import Iterable

from domain.models import Meal
from domain.schemas.meal_schemas import MealResponse, MealListResponse, MealEnvelope


class MealMapper:
    """Mapper for meal transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse(
            id=meal.meal_id,
            user_id=meal.user_id,
            name=meal.name,
            description=meal.description,
            date=meal.date,
            is_on_diet=bool(meal.is_on_diet),
            created_at=meal.created_at,
        )

    @staticmethod
    def to_envelope(meal: Meal) -> MealEnvelope:
        return MealEnvelope(meal=MealMapper.to_response(meal))

    @staticmethod
    def to_list(meals: Iterable[Meal]) -> MealListResponse:
        return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])
