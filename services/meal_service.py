"""
Meal ledger: owner-scoped create/read/update/delete of logged meals.
"""

from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealWrite
from repositories import MealRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for a user's meals.

    Callers pass the already-authenticated user's id; every lookup is
    filtered by it, so a meal owned by someone else behaves exactly like a
    meal that does not exist.
    """

    @staticmethod
    def list_meals(db: Session, user_id: UUID) -> List[Meal]:
        meals = MealRepository(db).list_by_user(user_id)
        logger.info(f"meals_listed user_id={user_id} count={len(meals)}")
        return meals

    @staticmethod
    def get_meal(db: Session, user_id: UUID, meal_id: UUID) -> Meal:
        meal = MealRepository(db).get_owned(meal_id, user_id)
        if meal is None:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError()
        return meal

    @staticmethod
    def create_meal(db: Session, user_id: UUID, data: MealWrite) -> Meal:
        meal = Meal(
            user_id=user_id,
            name=data.name,
            description=data.description,
            date=data.date,
            is_on_diet=data.is_on_diet,
        )
        meal = MealRepository(db).create(meal)
        logger.info(
            f"meal_created user_id={user_id} meal_id={meal.meal_id} "
            f"date={meal.date} on_diet={meal.is_on_diet}"
        )
        return meal

    @staticmethod
    def update_meal(db: Session, user_id: UUID, meal_id: UUID, data: MealWrite) -> None:
        """
        Replace all mutable fields of an owned meal.

        Raises:
            NotFoundError: if no meal with this id belongs to the user
        """
        updated = MealRepository(db).update_owned(
            meal_id,
            user_id,
            name=data.name,
            description=data.description,
            date=data.date,
            is_on_diet=data.is_on_diet,
        )
        if not updated:
            logger.warning(f"meal_update_missed user_id={user_id} meal_id={meal_id}")
            raise NotFoundError()
        logger.info(f"meal_updated user_id={user_id} meal_id={meal_id}")

    @staticmethod
    def delete_meal(db: Session, user_id: UUID, meal_id: UUID) -> None:
        """
        Raises:
            NotFoundError: if no meal with this id belongs to the user
        """
        deleted = MealRepository(db).delete_owned(meal_id, user_id)
        if not deleted:
            logger.warning(f"meal_delete_missed user_id={user_id} meal_id={meal_id}")
            raise NotFoundError()
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")
