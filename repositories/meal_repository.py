"""
Meal Repository - Data access layer for a user's meal log.

Every query filters on both ``meal_id`` and ``user_id``; there is no way to
load a meal by id alone.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for owner-scoped meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_by_id(self, meal_id: UUID) -> Optional[Meal]:
        raise NotImplementedError("Meals are only loaded together with their owner")

    def get_owned(self, meal_id: UUID, user_id: UUID) -> Optional[Meal]:
        """Get a meal if it belongs to ``user_id``"""
        return (
            self.db.query(Meal)
            .filter(Meal.meal_id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def list_by_user(self, user_id: UUID) -> List[Meal]:
        """All meals of a user, oldest first (ties by id)"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.date.asc(), Meal.meal_id.asc())
            .all()
        )

    def diet_flags_newest_first(self, user_id: UUID) -> List[bool]:
        """On-diet flags of a user's meals, newest first (ties by id)"""
        rows = (
            self.db.query(Meal.is_on_diet)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.date.desc(), Meal.meal_id.asc())
            .all()
        )
        return [bool(row.is_on_diet) for row in rows]

    def update_owned(self, meal_id: UUID, user_id: UUID, **fields) -> int:
        """Replace fields of an owned meal in a single UPDATE; returns rows affected"""
        count = (
            self.db.query(Meal)
            .filter(Meal.meal_id == meal_id, Meal.user_id == user_id)
            .update(fields, synchronize_session=False)
        )
        self.db.commit()
        return count

    def delete_owned(self, meal_id: UUID, user_id: UUID) -> int:
        """Delete an owned meal in a single DELETE; returns rows affected"""
        count = (
            self.db.query(Meal)
            .filter(Meal.meal_id == meal_id, Meal.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count
