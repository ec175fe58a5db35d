"""
Metrics engine: diet adherence statistics over a user's full meal history.
"""

from typing import Iterable
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.schemas.meal_schemas import MealMetricsResponse
from repositories import MealRepository

logger = logging.getLogger("dailydiet.metrics")


def compute_metrics(flags_newest_first: Iterable[bool]) -> MealMetricsResponse:
    """
    Fold on-diet flags into totals and the longest on-diet streak.

    ``flags_newest_first`` must already be in the order the streak is
    measured in (date descending, ties by meal id). One pass, constant space.
    """
    total = 0
    on_diet = 0
    streak = 0
    best = 0

    for is_on_diet in flags_newest_first:
        total += 1
        if is_on_diet:
            on_diet += 1
            streak += 1
            if streak > best:
                best = streak
        else:
            streak = 0

    return MealMetricsResponse(
        total_meals=total,
        total_meals_on_diet=on_diet,
        total_meals_off_diet=total - on_diet,
        best_on_diet_sequence=best,
    )


class MetricsService:
    @staticmethod
    def get_metrics(db: Session, user_id: UUID) -> MealMetricsResponse:
        flags = MealRepository(db).diet_flags_newest_first(user_id)
        metrics = compute_metrics(flags)
        logger.info(
            f"metrics_computed user_id={user_id} total={metrics.total_meals} "
            f"best_sequence={metrics.best_on_diet_sequence}"
        )
        return metrics
