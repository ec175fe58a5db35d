"""Services package - Business logic layer"""

from services.user_service import UserService
from services.meal_service import MealService
from services.metrics_service import MetricsService, compute_metrics

__all__ = [
    "UserService",
    "MealService",
    "MetricsService",
    "compute_metrics",
]
