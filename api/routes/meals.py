"""Meal log and diet metrics routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import get_db, get_current_user, get_meal_body
from domain.models import AppUser
from domain.schemas import (
    MealWrite,
    MealEnvelope,
    MealListResponse,
    MealMetricsResponse,
)
from domain.mappers import MealMapper
from services import MealService, MetricsService

router = APIRouter(prefix="/meals", tags=["Meals"])

# The body is read by get_meal_body, so its schema is declared by hand
MEAL_BODY_DOCS = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": MealWrite.model_json_schema()}},
    }
}


@router.get("", response_model=MealListResponse)
def list_meals(
    user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)
):
    """All meals of the caller, oldest first."""
    return MealMapper.to_list(MealService.list_meals(db, user.user_id))


# Registered before /{meal_id} so "metrics" is not parsed as an id
@router.get("/metrics", response_model=MealMetricsResponse)
def get_metrics(
    user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)
):
    """
    Diet adherence over the caller's whole history.

    ``bestOnDietSequence`` is the longest run of consecutive on-diet meals,
    newest first.
    """
    return MetricsService.get_metrics(db, user.user_id)


@router.get("/{meal_id}", response_model=MealEnvelope)
def get_meal(
    meal_id: UUID,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """A single meal of the caller; 404 if absent or owned by someone else."""
    return MealMapper.to_envelope(MealService.get_meal(db, user.user_id, meal_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    openapi_extra=MEAL_BODY_DOCS,
)
def create_meal(
    meal: MealWrite = Depends(get_meal_body),
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MealService.create_meal(db, user.user_id, meal)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put(
    "/{meal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    openapi_extra=MEAL_BODY_DOCS,
)
def update_meal(
    meal_id: UUID,
    meal: MealWrite = Depends(get_meal_body),
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Replace every field of a meal. Partial bodies are rejected."""
    MealService.update_meal(db, user.user_id, meal_id, meal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_meal(
    meal_id: UUID,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MealService.delete_meal(db, user.user_id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
