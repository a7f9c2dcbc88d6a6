"""Meal CRUD endpoints."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from fitness_tracker.api.deps import get_container, require_user, resolve_timestamp
from fitness_tracker.api.errors import failure_message
from fitness_tracker.api.schemas import FoodItemIn, MealIn  # noqa: TC001
from fitness_tracker.api.serializers import meal_payload
from fitness_tracker.domain.meals import FoodItem, MealDraft, MealQuery
from fitness_tracker.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    payload: MealIn, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Log a meal; totals are derived from its items."""
    container: AppContainer = get_container(request)
    draft = MealDraft(
        date=resolve_timestamp(payload.date, container),
        meal_type=payload.meal_type,
        items=_food_items(payload.items),
    )
    with failure_message("Failed to add meal", user):
        meal = container.meal_service.log_meal(user.id, draft)
    return {"message": "Meal added successfully", "meal": meal_payload(meal)}


@router.get("")
async def list_meals(  # noqa: PLR0913
    request: Request,
    limit: int = Query(default=20, ge=1, le=100),
    skip: int = Query(default=0, ge=0),
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    meal_type: str | None = Query(default=None, alias="mealType"),
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return the user's meals, newest first."""
    container: AppContainer = get_container(request)
    query = MealQuery(
        limit=limit,
        skip=skip,
        start=resolve_timestamp(start_date, container) if start_date else None,
        end=resolve_timestamp(end_date, container) if end_date else None,
        meal_type=meal_type,
    )
    with failure_message("Failed to fetch meals", user):
        page = container.meal_service.list_meals(user.id, query)
    return {
        "meals": [meal_payload(meal) for meal in page.meals],
        "totalCount": page.total_count,
        "hasMore": page.has_more,
    }


@router.get("/{meal_id}")
async def get_meal(
    meal_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return a single meal."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to fetch meal", user):
        meal = container.meal_service.get_meal(user.id, meal_id)
    return {"meal": meal_payload(meal)}


@router.put("/{meal_id}")
async def update_meal(
    meal_id: UUID,
    payload: MealIn,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Replace a meal's type and items."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to update meal", user):
        meal = container.meal_service.update_meal(
            user.id, meal_id, payload.meal_type, _food_items(payload.items)
        )
    return {"message": "Meal updated successfully", "meal": meal_payload(meal)}


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, str]:
    """Delete a meal."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to delete meal", user):
        container.meal_service.delete_meal(user.id, meal_id)
    return {"message": "Meal deleted successfully"}


def _food_items(items: list[FoodItemIn]) -> list[FoodItem]:
    return [
        FoodItem(
            name=item.name,
            calories=item.calories,
            protein=item.protein,
            carbs=item.carbs,
            fats=item.fats,
            quantity=item.quantity,
            unit=item.unit,
        )
        for item in items
    ]
