"""Meal logging service."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.meals import (
    FOOD_UNITS,
    MEAL_TYPES,
    FoodItem,
    MealDraft,
    MealPage,
    MealQuery,
    MealRecord,
)
from fitness_tracker.services.errors import InvalidRecordError, RecordNotFoundError

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealRecord:
        """Persist a meal with its items and derived totals."""

    def list_meals(self, user_id: UUID, query: MealQuery) -> list[MealRecord]:
        """Return a page of meals, newest first."""

    def count_meals(self, user_id: UUID, query: MealQuery) -> int:
        """Return how many meals match the query filters."""

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal owned by the user, if present."""

    def replace_meal(
        self, user_id: UUID, meal_id: UUID, meal_type: str, items: list[FoodItem]
    ) -> MealRecord | None:
        """Replace a meal's type and items, rewriting its totals."""

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal; return False when nothing matched."""

    def list_meals_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals with ``start <= date <= end``."""


@dataclass
class MealService:
    """Application service for meal CRUD."""

    repository: MealRepository

    def log_meal(self, user_id: UUID, draft: MealDraft) -> MealRecord:
        """Validate and persist a new meal."""
        items = _clean_items(draft.items)
        _raise_if_invalid(draft.meal_type, items)
        meal = self.repository.create_meal(user_id, replace(draft, items=items))
        logger.info(
            "Meal logged",
            extra={"user_id": str(user_id), "meal_type": meal.meal_type},
        )
        return meal

    def list_meals(self, user_id: UUID, query: MealQuery) -> MealPage:
        """Return a page of meals with the total count."""
        meals = self.repository.list_meals(user_id, query)
        total = self.repository.count_meals(user_id, query)
        return MealPage(
            meals=meals,
            total_count=total,
            has_more=query.skip + query.limit < total,
        )

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord:
        """Return a meal or raise when it doesn't belong to the user."""
        meal = self.repository.get_meal(user_id, meal_id)
        if meal is None:
            raise RecordNotFoundError("Meal not found")
        return meal

    def update_meal(
        self, user_id: UUID, meal_id: UUID, meal_type: str, items: list[FoodItem]
    ) -> MealRecord:
        """Replace the meal type and items; totals follow the new items."""
        cleaned = _clean_items(items)
        _raise_if_invalid(meal_type, cleaned)
        meal = self.repository.replace_meal(user_id, meal_id, meal_type, cleaned)
        if meal is None:
            raise RecordNotFoundError("Meal not found")
        return meal

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal owned by the user."""
        if not self.repository.delete_meal(user_id, meal_id):
            raise RecordNotFoundError("Meal not found")


def validate_meal(meal_type: object, items: list[FoodItem]) -> list[str]:
    """Return validation messages for a meal and its items."""
    errors: list[str] = []
    if meal_type not in MEAL_TYPES:
        errors.append(f"Meal type must be one of: {', '.join(MEAL_TYPES)}")
    if not items:
        errors.append("At least one food item is required")
    for item in items:
        if not item.name.strip():
            errors.append("Food item name is required")
        for label, value in (
            ("Calories", item.calories),
            ("Protein", item.protein),
            ("Carbs", item.carbs),
            ("Fats", item.fats),
        ):
            if not _is_finite_number(value):
                errors.append(f"{label} must be a number")
            elif value < 0:
                errors.append(f"{label} cannot be negative")
        if not _is_finite_number(item.quantity) or item.quantity <= 0:
            errors.append("Quantity must be positive")
        if item.unit not in FOOD_UNITS:
            errors.append(f"Unit must be one of: {', '.join(FOOD_UNITS)}")
    return errors


def _raise_if_invalid(meal_type: object, items: list[FoodItem]) -> None:
    errors = validate_meal(meal_type, items)
    if errors:
        raise InvalidRecordError(errors)


def _clean_items(items: list[FoodItem]) -> list[FoodItem]:
    return [replace(item, name=item.name.strip()) for item in items]


def _is_finite_number(value: object) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )
