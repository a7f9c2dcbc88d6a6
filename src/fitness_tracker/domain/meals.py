"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")
FOOD_UNITS = ("serving", "cup", "tbsp", "tsp", "gram", "oz", "piece")


@dataclass(frozen=True)
class MacroTotals:
    """Calories and macronutrients, in kcal and grams."""

    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class FoodItem:
    """A single food entry within a meal, with per-unit macros."""

    name: str
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    quantity: float = 1.0
    unit: str = "serving"


def meal_totals(items: list[FoodItem]) -> MacroTotals:
    """Sum per-unit macros multiplied by quantity across all items."""
    calories = protein = carbs = fats = 0.0
    for item in items:
        calories += item.calories * item.quantity
        protein += item.protein * item.quantity
        carbs += item.carbs * item.quantity
        fats += item.fats * item.quantity
    return MacroTotals(calories=calories, protein=protein, carbs=carbs, fats=fats)


@dataclass(frozen=True)
class MealRecord:
    """A logged meal. Totals are always derived from the current items."""

    id: UUID
    user_id: UUID
    date: datetime
    meal_type: str
    items: list[FoodItem]
    created_at: datetime | None = None

    @property
    def totals(self) -> MacroTotals:
        return meal_totals(self.items)


@dataclass(frozen=True)
class MealDraft:
    """Validated meal fields ready to be persisted."""

    date: datetime
    meal_type: str
    items: list[FoodItem]

    @property
    def totals(self) -> MacroTotals:
        return meal_totals(self.items)


@dataclass(frozen=True)
class MealQuery:
    """Filters and paging for listing meals."""

    limit: int = 20
    skip: int = 0
    start: datetime | None = None
    end: datetime | None = None
    meal_type: str | None = None


@dataclass(frozen=True)
class MealPage:
    """A page of meals with the total matching count."""

    meals: list[MealRecord]
    total_count: int
    has_more: bool
