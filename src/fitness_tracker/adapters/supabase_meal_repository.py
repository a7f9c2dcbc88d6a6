"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.rows import parse_datetime, parse_number
from fitness_tracker.domain.meals import (
    FoodItem,
    MealDraft,
    MealQuery,
    MealRecord,
    meal_totals,
)
from fitness_tracker.services.errors import RecordStoreError
from fitness_tracker.services.meals import MealRepository

_COLUMNS = "id, user_id, date, meal_type, items, created_at"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealRecord:
        """Insert a meal row with its items and totals."""
        payload = {
            "user_id": str(user_id),
            "date": draft.date.isoformat(),
            "meal_type": draft.meal_type,
            **_items_columns(draft.items),
        }
        response = self.client.table("meals").insert(payload).execute()
        if not response.data:
            raise RecordStoreError("Failed to create meal")
        return _parse_row(response.data[0])

    def list_meals(self, user_id: UUID, query: MealQuery) -> list[MealRecord]:
        """Return a page of meals ordered newest first."""
        request = self.client.table("meals").select(_COLUMNS)
        request = _apply_filters(request, user_id, query)
        response = (
            request.order("date", desc=True)
            .range(query.skip, query.skip + query.limit - 1)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def count_meals(self, user_id: UUID, query: MealQuery) -> int:
        """Return the exact number of meals matching the filters."""
        request = self.client.table("meals").select("id", count="exact")
        response = _apply_filters(request, user_id, query).execute()
        return response.count or 0

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id, scoped to its owner."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def replace_meal(
        self, user_id: UUID, meal_id: UUID, meal_type: str, items: list[FoodItem]
    ) -> MealRecord | None:
        """Replace meal type and items, rewriting the total columns."""
        response = (
            self.client.table("meals")
            .update({"meal_type": meal_type, **_items_columns(items)})
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal row owned by the user."""
        response = (
            self.client.table("meals")
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def list_meals_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals within the inclusive time range."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _items_columns(items: list[FoodItem]) -> dict[str, object]:
    totals = meal_totals(items)
    return {
        "items": [
            {
                "name": item.name,
                "calories": item.calories,
                "protein": item.protein,
                "carbs": item.carbs,
                "fats": item.fats,
                "quantity": item.quantity,
                "unit": item.unit,
            }
            for item in items
        ],
        "total_calories": totals.calories,
        "total_protein": totals.protein,
        "total_carbs": totals.carbs,
        "total_fats": totals.fats,
    }


def _apply_filters(request: Any, user_id: UUID, query: MealQuery) -> Any:
    request = request.eq("user_id", str(user_id))
    if query.start is not None:
        request = request.gte("date", query.start.isoformat())
    if query.end is not None:
        request = request.lte("date", query.end.isoformat())
    if query.meal_type:
        request = request.eq("meal_type", query.meal_type)
    return request


def _parse_item(raw: dict[str, object]) -> FoodItem:
    return FoodItem(
        name=str(raw.get("name") or ""),
        calories=parse_number(raw, "calories"),
        protein=parse_number(raw, "protein", default=0.0),
        carbs=parse_number(raw, "carbs", default=0.0),
        fats=parse_number(raw, "fats", default=0.0),
        quantity=parse_number(raw, "quantity", default=1.0),
        unit=str(raw.get("unit") or "serving"),
    )


def _parse_row(row: dict[str, object]) -> MealRecord:
    raw_items = row.get("items") or []
    if not isinstance(raw_items, list):
        raise RecordStoreError("Meal items column must be a list")
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=parse_datetime(row, "date"),
        meal_type=str(row.get("meal_type") or ""),
        items=[_parse_item(item) for item in raw_items],
        created_at=parse_datetime(row, "created_at") if row.get("created_at") else None,
    )
