"""Supabase repository for workouts."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.rows import parse_datetime, parse_number
from fitness_tracker.domain.workouts import WorkoutDraft, WorkoutQuery, WorkoutRecord
from fitness_tracker.services.errors import RecordStoreError
from fitness_tracker.services.workouts import WorkoutRepository

_COLUMNS = "id, user_id, date, name, type, duration, calories, notes, created_at"


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout persistence."""

    client: Client

    def create_workout(self, user_id: UUID, draft: WorkoutDraft) -> WorkoutRecord:
        """Insert a workout row and return it."""
        response = (
            self.client.table("workouts")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": draft.date.isoformat(),
                    "name": draft.name,
                    "type": draft.type,
                    "duration": draft.duration_minutes,
                    "calories": draft.calories_burned,
                    "notes": draft.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RecordStoreError("Failed to create workout")
        return _parse_row(response.data[0])

    def list_workouts(self, user_id: UUID, query: WorkoutQuery) -> list[WorkoutRecord]:
        """Return a page of workouts ordered newest first."""
        request = self.client.table("workouts").select(_COLUMNS)
        request = _apply_filters(request, user_id, query)
        response = (
            request.order("date", desc=True)
            .range(query.skip, query.skip + query.limit - 1)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def count_workouts(self, user_id: UUID, query: WorkoutQuery) -> int:
        """Return the exact number of workouts matching the filters."""
        request = self.client.table("workouts").select("id", count="exact")
        response = _apply_filters(request, user_id, query).execute()
        return response.count or 0

    def get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord | None:
        """Return a workout by id, scoped to its owner."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_workout(
        self, user_id: UUID, workout_id: UUID, changes: dict[str, object]
    ) -> WorkoutRecord | None:
        """Update workout columns and return the updated row."""
        if not changes:
            return self.get_workout(user_id, workout_id)
        response = (
            self.client.table("workouts")
            .update(changes)
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        """Delete a workout row owned by the user."""
        response = (
            self.client.table("workouts")
            .delete()
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def list_workouts_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WorkoutRecord]:
        """Return workouts within the inclusive time range."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_workout_dates(self, user_id: UUID) -> list[datetime]:
        """Return every workout date for the user, newest first."""
        response = (
            self.client.table("workouts")
            .select("date")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [parse_datetime(row, "date") for row in response.data or []]


def _apply_filters(request: Any, user_id: UUID, query: WorkoutQuery) -> Any:
    request = request.eq("user_id", str(user_id))
    if query.start is not None:
        request = request.gte("date", query.start.isoformat())
    if query.end is not None:
        request = request.lte("date", query.end.isoformat())
    if query.type:
        request = request.eq("type", query.type)
    return request


def _parse_row(row: dict[str, object]) -> WorkoutRecord:
    created_raw = row.get("created_at")
    return WorkoutRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=parse_datetime(row, "date"),
        name=str(row.get("name") or ""),
        type=str(row.get("type") or "other"),
        duration_minutes=parse_number(row, "duration"),
        calories_burned=parse_number(row, "calories"),
        notes=str(row["notes"]) if row.get("notes") else None,
        created_at=parse_datetime(row, "created_at") if created_raw else None,
    )
