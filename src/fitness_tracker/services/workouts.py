"""Workout logging service."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.exercises import exercise_steps
from fitness_tracker.domain.workouts import (
    NOTES_MAX_LENGTH,
    WORKOUT_TYPES,
    WorkoutDraft,
    WorkoutPage,
    WorkoutQuery,
    WorkoutRecord,
    WorkoutUpdate,
)
from fitness_tracker.services.errors import InvalidRecordError, RecordNotFoundError

logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts."""

    def create_workout(self, user_id: UUID, draft: WorkoutDraft) -> WorkoutRecord:
        """Persist a workout and return the stored record."""

    def list_workouts(self, user_id: UUID, query: WorkoutQuery) -> list[WorkoutRecord]:
        """Return a page of workouts, newest first."""

    def count_workouts(self, user_id: UUID, query: WorkoutQuery) -> int:
        """Return how many workouts match the query filters."""

    def get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord | None:
        """Return a workout owned by the user, if present."""

    def update_workout(
        self, user_id: UUID, workout_id: UUID, changes: dict[str, object]
    ) -> WorkoutRecord | None:
        """Apply column changes to a workout and return the updated record."""

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        """Delete a workout; return False when nothing matched."""

    def list_workouts_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WorkoutRecord]:
        """Return workouts with ``start <= date <= end``."""

    def list_workout_dates(self, user_id: UUID) -> list[datetime]:
        """Return the date of every workout the user has logged."""


@dataclass
class WorkoutService:
    """Application service for workout CRUD."""

    repository: WorkoutRepository

    def log_workout(self, user_id: UUID, draft: WorkoutDraft) -> WorkoutRecord:
        """Validate and persist a new workout."""
        cleaned = replace(
            draft, name=draft.name.strip(), notes=_clean_notes(draft.notes)
        )
        errors = validate_workout_fields(
            name=cleaned.name,
            workout_type=cleaned.type,
            duration_minutes=cleaned.duration_minutes,
            calories_burned=cleaned.calories_burned,
            notes=cleaned.notes,
        )
        if errors:
            raise InvalidRecordError(errors)
        workout = self.repository.create_workout(user_id, cleaned)
        logger.info(
            "Workout logged", extra={"user_id": str(user_id), "type": workout.type}
        )
        return workout

    def list_workouts(self, user_id: UUID, query: WorkoutQuery) -> WorkoutPage:
        """Return a page of workouts with the total count."""
        workouts = self.repository.list_workouts(user_id, query)
        total = self.repository.count_workouts(user_id, query)
        return WorkoutPage(
            workouts=workouts,
            total_count=total,
            has_more=query.skip + query.limit < total,
        )

    def get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord:
        """Return a workout or raise when it doesn't belong to the user."""
        workout = self.repository.get_workout(user_id, workout_id)
        if workout is None:
            raise RecordNotFoundError("Workout not found")
        return workout

    def update_workout(
        self, user_id: UUID, workout_id: UUID, update: WorkoutUpdate
    ) -> WorkoutRecord:
        """Apply a partial update after validating the provided fields."""
        changes: dict[str, object] = {}
        if update.name:
            changes["name"] = update.name.strip()
        if update.type:
            changes["type"] = update.type
        if update.duration_minutes is not None:
            changes["duration"] = update.duration_minutes
        if update.calories_burned is not None:
            changes["calories"] = update.calories_burned
        if update.notes is not None:
            changes["notes"] = _clean_notes(update.notes)

        errors = validate_workout_fields(
            name=changes.get("name"),
            workout_type=changes.get("type"),
            duration_minutes=changes.get("duration"),
            calories_burned=changes.get("calories"),
            notes=changes.get("notes"),
            partial=True,
        )
        if errors:
            raise InvalidRecordError(errors)

        workout = self.repository.update_workout(user_id, workout_id, changes)
        if workout is None:
            raise RecordNotFoundError("Workout not found")
        return workout

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> None:
        """Delete a workout owned by the user."""
        if not self.repository.delete_workout(user_id, workout_id):
            raise RecordNotFoundError("Workout not found")

    def exercise_steps(self, workout: WorkoutRecord) -> list[str]:
        """Return step-by-step instructions for the workout."""
        return exercise_steps(workout.type, workout.name)


def validate_workout_fields(  # noqa: PLR0913
    *,
    name: object,
    workout_type: object,
    duration_minutes: object,
    calories_burned: object,
    notes: object,
    partial: bool = False,
) -> list[str]:
    """Return validation messages for workout fields.

    With ``partial`` set, ``None`` values are treated as not provided.
    """
    errors: list[str] = []
    if name is not None or not partial:
        if not isinstance(name, str) or not name.strip():
            errors.append("Workout name is required")
    if workout_type is not None or not partial:
        if workout_type not in WORKOUT_TYPES:
            errors.append(f"Workout type must be one of: {', '.join(WORKOUT_TYPES)}")
    if duration_minutes is not None or not partial:
        if not _is_number(duration_minutes) or duration_minutes < 1:
            errors.append("Duration must be at least 1 minute")
    if calories_burned is not None or not partial:
        if not _is_number(calories_burned) or calories_burned < 1:
            errors.append("Calories must be positive")
    if isinstance(notes, str) and len(notes) > NOTES_MAX_LENGTH:
        errors.append(f"Notes must be less than {NOTES_MAX_LENGTH} characters")
    return errors


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _clean_notes(notes: str | None) -> str | None:
    if notes is None:
        return None
    return notes.strip() or None
