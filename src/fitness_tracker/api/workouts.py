"""Workout CRUD endpoints."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from fitness_tracker.api.deps import get_container, require_user, resolve_timestamp
from fitness_tracker.api.errors import failure_message
from fitness_tracker.api.schemas import WorkoutIn, WorkoutUpdateIn  # noqa: TC001
from fitness_tracker.api.serializers import workout_payload
from fitness_tracker.domain.models import UserRecord  # noqa: TC001
from fitness_tracker.domain.workouts import WorkoutDraft, WorkoutQuery, WorkoutUpdate

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_workout(
    payload: WorkoutIn, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Log a workout and return it with exercise instructions."""
    container: AppContainer = get_container(request)
    draft = WorkoutDraft(
        date=resolve_timestamp(payload.date, container),
        name=payload.name,
        type=payload.type,
        duration_minutes=payload.duration,
        calories_burned=payload.calories,
        notes=payload.notes,
    )
    with failure_message("Failed to add workout", user):
        workout = container.workout_service.log_workout(user.id, draft)
    return {
        "message": "Workout added successfully",
        "workout": workout_payload(workout),
        "exerciseSteps": container.workout_service.exercise_steps(workout),
    }


@router.get("")
async def list_workouts(  # noqa: PLR0913
    request: Request,
    limit: int = Query(default=20, ge=1, le=100),
    skip: int = Query(default=0, ge=0),
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    workout_type: str | None = Query(default=None, alias="type"),
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return the user's workouts, newest first."""
    container: AppContainer = get_container(request)
    query = WorkoutQuery(
        limit=limit,
        skip=skip,
        start=resolve_timestamp(start_date, container) if start_date else None,
        end=resolve_timestamp(end_date, container) if end_date else None,
        type=workout_type,
    )
    with failure_message("Failed to fetch workouts", user):
        page = container.workout_service.list_workouts(user.id, query)
    return {
        "workouts": [workout_payload(workout) for workout in page.workouts],
        "totalCount": page.total_count,
        "hasMore": page.has_more,
    }


@router.get("/{workout_id}")
async def get_workout(
    workout_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return a single workout with exercise instructions."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to fetch workout", user):
        workout = container.workout_service.get_workout(user.id, workout_id)
    return {
        "workout": workout_payload(workout),
        "exerciseSteps": container.workout_service.exercise_steps(workout),
    }


@router.put("/{workout_id}")
async def update_workout(
    workout_id: UUID,
    payload: WorkoutUpdateIn,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Apply a partial update to a workout."""
    container: AppContainer = get_container(request)
    notes = None
    if "notes" in payload.model_fields_set:
        notes = payload.notes or ""
    update = WorkoutUpdate(
        name=payload.name,
        type=payload.type,
        duration_minutes=payload.duration,
        calories_burned=payload.calories,
        notes=notes,
    )
    with failure_message("Failed to update workout", user):
        workout = container.workout_service.update_workout(user.id, workout_id, update)
    return {
        "message": "Workout updated successfully",
        "workout": workout_payload(workout),
    }


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, str]:
    """Delete a workout."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to delete workout", user):
        container.workout_service.delete_workout(user.id, workout_id)
    return {"message": "Workout deleted successfully"}
