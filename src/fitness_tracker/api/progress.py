"""Progress analytics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from fitness_tracker.api.deps import get_container, require_user
from fitness_tracker.api.errors import failure_message
from fitness_tracker.api.serializers import (
    nutrition_payload,
    summary_payload,
    workout_analytics_payload,
)
from fitness_tracker.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/summary")
async def progress_summary(
    request: Request,
    period: str | None = None,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return calories burned vs consumed per day for the period."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to fetch progress summary", user):
        summary = container.progress_service.get_summary(user.id, period)
    return summary_payload(summary)


@router.get("/nutrition")
async def progress_nutrition(
    request: Request,
    period: str | None = None,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return macro totals and daily averages for the period."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to fetch nutrition data", user):
        breakdown = container.progress_service.get_nutrition(user.id, period)
    return nutrition_payload(breakdown)


@router.get("/workouts")
async def progress_workouts(
    request: Request,
    period: str | None = None,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return workout totals, type distribution and weekly trends."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to fetch workout analytics", user):
        analytics = container.progress_service.get_workout_analytics(user.id, period)
    return workout_analytics_payload(analytics)
