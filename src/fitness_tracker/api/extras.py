"""Streak, stats and tips endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from fitness_tracker.api.deps import get_container, require_user
from fitness_tracker.api.errors import failure_message
from fitness_tracker.api.serializers import stats_payload, streak_payload
from fitness_tracker.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/extras", tags=["extras"])


@router.get("/tips", dependencies=[Depends(require_user)])
async def tips(request: Request) -> dict[str, object]:
    """Return five random motivational tips."""
    container: AppContainer = get_container(request)
    tip_service = container.tip_service
    return {"tips": tip_service.pick(5), "totalTips": len(tip_service.tips)}


@router.get("/streak")
async def streak(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the user's current and longest workout streaks."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to calculate workout streak", user):
        result = container.progress_service.get_streak(user.id)
    return streak_payload(result)


@router.get("/stats")
async def stats(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return workout totals for the last 30 days."""
    container: AppContainer = get_container(request)
    with failure_message("Failed to fetch workout stats", user):
        result = container.progress_service.get_workout_stats(user.id)
    return stats_payload(result)
