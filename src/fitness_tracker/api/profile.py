"""Profile endpoints for the signed-in user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from fitness_tracker.api.deps import get_container, require_user
from fitness_tracker.api.errors import failure_message
from fitness_tracker.api.schemas import ProfileUpdateIn  # noqa: TC001
from fitness_tracker.api.serializers import profile_payload
from fitness_tracker.domain.models import UserRecord  # noqa: TC001
from fitness_tracker.domain.profiles import ProfileUpdate

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/me")
async def read_profile(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    container: AppContainer = get_container(request)
    with failure_message("Failed to fetch profile", user):
        profile = container.profile_service.get_profile(user.id)
    return {"user": profile_payload(profile, user)}


@router.put("/me")
async def update_profile(
    payload: ProfileUpdateIn,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Update name, body measurements or goal."""
    container: AppContainer = get_container(request)
    update = ProfileUpdate(
        name=payload.name,
        age=payload.age,
        height=payload.height,
        weight=payload.weight,
        goals=payload.goals,
    )
    with failure_message("Failed to update profile", user):
        profile = container.profile_service.update_profile(user.id, update)
    return {
        "message": "Profile updated successfully",
        "user": profile_payload(profile, user),
    }
