"""User profile service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.profiles import (
    AGE_RANGE,
    GOALS,
    HEIGHT_RANGE,
    NAME_MAX_LENGTH,
    WEIGHT_RANGE,
    Profile,
    ProfileUpdate,
)
from fitness_tracker.services.errors import InvalidRecordError

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile, if the user has one."""

    def upsert_profile(self, user_id: UUID, changes: dict[str, object]) -> Profile:
        """Create or update the user's profile and return it."""


@dataclass
class ProfileService:
    """Application service for reading and editing profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> Profile:
        """Return the user's profile, or an empty one before the first save."""
        return self.repository.get_profile(user_id) or Profile(user_id=user_id)

    def update_profile(self, user_id: UUID, update: ProfileUpdate) -> Profile:
        """Validate and apply the provided fields."""
        changes: dict[str, object] = {}
        if update.name and update.name.strip():
            changes["name"] = update.name.strip()
        if update.age is not None:
            changes["age"] = update.age
        if update.height is not None:
            changes["height"] = update.height
        if update.weight is not None:
            changes["weight"] = update.weight
        if update.goals:
            changes["goals"] = update.goals

        errors = validate_profile(changes)
        if errors:
            raise InvalidRecordError(errors)
        if not changes:
            return self.get_profile(user_id)

        profile = self.repository.upsert_profile(user_id, changes)
        logger.info(
            "Profile updated",
            extra={"user_id": str(user_id), "fields": sorted(changes)},
        )
        return profile


def validate_profile(changes: dict[str, object]) -> list[str]:
    """Return validation messages for profile column changes."""
    errors: list[str] = []
    name = changes.get("name")
    if isinstance(name, str) and len(name) > NAME_MAX_LENGTH:
        errors.append(f"Name must be less than {NAME_MAX_LENGTH} characters")

    age = changes.get("age")
    if age is not None:
        if not _is_number(age) or age < AGE_RANGE[0]:
            errors.append(f"Age must be at least {AGE_RANGE[0]}")
        elif age > AGE_RANGE[1]:
            errors.append(f"Age must be less than {AGE_RANGE[1]}")
    for label, key, (low, high) in (
        ("Height", "height", HEIGHT_RANGE),
        ("Weight", "weight", WEIGHT_RANGE),
    ):
        value = changes.get(key)
        if value is not None and (not _is_number(value) or not low <= value <= high):
            errors.append(f"{label} must be realistic")

    goals = changes.get("goals")
    if goals is not None and goals not in GOALS:
        errors.append(f"Goals must be one of: {', '.join(GOALS)}")
    return errors


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
