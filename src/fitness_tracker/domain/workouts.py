"""Domain models for workout logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

WORKOUT_TYPES = ("cardio", "strength", "flexibility", "sports", "other")
NOTES_MAX_LENGTH = 500


@dataclass(frozen=True)
class WorkoutRecord:
    """A logged workout owned by a single user."""

    id: UUID
    user_id: UUID
    date: datetime
    name: str
    type: str
    duration_minutes: float
    calories_burned: float
    notes: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class WorkoutDraft:
    """Validated workout fields ready to be persisted."""

    date: datetime
    name: str
    type: str
    duration_minutes: float
    calories_burned: float
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutQuery:
    """Filters and paging for listing workouts."""

    limit: int = 20
    skip: int = 0
    start: datetime | None = None
    end: datetime | None = None
    type: str | None = None


@dataclass(frozen=True)
class WorkoutUpdate:
    """Partial workout changes; ``None`` leaves a field untouched.

    Empty ``notes`` clears the stored notes.
    """

    name: str | None = None
    type: str | None = None
    duration_minutes: float | None = None
    calories_burned: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutPage:
    """A page of workouts with the total matching count."""

    workouts: list[WorkoutRecord]
    total_count: int
    has_more: bool
