"""Domain models for user profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

GOALS = ("lose_weight", "gain_muscle", "maintain", "improve_endurance")
DEFAULT_GOAL = "maintain"
NAME_MAX_LENGTH = 50
AGE_RANGE = (13, 120)
HEIGHT_RANGE = (50, 300)
WEIGHT_RANGE = (20, 500)


@dataclass(frozen=True)
class Profile:
    """Personal details kept alongside the auth identity."""

    user_id: UUID
    name: str | None = None
    age: float | None = None
    height: float | None = None
    weight: float | None = None
    goals: str = DEFAULT_GOAL
    join_date: datetime | None = None


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial profile changes; ``None`` leaves a field untouched."""

    name: str | None = None
    age: float | None = None
    height: float | None = None
    weight: float | None = None
    goals: str | None = None
