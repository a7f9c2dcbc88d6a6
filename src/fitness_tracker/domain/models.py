"""Domain models for the fitness tracker."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents an authenticated user."""

    id: UUID
    email: str | None = None
