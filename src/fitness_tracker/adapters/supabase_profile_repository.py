"""Supabase repository for user profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.rows import parse_datetime, parse_number
from fitness_tracker.domain.profiles import DEFAULT_GOAL, Profile
from fitness_tracker.services.errors import RecordStoreError
from fitness_tracker.services.profiles import ProfileRepository

_COLUMNS = "id, name, age, height, weight, goals, join_date"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence.

    Rows are keyed by the Supabase Auth user id; ``join_date`` is filled by
    the column default on first insert.
    """

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        response = (
            self.client.table("profiles")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def upsert_profile(self, user_id: UUID, changes: dict[str, object]) -> Profile:
        response = (
            self.client.table("profiles")
            .upsert({"id": str(user_id), **changes}, on_conflict="id")
            .execute()
        )
        if not response.data:
            raise RecordStoreError("Failed to save profile")
        return _parse_row(response.data[0])


def _optional_number(row: dict[str, object], key: str) -> float | None:
    if row.get(key) is None:
        return None
    return parse_number(row, key)


def _parse_row(row: dict[str, object]) -> Profile:
    return Profile(
        user_id=UUID(str(row["id"])),
        name=str(row["name"]) if row.get("name") else None,
        age=_optional_number(row, "age"),
        height=_optional_number(row, "height"),
        weight=_optional_number(row, "weight"),
        goals=str(row.get("goals") or DEFAULT_GOAL),
        join_date=parse_datetime(row, "join_date") if row.get("join_date") else None,
    )
