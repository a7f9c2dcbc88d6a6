"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from fitness_tracker.api.app import create_app
from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.meals import (
    FoodItem,
    MealDraft,
    MealQuery,
    MealRecord,
)
from fitness_tracker.domain.models import UserRecord
from fitness_tracker.domain.profiles import Profile
from fitness_tracker.domain.workouts import WorkoutDraft, WorkoutQuery, WorkoutRecord
from fitness_tracker.services.clock import Clock
from fitness_tracker.services.meals import MealRepository, MealService
from fitness_tracker.services.profiles import ProfileRepository, ProfileService
from fitness_tracker.services.progress import ProgressService
from fitness_tracker.services.tips import TipService
from fitness_tracker.services.users import IdentityProvider, UserService
from fitness_tracker.services.workouts import WorkoutRepository, WorkoutService

NOW = datetime(2024, 6, 15, 10, 30, tzinfo=UTC)
TOKEN = "test-access-token"


@dataclass
class FixedClock(Clock):
    """Clock frozen at a given instant."""

    current: datetime = NOW

    def now(self) -> datetime:
        return self.current


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Maps known access tokens to users."""

    users: dict[str, UserRecord] = field(default_factory=dict)

    def get_user(self, access_token: str) -> UserRecord | None:
        return self.users.get(access_token)


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    workouts: dict[UUID, WorkoutRecord] = field(default_factory=dict)

    def add(
        self, user_id: UUID, when: datetime, **overrides: object
    ) -> WorkoutRecord:
        fields = {
            "name": "Morning run",
            "type": "cardio",
            "duration_minutes": 30,
            "calories_burned": 300,
            "notes": None,
        }
        fields.update(overrides)
        workout = WorkoutRecord(id=uuid4(), user_id=user_id, date=when, **fields)
        self.workouts[workout.id] = workout
        return workout

    def create_workout(self, user_id: UUID, draft: WorkoutDraft) -> WorkoutRecord:
        workout = WorkoutRecord(
            id=uuid4(),
            user_id=user_id,
            date=draft.date,
            name=draft.name,
            type=draft.type,
            duration_minutes=draft.duration_minutes,
            calories_burned=draft.calories_burned,
            notes=draft.notes,
            created_at=draft.date,
        )
        self.workouts[workout.id] = workout
        return workout

    def list_workouts(self, user_id: UUID, query: WorkoutQuery) -> list[WorkoutRecord]:
        matches = sorted(
            self._matching(user_id, query), key=lambda w: w.date, reverse=True
        )
        return matches[query.skip : query.skip + query.limit]

    def count_workouts(self, user_id: UUID, query: WorkoutQuery) -> int:
        return len(self._matching(user_id, query))

    def get_workout(self, user_id: UUID, workout_id: UUID) -> WorkoutRecord | None:
        workout = self.workouts.get(workout_id)
        if workout is None or workout.user_id != user_id:
            return None
        return workout

    def update_workout(
        self, user_id: UUID, workout_id: UUID, changes: dict[str, object]
    ) -> WorkoutRecord | None:
        workout = self.get_workout(user_id, workout_id)
        if workout is None:
            return None
        columns = {
            "name": "name",
            "type": "type",
            "duration": "duration_minutes",
            "calories": "calories_burned",
            "notes": "notes",
        }
        updated = replace(
            workout, **{columns[key]: value for key, value in changes.items()}
        )
        self.workouts[workout_id] = updated
        return updated

    def delete_workout(self, user_id: UUID, workout_id: UUID) -> bool:
        if self.get_workout(user_id, workout_id) is None:
            return False
        del self.workouts[workout_id]
        return True

    def list_workouts_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WorkoutRecord]:
        return sorted(
            (
                w
                for w in self.workouts.values()
                if w.user_id == user_id and start <= w.date <= end
            ),
            key=lambda w: w.date,
        )

    def list_workout_dates(self, user_id: UUID) -> list[datetime]:
        return [w.date for w in self.workouts.values() if w.user_id == user_id]

    def _matching(self, user_id: UUID, query: WorkoutQuery) -> list[WorkoutRecord]:
        return [
            w
            for w in self.workouts.values()
            if w.user_id == user_id
            and (query.start is None or w.date >= query.start)
            and (query.end is None or w.date <= query.end)
            and (query.type is None or w.type == query.type)
        ]


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealRecord] = field(default_factory=dict)

    def add(
        self,
        user_id: UUID,
        when: datetime,
        items: list[FoodItem],
        meal_type: str = "lunch",
    ) -> MealRecord:
        meal = MealRecord(
            id=uuid4(), user_id=user_id, date=when, meal_type=meal_type, items=items
        )
        self.meals[meal.id] = meal
        return meal

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealRecord:
        meal = MealRecord(
            id=uuid4(),
            user_id=user_id,
            date=draft.date,
            meal_type=draft.meal_type,
            items=list(draft.items),
            created_at=draft.date,
        )
        self.meals[meal.id] = meal
        return meal

    def list_meals(self, user_id: UUID, query: MealQuery) -> list[MealRecord]:
        matches = sorted(
            self._matching(user_id, query), key=lambda m: m.date, reverse=True
        )
        return matches[query.skip : query.skip + query.limit]

    def count_meals(self, user_id: UUID, query: MealQuery) -> int:
        return len(self._matching(user_id, query))

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        meal = self.meals.get(meal_id)
        if meal is None or meal.user_id != user_id:
            return None
        return meal

    def replace_meal(
        self, user_id: UUID, meal_id: UUID, meal_type: str, items: list[FoodItem]
    ) -> MealRecord | None:
        meal = self.get_meal(user_id, meal_id)
        if meal is None:
            return None
        updated = replace(meal, meal_type=meal_type, items=list(items))
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        if self.get_meal(user_id, meal_id) is None:
            return False
        del self.meals[meal_id]
        return True

    def list_meals_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        return sorted(
            (
                m
                for m in self.meals.values()
                if m.user_id == user_id and start <= m.date <= end
            ),
            key=lambda m: m.date,
        )

    def _matching(self, user_id: UUID, query: MealQuery) -> list[MealRecord]:
        return [
            m
            for m in self.meals.values()
            if m.user_id == user_id
            and (query.start is None or m.date >= query.start)
            and (query.end is None or m.date <= query.end)
            and (query.meal_type is None or m.meal_type == query.meal_type)
        ]


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def upsert_profile(self, user_id: UUID, changes: dict[str, object]) -> Profile:
        current = self.profiles.get(user_id) or Profile(user_id=user_id, join_date=NOW)
        profile = replace(current, **changes)
        self.profiles[user_id] = profile
        return profile


@dataclass
class FailingWorkoutRepository(InMemoryWorkoutRepository):
    """Workout repository whose reads fail like an unreachable store."""

    def list_workouts_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WorkoutRecord]:
        raise ConnectionError("record store unavailable")

    def list_workout_dates(self, user_id: UUID) -> list[datetime]:
        raise ConnectionError("record store unavailable")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        cors_allowed_origins="http://localhost:3000",
    )


@pytest.fixture
def user() -> UserRecord:
    return UserRecord(id=uuid4(), email="runner@example.com")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def workout_repository() -> InMemoryWorkoutRepository:
    return InMemoryWorkoutRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user: UserRecord,
    clock: FixedClock,
    workout_repository: InMemoryWorkoutRepository,
    meal_repository: InMemoryMealRepository,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        clock=clock,
        user_service=UserService(FakeIdentityProvider({TOKEN: user})),
        workout_service=WorkoutService(workout_repository),
        meal_service=MealService(meal_repository),
        progress_service=ProgressService(
            workout_repository=workout_repository,
            meal_repository=meal_repository,
            clock=clock,
        ),
        profile_service=ProfileService(profile_repository),
        tip_service=TipService(),
        close_resources=close_resources,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TOKEN}"}
