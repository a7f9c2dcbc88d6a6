"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from fitness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.clock import Clock, SystemClock
from fitness_tracker.services.meals import MealService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.progress import ProgressService
from fitness_tracker.services.tips import TipService
from fitness_tracker.services.users import UserService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    user_service: UserService
    workout_service: WorkoutService
    meal_service: MealService
    progress_service: ProgressService
    profile_service: ProfileService
    tip_service: TipService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    workout_repository = SupabaseWorkoutRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    clock = SystemClock.create(resolved_settings.timezone)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        user_service=UserService(SupabaseIdentityProvider(supabase_client)),
        workout_service=WorkoutService(workout_repository),
        meal_service=MealService(meal_repository),
        progress_service=ProgressService(
            workout_repository=workout_repository,
            meal_repository=meal_repository,
            clock=clock,
        ),
        profile_service=ProfileService(SupabaseProfileRepository(supabase_client)),
        tip_service=TipService(),
        close_resources=close_resources,
    )
