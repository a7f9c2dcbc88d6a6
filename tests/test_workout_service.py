"""Tests for workout service."""

from datetime import timedelta
from uuid import uuid4

import pytest

from fitness_tracker.domain.workouts import WorkoutDraft, WorkoutQuery, WorkoutUpdate
from fitness_tracker.services.errors import InvalidRecordError, RecordNotFoundError
from fitness_tracker.services.workouts import WorkoutService, validate_workout_fields
from tests.conftest import NOW, InMemoryWorkoutRepository


def _draft(**overrides) -> WorkoutDraft:  # type: ignore[no-untyped-def]
    fields = {
        "date": NOW,
        "name": "  Evening run ",
        "type": "cardio",
        "duration_minutes": 40,
        "calories_burned": 350,
        "notes": "  felt good  ",
    }
    fields.update(overrides)
    return WorkoutDraft(**fields)


def test_log_workout_trims_and_persists() -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository)

    workout = service.log_workout(uuid4(), _draft())

    assert workout.name == "Evening run"
    assert workout.notes == "felt good"
    assert repository.workouts[workout.id] == workout


def test_log_workout_drops_blank_notes() -> None:
    service = WorkoutService(InMemoryWorkoutRepository())

    workout = service.log_workout(uuid4(), _draft(notes="   "))

    assert workout.notes is None


def test_log_workout_collects_all_validation_errors() -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository)

    with pytest.raises(InvalidRecordError) as excinfo:
        service.log_workout(
            uuid4(),
            _draft(name=" ", type="dance", duration_minutes=0, calories_burned=0),
        )

    assert excinfo.value.errors == [
        "Workout name is required",
        "Workout type must be one of: cardio, strength, flexibility, sports, other",
        "Duration must be at least 1 minute",
        "Calories must be positive",
    ]
    assert not repository.workouts


def test_notes_length_is_limited() -> None:
    errors = validate_workout_fields(
        name="Run",
        workout_type="cardio",
        duration_minutes=10,
        calories_burned=100,
        notes="x" * 501,
    )

    assert errors == ["Notes must be less than 500 characters"]


def test_list_workouts_pages_newest_first() -> None:
    user_id = uuid4()
    repository = InMemoryWorkoutRepository()
    for offset in range(5):
        repository.add(user_id, NOW - timedelta(days=offset), name=f"Run {offset}")
    repository.add(uuid4(), NOW, name="Someone else")
    service = WorkoutService(repository)

    page = service.list_workouts(user_id, WorkoutQuery(limit=2, skip=1))

    assert [w.name for w in page.workouts] == ["Run 1", "Run 2"]
    assert page.total_count == 5
    assert page.has_more is True


def test_list_workouts_filters_by_type() -> None:
    user_id = uuid4()
    repository = InMemoryWorkoutRepository()
    repository.add(user_id, NOW, type="strength")
    repository.add(user_id, NOW - timedelta(days=1))
    service = WorkoutService(repository)

    page = service.list_workouts(user_id, WorkoutQuery(type="strength"))

    assert page.total_count == 1
    assert page.has_more is False


def test_get_workout_of_other_user_is_not_found() -> None:
    repository = InMemoryWorkoutRepository()
    workout = repository.add(uuid4(), NOW)
    service = WorkoutService(repository)

    with pytest.raises(RecordNotFoundError):
        service.get_workout(uuid4(), workout.id)


def test_update_workout_changes_only_given_fields() -> None:
    user_id = uuid4()
    repository = InMemoryWorkoutRepository()
    workout = repository.add(user_id, NOW, notes="old notes")
    service = WorkoutService(repository)

    updated = service.update_workout(
        user_id, workout.id, WorkoutUpdate(duration_minutes=55, name=" Tempo run ")
    )

    assert updated.duration_minutes == 55
    assert updated.name == "Tempo run"
    assert updated.calories_burned == 300
    assert updated.notes == "old notes"


def test_update_workout_with_empty_notes_clears_them() -> None:
    user_id = uuid4()
    repository = InMemoryWorkoutRepository()
    workout = repository.add(user_id, NOW, notes="old notes")
    service = WorkoutService(repository)

    updated = service.update_workout(user_id, workout.id, WorkoutUpdate(notes=""))

    assert updated.notes is None


def test_update_workout_rejects_invalid_values() -> None:
    user_id = uuid4()
    repository = InMemoryWorkoutRepository()
    workout = repository.add(user_id, NOW)
    service = WorkoutService(repository)

    with pytest.raises(InvalidRecordError):
        service.update_workout(user_id, workout.id, WorkoutUpdate(calories_burned=-5))

    assert repository.workouts[workout.id].calories_burned == 300


def test_update_missing_workout_is_not_found() -> None:
    service = WorkoutService(InMemoryWorkoutRepository())

    with pytest.raises(RecordNotFoundError):
        service.update_workout(uuid4(), uuid4(), WorkoutUpdate(name="Swim"))


def test_delete_workout() -> None:
    user_id = uuid4()
    repository = InMemoryWorkoutRepository()
    workout = repository.add(user_id, NOW)
    service = WorkoutService(repository)

    service.delete_workout(user_id, workout.id)

    assert not repository.workouts
    with pytest.raises(RecordNotFoundError):
        service.delete_workout(user_id, workout.id)


def test_exercise_steps_match_catalogue_by_name() -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository)
    workout = repository.add(uuid4(), NOW, name="Morning Running")
    other = repository.add(uuid4(), NOW, name="Rowing", type="other")

    steps = service.exercise_steps(workout)

    assert steps[0] == "Start with a 5-minute warm-up walk"
    assert service.exercise_steps(other)[0] == "Start with a proper warm-up"
