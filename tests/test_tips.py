"""Tests for tips and exercise instructions."""

import random

from fitness_tracker.domain.exercises import GENERIC_STEPS, exercise_steps
from fitness_tracker.services.tips import FITNESS_TIPS, TipService


def test_pick_returns_distinct_tips() -> None:
    service = TipService(rng=random.Random(7))

    tips = service.pick(5)

    assert len(tips) == 5
    assert len(set(tips)) == 5
    assert set(tips) <= set(FITNESS_TIPS)


def test_pick_is_capped_by_catalogue_size() -> None:
    service = TipService(tips=["Drink water", "Sleep well"])

    assert sorted(service.pick(5)) == ["Drink water", "Sleep well"]


def test_exercise_steps_match_partial_names() -> None:
    assert exercise_steps("flexibility", "Yoga")[0] == (
        "Start with deep breathing exercises"
    )
    assert exercise_steps("sports", "tennis doubles")[0] == (
        "Start with gentle rallying"
    )


def test_exercise_steps_fall_back_to_generic() -> None:
    assert exercise_steps("cardio", "Rowing machine") == GENERIC_STEPS
    assert exercise_steps("other", "Climbing") == GENERIC_STEPS
