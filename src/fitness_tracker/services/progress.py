"""Progress analytics over a user's workouts and meals."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from uuid import UUID

from fitness_tracker.domain.meals import MealRecord
from fitness_tracker.domain.progress import (
    DayBucket,
    NutritionBreakdown,
    PeriodWindow,
    ProgressSummary,
    StreakResult,
    SummaryTotals,
    WeeklyTrend,
    WorkoutAnalytics,
)
from fitness_tracker.domain.workouts import WorkoutRecord
from fitness_tracker.services.clock import Clock
from fitness_tracker.services.meals import MealRepository
from fitness_tracker.services.periods import (
    SUMMARY_PERIODS,
    WORKOUT_PERIODS,
    calendar_window,
    resolve_period,
    rolling_window,
)
from fitness_tracker.services.streaks import calculate_streak
from fitness_tracker.services.workouts import WorkoutRepository

logger = logging.getLogger(__name__)

STATS_PERIOD = "month"


@dataclass
class ProgressService:
    """Computes progress analytics on demand; holds no per-request state."""

    workout_repository: WorkoutRepository
    meal_repository: MealRepository
    clock: Clock

    def get_summary(self, user_id: UUID, period: str | None = None) -> ProgressSummary:
        """Return calories burned vs consumed per day for the period."""
        resolved = resolve_period(period, SUMMARY_PERIODS)
        window = calendar_window(resolved, self.clock.now())
        workouts = self.workout_repository.list_workouts_in_range(
            user_id, window.start, window.end
        )
        meals = self.meal_repository.list_meals_in_range(
            user_id, window.start, window.end
        )
        return build_summary(window, workouts, meals)

    def get_streak(self, user_id: UUID) -> StreakResult:
        """Return the user's current and longest workout streaks."""
        dates = self.workout_repository.list_workout_dates(user_id)
        return calculate_streak(dates, self.clock.now())

    def get_workout_stats(self, user_id: UUID) -> WorkoutAnalytics:
        """Return workout totals for the last 30 days."""
        window = rolling_window(STATS_PERIOD, self.clock.now())
        workouts = self.workout_repository.list_workouts_in_range(
            user_id, window.start, window.end
        )
        return analyze_workouts(window, workouts)

    def get_nutrition(
        self, user_id: UUID, period: str | None = None
    ) -> NutritionBreakdown:
        """Return macro totals and daily averages for the period."""
        resolved = resolve_period(period, SUMMARY_PERIODS)
        window = rolling_window(resolved, self.clock.now())
        meals = self.meal_repository.list_meals_in_range(
            user_id, window.start, window.end
        )
        return summarize_nutrition(window, meals)

    def get_workout_analytics(
        self, user_id: UUID, period: str | None = None
    ) -> WorkoutAnalytics:
        """Return workout totals, type distribution and weekly trends."""
        resolved = resolve_period(period, WORKOUT_PERIODS, default="month")
        window = rolling_window(resolved, self.clock.now())
        workouts = self.workout_repository.list_workouts_in_range(
            user_id, window.start, window.end
        )
        return analyze_workouts(window, workouts)


def build_summary(
    window: PeriodWindow,
    workouts: Iterable[WorkoutRecord],
    meals: Iterable[MealRecord],
) -> ProgressSummary:
    """Bucket workouts and meals into one entry per calendar day."""
    tz = window.end.tzinfo
    buckets: dict[date, DayBucket] = {}
    day = window.start.date()
    last_day = window.end.date()
    while day <= last_day:
        buckets[day] = DayBucket(day=day)
        day += timedelta(days=1)

    for workout in workouts:
        bucket = buckets.get(_local_day(workout.date, tz))
        if bucket is None:
            logger.debug("Workout outside summary window", extra={"id": workout.id})
            continue
        bucket.calories_burned += workout.calories_burned
        bucket.workout_count += 1

    for meal in meals:
        bucket = buckets.get(_local_day(meal.date, tz))
        if bucket is None:
            logger.debug("Meal outside summary window", extra={"id": meal.id})
            continue
        bucket.calories_consumed += meal.totals.calories
        bucket.meal_count += 1

    daily = list(buckets.values())
    for bucket in daily:
        bucket.net_calories = bucket.calories_consumed - bucket.calories_burned

    burned = sum(bucket.calories_burned for bucket in daily)
    consumed = sum(bucket.calories_consumed for bucket in daily)
    bucket_count = max(len(daily), 1)
    totals = SummaryTotals(
        total_calories_burned=burned,
        total_calories_consumed=consumed,
        total_workouts=sum(bucket.workout_count for bucket in daily),
        total_meals=sum(bucket.meal_count for bucket in daily),
        net_calories=consumed - burned,
        average_calories_burned=burned / bucket_count,
        average_calories_consumed=consumed / bucket_count,
    )
    return ProgressSummary(window=window, daily=daily, totals=totals)


def summarize_nutrition(
    window: PeriodWindow, meals: Iterable[MealRecord]
) -> NutritionBreakdown:
    """Sum macros across meals and average them over the window's days."""
    calories = protein = carbs = fats = 0.0
    meal_count = 0
    for meal in meals:
        totals = meal.totals
        calories += totals.calories
        protein += totals.protein
        carbs += totals.carbs
        fats += totals.fats
        meal_count += 1

    days = max(window.days, 1)
    return NutritionBreakdown(
        window=window,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        avg_calories=calories / days,
        avg_protein=protein / days,
        avg_carbs=carbs / days,
        avg_fats=fats / days,
        meal_count=meal_count,
    )


def analyze_workouts(
    window: PeriodWindow, workouts: Iterable[WorkoutRecord]
) -> WorkoutAnalytics:
    """Tally workouts by type and by week, with per-workout averages."""
    tz = window.end.tzinfo
    type_distribution: dict[str, int] = {}
    weeks: dict[date, WeeklyTrend] = {}
    total_workouts = 0
    total_calories = 0.0
    total_duration = 0.0
    for workout in workouts:
        type_distribution[workout.type] = type_distribution.get(workout.type, 0) + 1
        week_start = week_starting_sunday(_local_day(workout.date, tz))
        trend = weeks.setdefault(week_start, WeeklyTrend(week=week_start))
        trend.workouts += 1
        trend.total_calories += workout.calories_burned
        trend.total_duration += workout.duration_minutes
        total_workouts += 1
        total_calories += workout.calories_burned
        total_duration += workout.duration_minutes

    return WorkoutAnalytics(
        window=window,
        total_workouts=total_workouts,
        total_calories=total_calories,
        total_duration=total_duration,
        type_distribution=type_distribution,
        weekly_trends=[weeks[week] for week in sorted(weeks)],
        avg_calories_per_workout=(
            total_calories / total_workouts if total_workouts else 0
        ),
        avg_duration_per_workout=(
            total_duration / total_workouts if total_workouts else 0
        ),
    )


def week_starting_sunday(day: date) -> date:
    """Return the Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _local_day(moment: datetime, tz: tzinfo | None) -> date:
    return moment.astimezone(tz).date()
