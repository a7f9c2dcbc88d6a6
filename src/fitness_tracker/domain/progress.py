"""Domain models for progress analytics."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class PeriodWindow:
    """Resolved reporting window for a period selector."""

    period: str
    start: datetime
    end: datetime
    days: int


@dataclass
class DayBucket:
    """Aggregated workout and meal metrics for one calendar day."""

    day: date
    calories_burned: float = 0
    calories_consumed: float = 0
    workout_count: int = 0
    meal_count: int = 0
    net_calories: float = 0


@dataclass(frozen=True)
class SummaryTotals:
    """Totals and per-day averages over a progress window."""

    total_calories_burned: float
    total_calories_consumed: float
    total_workouts: int
    total_meals: int
    net_calories: float
    average_calories_burned: float
    average_calories_consumed: float


@dataclass(frozen=True)
class ProgressSummary:
    """Calories burned vs consumed, bucketed by calendar day."""

    window: PeriodWindow
    daily: list[DayBucket]
    totals: SummaryTotals


@dataclass(frozen=True)
class StreakResult:
    """Current and longest workout streaks with a motivational message."""

    current_streak: int
    longest_streak: int
    last_workout_date: datetime | None
    days_since_last_workout: int | None
    total_workouts: int
    message: str


@dataclass(frozen=True)
class NutritionBreakdown:
    """Macro totals and daily averages across the meals in a window."""

    window: PeriodWindow
    calories: float
    protein: float
    carbs: float
    fats: float
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fats: float
    meal_count: int


@dataclass
class WeeklyTrend:
    """Workout totals for a week starting on Sunday."""

    week: date
    workouts: int = 0
    total_calories: float = 0
    total_duration: float = 0


@dataclass(frozen=True)
class WorkoutAnalytics:
    """Workout totals, type distribution and weekly trends for a window."""

    window: PeriodWindow
    total_workouts: int
    total_calories: float
    total_duration: float
    type_distribution: dict[str, int] = field(default_factory=dict)
    weekly_trends: list[WeeklyTrend] = field(default_factory=list)
    avg_calories_per_workout: float = 0
    avg_duration_per_workout: float = 0
