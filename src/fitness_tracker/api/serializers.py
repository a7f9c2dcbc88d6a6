"""JSON payload builders for API responses."""

import math

from fitness_tracker.domain.meals import FoodItem, MealRecord
from fitness_tracker.domain.models import UserRecord
from fitness_tracker.domain.profiles import Profile
from fitness_tracker.domain.progress import (
    NutritionBreakdown,
    ProgressSummary,
    StreakResult,
    WorkoutAnalytics,
)
from fitness_tracker.domain.workouts import WorkoutRecord


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def number(value: float) -> float | int:
    """Render whole floats as ints in JSON."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def workout_payload(workout: WorkoutRecord) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": str(workout.id),
        "date": workout.date.isoformat(),
        "name": workout.name,
        "type": workout.type,
        "duration": number(workout.duration_minutes),
        "calories": number(workout.calories_burned),
        "notes": workout.notes,
    }
    if workout.created_at is not None:
        payload["createdAt"] = workout.created_at.isoformat()
    return payload


def food_item_payload(item: FoodItem) -> dict[str, object]:
    return {
        "name": item.name,
        "calories": number(item.calories),
        "protein": number(item.protein),
        "carbs": number(item.carbs),
        "fats": number(item.fats),
        "quantity": number(item.quantity),
        "unit": item.unit,
    }


def meal_payload(meal: MealRecord) -> dict[str, object]:
    totals = meal.totals
    payload: dict[str, object] = {
        "id": str(meal.id),
        "date": meal.date.isoformat(),
        "mealType": meal.meal_type,
        "items": [food_item_payload(item) for item in meal.items],
        "totalCalories": number(totals.calories),
        "totalProtein": number(totals.protein),
        "totalCarbs": number(totals.carbs),
        "totalFats": number(totals.fats),
    }
    if meal.created_at is not None:
        payload["createdAt"] = meal.created_at.isoformat()
    return payload


def summary_payload(summary: ProgressSummary) -> dict[str, object]:
    totals = summary.totals
    return {
        "period": summary.window.period,
        "startDate": summary.window.start.isoformat(),
        "endDate": summary.window.end.isoformat(),
        "dailyData": [
            {
                "date": bucket.day.isoformat(),
                "caloriesBurned": number(bucket.calories_burned),
                "caloriesConsumed": number(bucket.calories_consumed),
                "workoutCount": bucket.workout_count,
                "mealCount": bucket.meal_count,
                "netCalories": number(bucket.net_calories),
            }
            for bucket in summary.daily
        ],
        "totals": {
            "totalCaloriesBurned": number(totals.total_calories_burned),
            "totalCaloriesConsumed": number(totals.total_calories_consumed),
            "totalWorkouts": totals.total_workouts,
            "totalMeals": totals.total_meals,
            "netCalories": number(totals.net_calories),
            "averageCaloriesBurned": round_half_up(totals.average_calories_burned),
            "averageCaloriesConsumed": round_half_up(
                totals.average_calories_consumed
            ),
        },
    }


def streak_payload(streak: StreakResult) -> dict[str, object]:
    return {
        "currentStreak": streak.current_streak,
        "longestStreak": streak.longest_streak,
        "lastWorkoutDate": (
            streak.last_workout_date.isoformat() if streak.last_workout_date else None
        ),
        "daysSinceLastWorkout": streak.days_since_last_workout,
        "totalWorkouts": streak.total_workouts,
        "message": streak.message,
    }


def stats_payload(stats: WorkoutAnalytics) -> dict[str, object]:
    return {
        "totalWorkouts": stats.total_workouts,
        "totalCaloriesBurned": number(stats.total_calories),
        "totalDuration": number(stats.total_duration),
        "averageCaloriesPerWorkout": round_half_up(stats.avg_calories_per_workout),
        "averageDurationPerWorkout": round_half_up(stats.avg_duration_per_workout),
        "workoutTypes": dict(stats.type_distribution),
    }


def nutrition_payload(breakdown: NutritionBreakdown) -> dict[str, object]:
    return {
        "period": breakdown.window.period,
        "totals": {
            "calories": number(breakdown.calories),
            "protein": number(breakdown.protein),
            "carbs": number(breakdown.carbs),
            "fats": number(breakdown.fats),
        },
        "averages": {
            "calories": round_half_up(breakdown.avg_calories),
            "protein": round_half_up(breakdown.avg_protein),
            "carbs": round_half_up(breakdown.avg_carbs),
            "fats": round_half_up(breakdown.avg_fats),
        },
        "mealCount": breakdown.meal_count,
    }


def workout_analytics_payload(analytics: WorkoutAnalytics) -> dict[str, object]:
    return {
        "period": analytics.window.period,
        "totals": {
            "totalWorkouts": analytics.total_workouts,
            "totalCalories": number(analytics.total_calories),
            "totalDuration": number(analytics.total_duration),
        },
        "typeDistribution": dict(analytics.type_distribution),
        "weeklyTrends": [
            {
                "week": trend.week.isoformat(),
                "workouts": trend.workouts,
                "totalCalories": number(trend.total_calories),
                "totalDuration": number(trend.total_duration),
            }
            for trend in analytics.weekly_trends
        ],
        "averageCaloriesPerWorkout": round_half_up(
            analytics.avg_calories_per_workout
        ),
        "averageDurationPerWorkout": round_half_up(
            analytics.avg_duration_per_workout
        ),
    }


def profile_payload(profile: Profile, user: UserRecord) -> dict[str, object]:
    return {
        "id": str(profile.user_id),
        "name": profile.name,
        "email": user.email,
        "age": number(profile.age) if profile.age is not None else None,
        "height": number(profile.height) if profile.height is not None else None,
        "weight": number(profile.weight) if profile.weight is not None else None,
        "goals": profile.goals,
        "joinDate": profile.join_date.isoformat() if profile.join_date else None,
    }
