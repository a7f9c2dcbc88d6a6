"""Workout streak calculation.

A streak day is any calendar day, in the server clock's timezone, with at
least one workout. The current streak walks back from today and tolerates a
single skipped day between workout days; the longest streak counts strictly
consecutive days.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from fitness_tracker.domain.progress import StreakResult

NO_WORKOUTS_MESSAGE = "Start your fitness journey today!"


def calculate_streak(workout_times: Iterable[datetime], now: datetime) -> StreakResult:
    """Return current/longest streaks and a message for the given workouts."""
    times = list(workout_times)
    if not times:
        return StreakResult(
            current_streak=0,
            longest_streak=0,
            last_workout_date=None,
            days_since_last_workout=None,
            total_workouts=0,
            message=NO_WORKOUTS_MESSAGE,
        )

    today = now.date()
    workout_days = sorted({_local_day(moment, now) for moment in times}, reverse=True)
    # Future-dated workouts never extend the streak walking back from today.
    current = current_streak([day for day in workout_days if day <= today], today)
    # The gap-tolerant current streak can exceed the strict historical run.
    longest = max(longest_streak(workout_days), current)

    last_workout = max(times)
    days_since = max((today - _local_day(last_workout, now)).days, 0)
    return StreakResult(
        current_streak=current,
        longest_streak=longest,
        last_workout_date=last_workout,
        days_since_last_workout=days_since,
        total_workouts=len(times),
        message=streak_message(current, days_since),
    )


def current_streak(days_desc: list[date], today: date) -> int:
    """Count workout days walking back from today.

    Each day counts while it is at most one day before the day being checked;
    the check day then moves to the day before the counted workout day.
    """
    streak = 0
    check_day = today
    for day in days_desc:
        if (check_day - day).days > 1:
            break
        streak += 1
        check_day = day - timedelta(days=1)
    return streak


def longest_streak(days: Iterable[date]) -> int:
    """Return the longest run of consecutive calendar days."""
    longest = 0
    run = 0
    previous: date | None = None
    for day in sorted(set(days)):
        if previous is not None and (day - previous).days <= 1:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day
    return longest


def streak_message(current: int, days_since_last_workout: int) -> str:
    """Pick the motivational message for a streak."""
    if current == 0:
        if days_since_last_workout == 0:
            return "Great job working out today! Keep the momentum going!"
        if days_since_last_workout == 1:
            return "You worked out yesterday! Start a new streak today!"
        return (
            f"It's been {days_since_last_workout} days since your last workout. "
            "Time to get back on track!"
        )
    if current == 1:
        return "You're on a 1-day streak! Keep it up!"
    return f"Amazing! You're on a {current}-day streak!"


def _local_day(moment: datetime, now: datetime) -> date:
    return moment.astimezone(now.tzinfo).date()
