"""Reporting period resolution."""

from datetime import datetime, timedelta

from fitness_tracker.domain.progress import PeriodWindow

PERIOD_DAYS = {"day": 1, "week": 7, "month": 30, "year": 365}
SUMMARY_PERIODS = ("day", "week", "month")
WORKOUT_PERIODS = ("week", "month", "year")
DEFAULT_PERIOD = "week"


def resolve_period(
    raw: str | None, allowed: tuple[str, ...], default: str = DEFAULT_PERIOD
) -> str:
    """Return a supported period; missing or unknown values use ``default``."""
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in allowed:
        return value
    return default


def start_of_day(moment: datetime) -> datetime:
    """Return midnight of the moment's calendar day, keeping its timezone."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def calendar_window(period: str, now: datetime) -> PeriodWindow:
    """Window whose start is aligned to midnight, used for daily buckets."""
    days = PERIOD_DAYS[period]
    if period == "day":
        start = start_of_day(now)
    else:
        start = start_of_day(now - timedelta(days=days))
    return PeriodWindow(period=period, start=start, end=now, days=days)


def rolling_window(period: str, now: datetime) -> PeriodWindow:
    """Window reaching back a whole number of days from now."""
    days = PERIOD_DAYS[period]
    if period == "day":
        start = start_of_day(now)
    else:
        start = now - timedelta(days=days)
    return PeriodWindow(period=period, start=start, end=now, days=days)
