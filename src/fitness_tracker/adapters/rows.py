"""Helpers for parsing Supabase rows."""

from datetime import datetime

from fitness_tracker.services.errors import RecordStoreError


def parse_datetime(row: dict[str, object], key: str) -> datetime:
    """Parse an ISO timestamp column."""
    raw = row.get(key)
    if not isinstance(raw, str) or not raw:
        raise RecordStoreError(f"Missing timestamp column '{key}'")
    return datetime.fromisoformat(raw)


def parse_number(
    row: dict[str, object], key: str, default: float | None = None
) -> float:
    """Parse a numeric column, rejecting non-numeric values."""
    raw = row.get(key)
    if raw is None and default is not None:
        return default
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise RecordStoreError(f"Non-numeric value in column '{key}': {raw!r}")
    return float(raw)
