"""Clock abstractions."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current timezone-aware time."""


@dataclass
class SystemClock(Clock):
    """Wall clock in the configured server timezone."""

    tz: tzinfo

    @classmethod
    def create(cls, timezone_name: str) -> "SystemClock":
        return cls(ZoneInfo(timezone_name))

    def now(self) -> datetime:
        """Return the current time in the server timezone."""
        return datetime.now(tz=self.tz)
