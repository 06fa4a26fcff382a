"""Injectable source of "today" so leave calculations stay deterministic."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo


@runtime_checkable
class Clock(Protocol):
    """Interface for resolving the current calendar date."""

    def today(self, tz: ZoneInfo) -> date:
        """Current date in the given timezone."""
        ...


class SystemClock:
    """Wall-clock implementation used in production."""

    def today(self, tz: ZoneInfo) -> date:
        return datetime.now(UTC).astimezone(tz).date()


class FixedClock:
    """Clock pinned to an instant, for tests and backfills."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self._instant = instant

    def today(self, tz: ZoneInfo) -> date:
        return self._instant.astimezone(tz).date()


def get_clock() -> Clock:
    """FastAPI dependency for the clock; override it to pin "today"."""
    return SystemClock()
