"""Clock abstraction so installation timestamps are deterministic in tests."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime


class Clock(ABC):
    """Abstract source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class RealClock(Clock):
    """Production implementation backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)
