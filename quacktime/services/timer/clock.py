"""Wall-clock providers"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current time"""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as a timezone-aware datetime"""


class SystemClock(Clock):
    """Clock backed by the system wall clock, in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
