"""Calendar-day arithmetic and duration formatting helpers"""
import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


class CalendarContext:
    """
    Calendar/timezone used for every day-granularity decision.

    Passed explicitly to whatever needs calendar days so that day boundaries
    never depend on ambient process state.
    """

    def __init__(self, tz: tzinfo):
        self.tz = tz

    @classmethod
    def from_name(cls, name: Optional[str]) -> "CalendarContext":
        """
        Build a context from an IANA timezone name.

        Args:
            name: e.g. "Asia/Singapore"; None or an unknown name falls back
                to the local zone

        Returns:
            CalendarContext
        """
        if name:
            try:
                return cls(ZoneInfo(name))
            except (ZoneInfoNotFoundError, ValueError):
                logger.warning(f"Unknown timezone '{name}', using local time")
        return cls(datetime.now().astimezone().tzinfo or timezone.utc)

    def localize(self, moment: datetime) -> datetime:
        """Convert a timestamp into this calendar's zone (naive = already local)"""
        if moment.tzinfo is None:
            return moment.replace(tzinfo=self.tz)
        return moment.astimezone(self.tz)

    def day_of(self, moment: datetime) -> date:
        """Calendar day a timestamp falls on"""
        return self.localize(moment).date()

    def days_between(self, earlier: date, later: date) -> int:
        """Calendar-day difference; negative when `later` precedes `earlier`"""
        return (later - earlier).days

    def is_same_day(self, a: datetime, b: datetime) -> bool:
        return self.day_of(a) == self.day_of(b)


def format_clock(seconds: float) -> str:
    """
    Format a duration the way the timer face shows it.

    Returns:
        str: "H:MM:SS" from one hour upwards, otherwise "MM:SS"
    """
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def format_minutes_seconds(seconds: float) -> str:
    """Format a duration as "MM:SS" (minutes are not wrapped into hours)"""
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"
