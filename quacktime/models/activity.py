"""Activity record domain model"""
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quacktime.utils.datetime_helper import (
    CalendarContext,
    format_clock,
    format_minutes_seconds,
)

DEFAULT_ACTIVITY_NAME = "Focus Session"
DEFAULT_EMOJI = "🎯"


class SessionConfirmation(BaseModel):
    """Name and emoji the user picked when confirming a stopped session"""
    name: str = DEFAULT_ACTIVITY_NAME
    emoji: str = DEFAULT_EMOJI


class ActivityRecord(BaseModel):
    """Completed focus session stored in SavedActivities"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str = DEFAULT_ACTIVITY_NAME
    emoji: str = DEFAULT_EMOJI
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")
    focus_duration_seconds: float = Field(..., alias="duration", ge=0)
    break_duration_seconds: float = Field(0, alias="breakDuration", ge=0)

    @field_validator("name")
    @classmethod
    def default_blank_name(cls, value: str) -> str:
        """Whitespace-only names fall back to the default name"""
        value = value.strip()
        return value or DEFAULT_ACTIVITY_NAME

    @classmethod
    def create(
        cls,
        start_time: datetime,
        focus_duration_seconds: float,
        break_duration_seconds: float = 0,
        end_time: Optional[datetime] = None,
        name: str = DEFAULT_ACTIVITY_NAME,
        emoji: str = DEFAULT_EMOJI,
    ) -> "ActivityRecord":
        """
        Build a record, deriving end_time from the durations when missing.
        """
        if end_time is None:
            end_time = start_time + timedelta(seconds=focus_duration_seconds + break_duration_seconds)

        return cls(
            name=name,
            emoji=emoji,
            start_time=start_time,
            end_time=end_time,
            focus_duration_seconds=focus_duration_seconds,
            break_duration_seconds=break_duration_seconds,
        )

    @property
    def total_duration(self) -> float:
        return self.focus_duration_seconds + self.break_duration_seconds

    @property
    def focus_percentage(self) -> float:
        if self.total_duration <= 0:
            return 100.0
        return self.focus_duration_seconds / self.total_duration * 100

    @property
    def break_percentage(self) -> float:
        if self.total_duration <= 0:
            return 0.0
        return self.break_duration_seconds / self.total_duration * 100

    @property
    def formatted_duration(self) -> str:
        return format_clock(self.focus_duration_seconds)

    @property
    def formatted_break_duration(self) -> str:
        return format_minutes_seconds(self.break_duration_seconds)

    def spans_multiple_days(self, calendar: CalendarContext) -> bool:
        return not calendar.is_same_day(self.start_time, self.end_time)
