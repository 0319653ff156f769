"""Timer state models"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from quacktime.utils.datetime_helper import format_clock


class TimerState(str, Enum):
    """Timer state"""
    IDLE = "idle"
    RUNNING = "running"
    ON_BREAK = "onBreak"

    @property
    def is_active(self) -> bool:
        return self != TimerState.IDLE


class SessionSnapshot(BaseModel):
    """Timer state persisted under SavedTimerState"""
    model_config = ConfigDict(populate_by_name=True)

    state: TimerState = Field(..., alias="timerState")
    elapsed_focus_seconds: float = Field(0, alias="elapsedTime", ge=0)
    elapsed_break_seconds: float = Field(0, alias="breakTime", ge=0)
    session_start_time: Optional[datetime] = Field(None, alias="sessionStartTime")
    saved_at_time: datetime = Field(..., alias="lastSavedTime")


class RestoredSession(BaseModel):
    """Session reconstructed from a snapshot, suspended time already added"""
    state: TimerState
    elapsed_focus_seconds: float
    elapsed_break_seconds: float
    session_start_time: Optional[datetime] = None


class FinalizedSession(BaseModel):
    """Data captured by stop(), waiting for the user to confirm it"""
    model_config = ConfigDict(frozen=True)

    start_time: datetime
    end_time: datetime
    focus_duration_seconds: float
    break_duration_seconds: float
    activity_name: str = "Focus Session"
    emoji: str = "🎯"


class DisplayState(BaseModel):
    """Read-only payload for widget / live-activity observers"""
    model_config = ConfigDict(frozen=True)

    activity_name: str
    emoji: str
    state: TimerState
    elapsed_focus_seconds: float
    elapsed_break_seconds: float
    start_time: Optional[datetime] = None

    @property
    def formatted_time(self) -> str:
        # break time is shown while on break
        if self.state == TimerState.ON_BREAK:
            return format_clock(self.elapsed_break_seconds)
        return format_clock(self.elapsed_focus_seconds)
