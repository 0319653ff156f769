"""Streak domain models"""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StreakUpdateResult(str, Enum):
    """Outcome of evaluating a qualifying session"""
    NEW_STREAK_DAY = "new_streak_day"
    NOT_NEW = "not_new"


class StreakState(BaseModel):
    """Daily streak counters"""
    current_streak_count: int = Field(0, ge=0)
    longest_streak_count: int = Field(0, ge=0)
    last_qualifying_day: Optional[date] = None


class StreakMessage(BaseModel):
    """Header pair shown in the streak popup"""
    model_config = ConfigDict(frozen=True)

    header: str
    sub_header: str
