"""Domain models"""
from .activity import ActivityRecord, SessionConfirmation
from .streak import StreakMessage, StreakState, StreakUpdateResult
from .timer_state import (
    DisplayState,
    FinalizedSession,
    RestoredSession,
    SessionSnapshot,
    TimerState,
)
from .todo import TodoGroup, TodoItem, TodoItemUpdate

__all__ = [
    'ActivityRecord',
    'SessionConfirmation',
    'StreakMessage',
    'StreakState',
    'StreakUpdateResult',
    'DisplayState',
    'FinalizedSession',
    'RestoredSession',
    'SessionSnapshot',
    'TimerState',
    'TodoGroup',
    'TodoItem',
    'TodoItemUpdate',
]
