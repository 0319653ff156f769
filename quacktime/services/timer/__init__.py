"""Session timer services"""
from .clock import Clock, SystemClock
from .display import DisplayPublisher, LoggingDisplayPublisher
from .session_timer import InvalidTransitionError, SessionTimer
from .tick_source import AsyncioTickSource, TickSource
from .timer_state_store import TimerStateStore

__all__ = [
    'Clock',
    'SystemClock',
    'DisplayPublisher',
    'LoggingDisplayPublisher',
    'InvalidTransitionError',
    'SessionTimer',
    'AsyncioTickSource',
    'TickSource',
    'TimerStateStore',
]
