"""Streak services"""
from .streak_service import MINIMUM_FOCUS_MINUTES, StreakService

__all__ = ['MINIMUM_FOCUS_MINUTES', 'StreakService']
