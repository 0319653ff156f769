"""Activity log services"""
from .activity_service import ActivityLog
from . import stats

__all__ = ['ActivityLog', 'stats']
