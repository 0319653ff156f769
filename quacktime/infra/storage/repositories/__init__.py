"""Repository factory and exports"""
from typing import Optional

from ..client import KeyValueStore
from .activities import ActivityRepository
from .streaks import StreakRepository
from .timer_snapshots import TimerSnapshotRepository
from .todos import TodoGroupRepository, TodoItemRepository


class RepositoryFactory:
    """Factory for creating repository instances over one store"""

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._timer_snapshots: Optional[TimerSnapshotRepository] = None
        self._activities: Optional[ActivityRepository] = None
        self._streaks: Optional[StreakRepository] = None
        self._todo_items: Optional[TodoItemRepository] = None
        self._todo_groups: Optional[TodoGroupRepository] = None

    @property
    def timer_snapshots(self) -> TimerSnapshotRepository:
        """Get timer snapshot repository"""
        if self._timer_snapshots is None:
            self._timer_snapshots = TimerSnapshotRepository(self._store)
        return self._timer_snapshots

    @property
    def activities(self) -> ActivityRepository:
        """Get activity repository"""
        if self._activities is None:
            self._activities = ActivityRepository(self._store)
        return self._activities

    @property
    def streaks(self) -> StreakRepository:
        """Get streak repository"""
        if self._streaks is None:
            self._streaks = StreakRepository(self._store)
        return self._streaks

    @property
    def todo_items(self) -> TodoItemRepository:
        """Get to-do item repository"""
        if self._todo_items is None:
            self._todo_items = TodoItemRepository(self._store)
        return self._todo_items

    @property
    def todo_groups(self) -> TodoGroupRepository:
        """Get to-do group repository"""
        if self._todo_groups is None:
            self._todo_groups = TodoGroupRepository(self._store)
        return self._todo_groups


__all__ = [
    'RepositoryFactory',
    'ActivityRepository',
    'StreakRepository',
    'TimerSnapshotRepository',
    'TodoGroupRepository',
    'TodoItemRepository',
]
