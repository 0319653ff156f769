"""Activity repository"""
from typing import List

from quacktime.models.activity import ActivityRecord

from ..client import KeyValueStore
from .base import BaseRepository

SAVED_ACTIVITIES_KEY = "SavedActivities"


class ActivityRepository(BaseRepository[ActivityRecord]):
    """Repository for the completed-session log, newest first"""

    def __init__(self, store: KeyValueStore):
        super().__init__(store, SAVED_ACTIVITIES_KEY, ActivityRecord)

    def load_all(self) -> List[ActivityRecord]:
        return self.find_all()

    def replace_all(self, activities: List[ActivityRecord]) -> None:
        self.save_all(activities)
