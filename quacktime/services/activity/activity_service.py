"""Activity Log - completed focus sessions"""
import logging
from typing import List, Optional
from uuid import UUID

from quacktime.infra.storage.client import StorageError
from quacktime.infra.storage.repositories.activities import ActivityRepository
from quacktime.models.activity import ActivityRecord

logger = logging.getLogger(__name__)


class ActivityLog:
    """
    Append-only history of confirmed sessions, newest first.

    Storage failures never reach the caller: an unreadable log starts empty
    and a failed write leaves the in-memory list as the source of truth
    until the next successful write.
    """

    def __init__(self, repository: ActivityRepository):
        self.repository = repository

        try:
            self._activities: List[ActivityRecord] = repository.load_all()
        except StorageError as e:
            logger.error(f"Could not load activities, starting with an empty log: {e}")
            self._activities = []

    @property
    def activities(self) -> List[ActivityRecord]:
        return list(self._activities)

    def __len__(self) -> int:
        return len(self._activities)

    def get(self, activity_id: UUID) -> Optional[ActivityRecord]:
        for activity in self._activities:
            if activity.id == activity_id:
                return activity
        return None

    def add(self, activity: ActivityRecord) -> ActivityRecord:
        """Record a confirmed session at the front of the log"""
        self._activities.insert(0, activity)
        self._save()
        logger.info(f"Activity saved: {activity.emoji} {activity.name} ({activity.focus_duration_seconds:.0f}s focus)")
        return activity

    def delete(self, activity_id: UUID) -> bool:
        """
        Remove a session at the user's request.

        Returns:
            True if a record was removed
        """
        remaining = [a for a in self._activities if a.id != activity_id]
        if len(remaining) == len(self._activities):
            return False

        self._activities = remaining
        self._save()
        logger.info(f"Activity deleted: {activity_id}")
        return True

    def _save(self) -> None:
        try:
            self.repository.replace_all(self._activities)
        except StorageError as e:
            logger.error(f"Could not save activities: {e}")
