"""Timer snapshot repository"""
from typing import Optional

from quacktime.models.timer_state import SessionSnapshot

from ..client import KeyValueStore
from .base import BaseRepository

SAVED_TIMER_STATE_KEY = "SavedTimerState"


class TimerSnapshotRepository(BaseRepository[SessionSnapshot]):
    """Repository for the single in-progress session snapshot"""

    def __init__(self, store: KeyValueStore):
        super().__init__(store, SAVED_TIMER_STATE_KEY, SessionSnapshot)

    def load(self) -> Optional[SessionSnapshot]:
        return self.find()
