"""Streak repository"""
import logging
from datetime import date
from typing import Any, Optional

from quacktime.models.streak import StreakState

from ..client import KeyValueStore, StorageError
from .base import BaseRepository

logger = logging.getLogger(__name__)

CURRENT_STREAK_KEY = "CurrentStreak"
LONGEST_STREAK_KEY = "LongestStreak"
LAST_STREAK_DATE_KEY = "LastStreakDate"


def _as_count(value: Any, key: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        logger.warning(f"Ignoring invalid {key}: {value!r}")
        return 0
    return int(value)


def _as_day(value: Any) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid {LAST_STREAK_DATE_KEY}: {value!r}")
        return None


class StreakRepository(BaseRepository[StreakState]):
    """
    Repository for streak counters.
    Stored as three independent scalar entries rather than one blob.
    """

    def __init__(self, store: KeyValueStore):
        super().__init__(store, CURRENT_STREAK_KEY, StreakState)

    def load(self) -> StreakState:
        """
        Load the streak counters.

        Missing or invalid entries read as zero / no date, each on its own.
        An unreadable store reads as a fresh streak.
        """
        try:
            current = self._store.get(CURRENT_STREAK_KEY)
            longest = self._store.get(LONGEST_STREAK_KEY)
            last_date = self._store.get(LAST_STREAK_DATE_KEY)
        except StorageError as e:
            logger.error(f"Could not read streak counters, starting from zero: {e}")
            return StreakState()

        current_count = _as_count(current, CURRENT_STREAK_KEY)
        return StreakState(
            current_streak_count=current_count,
            longest_streak_count=max(_as_count(longest, LONGEST_STREAK_KEY), current_count),
            last_qualifying_day=_as_day(last_date),
        )

    def save(self, model: StreakState, key=None) -> None:
        self._store.set(CURRENT_STREAK_KEY, model.current_streak_count)
        self._store.set(LONGEST_STREAK_KEY, model.longest_streak_count)
        # the last date is only ever written, never cleared
        if model.last_qualifying_day is not None:
            self._store.set(LAST_STREAK_DATE_KEY, model.last_qualifying_day.isoformat())
