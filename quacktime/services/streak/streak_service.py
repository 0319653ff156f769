"""Streak Service - daily focus streak bookkeeping"""
import logging
from datetime import datetime

from quacktime.infra.storage.client import StorageError
from quacktime.infra.storage.repositories.streaks import StreakRepository
from quacktime.models.streak import StreakMessage, StreakState, StreakUpdateResult
from quacktime.utils.datetime_helper import CalendarContext

from .messages import STREAK_HEADERS, STREAK_SUB_HEADERS

logger = logging.getLogger(__name__)

MINIMUM_FOCUS_MINUTES = 15.0


class StreakService:
    """
    Tracks consecutive calendar days with at least one qualifying session.

    The first qualifying session of a day counts; later ones that day are
    no-ops. Day differences come from the injected calendar, so two sessions
    four minutes apart either side of midnight are one day apart.
    """

    def __init__(self, repository: StreakRepository, calendar: CalendarContext):
        self.repository = repository
        self.calendar = calendar
        self._state = repository.load()

    @property
    def state(self) -> StreakState:
        return self._state.model_copy()

    @property
    def current_streak(self) -> int:
        return self._state.current_streak_count

    @property
    def longest_streak(self) -> int:
        return self._state.longest_streak_count

    @staticmethod
    def qualifies(focus_duration_seconds: float) -> bool:
        """Whether a session has enough focus time to count toward the streak"""
        return focus_duration_seconds / 60 >= MINIMUM_FOCUS_MINUTES

    def evaluate(self, activity_start_time: datetime) -> StreakUpdateResult:
        """
        Apply a qualifying session to the streak.

        Only call this for sessions that pass qualifies().

        Args:
            activity_start_time: Start of the finalized session

        Returns:
            NEW_STREAK_DAY when the day was newly counted, NOT_NEW otherwise
        """
        day = self.calendar.day_of(activity_start_time)
        last_day = self._state.last_qualifying_day

        if last_day == day:
            return StreakUpdateResult.NOT_NEW

        current = self._state.current_streak_count
        if last_day is None:
            current = 1
        elif self.calendar.days_between(last_day, day) == 1:
            current += 1
        else:
            logger.info(f"Streak broken ({last_day} -> {day}), restarting at 1")
            current = 1

        self._state = StreakState(
            current_streak_count=current,
            longest_streak_count=max(self._state.longest_streak_count, current),
            last_qualifying_day=day,
        )
        try:
            self.repository.save(self._state)
        except StorageError as e:
            logger.error(f"Could not save streak for {day}, keeping it in memory: {e}")

        logger.info(f"Streak day counted for {day}: current={current}, longest={self._state.longest_streak_count}")
        return StreakUpdateResult.NEW_STREAK_DAY

    @staticmethod
    def message(streak_count: int) -> StreakMessage:
        """Pick the popup header pair for a streak length"""
        header = STREAK_HEADERS[streak_count % len(STREAK_HEADERS)]
        sub_header = STREAK_SUB_HEADERS[streak_count % len(STREAK_SUB_HEADERS)]
        return StreakMessage(header=header, sub_header=sub_header.format(count=streak_count))
