"""
Focus Session Service

Runs a focus session end to end: timer transitions, snapshot bookkeeping
across app suspension, recording confirmed sessions and streak evaluation.
"""
import logging
from typing import Callable, Optional

from pydantic import BaseModel

from quacktime.models.activity import (
    DEFAULT_ACTIVITY_NAME,
    DEFAULT_EMOJI,
    ActivityRecord,
    SessionConfirmation,
)
from quacktime.models.streak import StreakUpdateResult
from quacktime.models.timer_state import FinalizedSession, RestoredSession, TimerState
from quacktime.services.activity.activity_service import ActivityLog
from quacktime.services.streak.streak_service import StreakService
from quacktime.services.timer.session_timer import SessionTimer
from quacktime.services.timer.timer_state_store import TimerStateStore

logger = logging.getLogger(__name__)

# (streak_count, header, sub_header)
StreakPresenter = Callable[[int, str, str], None]


class SessionOutcome(BaseModel):
    """Result of confirming a stopped session"""
    activity: ActivityRecord
    streak_result: Optional[StreakUpdateResult] = None  # None when the session did not qualify


class FocusSessionService:
    """Coordinates the session timer with the activity log and streaks"""

    def __init__(
        self,
        timer: SessionTimer,
        state_store: TimerStateStore,
        activity_log: ActivityLog,
        streaks: StreakService,
        streak_presenter: Optional[StreakPresenter] = None,
    ):
        self.timer = timer
        self.state_store = state_store
        self.activity_log = activity_log
        self.streaks = streaks
        self.streak_presenter = streak_presenter

    @property
    def state(self) -> TimerState:
        return self.timer.state

    # ============================================================================
    # TIMER CONTROLS
    # ============================================================================

    def start(self, activity_name: str = DEFAULT_ACTIVITY_NAME, emoji: str = DEFAULT_EMOJI) -> None:
        self.timer.start(activity_name=activity_name, emoji=emoji)

    def toggle_break(self) -> TimerState:
        return self.timer.toggle_break()

    def handle_break_request(self) -> bool:
        """
        Break request coming from a widget or live activity.

        Only a running session is put on break; anything else is ignored.

        Returns:
            True if the timer went on break
        """
        if self.timer.state != TimerState.RUNNING:
            logger.debug(f"Ignoring break request while {self.timer.state.value}")
            return False

        self.timer.toggle_break()
        return True

    def reset(self) -> None:
        """
        Discard the running session and its snapshot. The caller confirms
        with the user first.
        """
        self.timer.reset()

    def stop(self) -> FinalizedSession:
        """
        Stop the session; pass the result to finalize() once the user has
        named it (or cancelled).
        """
        return self.timer.stop()

    def finalize(
        self,
        pending: FinalizedSession,
        confirmation: Optional[SessionConfirmation],
    ) -> Optional[SessionOutcome]:
        """
        Record a stopped session after the confirmation step.

        Args:
            pending: What stop() returned
            confirmation: Name/emoji chosen by the user, None if cancelled

        Returns:
            SessionOutcome, or None when the user cancelled
        """
        if confirmation is None:
            logger.info("Session discarded at confirmation")
            self.state_store.clear()
            return None

        activity = ActivityRecord.create(
            name=confirmation.name,
            emoji=confirmation.emoji,
            start_time=pending.start_time,
            end_time=pending.end_time,
            focus_duration_seconds=pending.focus_duration_seconds,
            break_duration_seconds=pending.break_duration_seconds,
        )
        self.activity_log.add(activity)

        result = None
        if self.streaks.qualifies(activity.focus_duration_seconds):
            result = self.streaks.evaluate(activity.start_time)
            if result == StreakUpdateResult.NEW_STREAK_DAY:
                self._present_streak(self.streaks.current_streak)

        self.state_store.clear()
        return SessionOutcome(activity=activity, streak_result=result)

    # ============================================================================
    # APP LIFECYCLE
    # ============================================================================

    def on_background(self) -> None:
        """App is about to be suspended: save once and stop ticking"""
        self.timer.suspend()
        logger.info(f"Suspended while {self.timer.state.value}")

    def on_foreground(self) -> Optional[RestoredSession]:
        """
        App is active again: restore once, then resume ticking.

        Returns:
            The restored session, or None when nothing was running
        """
        restored = self.state_store.restore()

        if restored is not None:
            self.timer.resume(restored)
            return restored

        if self.timer.state.is_active:
            # snapshot lost; carry on from in-memory values
            logger.warning("No timer state to restore, resuming from memory")
            self.timer.resume(RestoredSession(
                state=self.timer.state,
                elapsed_focus_seconds=self.timer.elapsed_focus_seconds,
                elapsed_break_seconds=self.timer.elapsed_break_seconds,
                session_start_time=self.timer.session_start_time,
            ))
        return None

    def _present_streak(self, streak_count: int) -> None:
        if self.streak_presenter is None:
            return

        message = self.streaks.message(streak_count)
        try:
            self.streak_presenter(streak_count, message.header, message.sub_header)
        except Exception as e:
            logger.error(f"Streak presenter failed: {e}")
