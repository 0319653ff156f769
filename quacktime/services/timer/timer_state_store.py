"""Timer State Store - persists the running session across suspension"""
import logging
from datetime import datetime
from typing import Optional

from quacktime.infra.storage.client import StorageError
from quacktime.infra.storage.repositories.timer_snapshots import TimerSnapshotRepository
from quacktime.models.timer_state import RestoredSession, SessionSnapshot, TimerState

from .clock import Clock

logger = logging.getLogger(__name__)


class TimerStateStore:
    """Saves, restores and clears the in-progress session snapshot"""

    def __init__(self, repository: TimerSnapshotRepository, clock: Clock):
        self.repository = repository
        self.clock = clock

    def save(
        self,
        state: TimerState,
        elapsed_focus: float,
        elapsed_break: float,
        session_start_time: Optional[datetime],
    ) -> Optional[SessionSnapshot]:
        """
        Write a snapshot stamped with the current time.

        Best effort: a storage failure is logged and swallowed.

        Returns:
            The snapshot written, or None if the write failed
        """
        snapshot = SessionSnapshot(
            state=state,
            elapsed_focus_seconds=elapsed_focus,
            elapsed_break_seconds=elapsed_break,
            session_start_time=session_start_time,
            saved_at_time=self.clock.now(),
        )

        try:
            self.repository.save(snapshot)
        except StorageError as e:
            logger.warning(f"Could not save timer state: {e}")
            return None

        return snapshot

    def load(self) -> Optional[SessionSnapshot]:
        """Read the latest snapshot; unreadable data counts as no snapshot"""
        try:
            return self.repository.load()
        except StorageError as e:
            logger.warning(f"Discarding unreadable timer state: {e}")
            return None

    def restore(self) -> Optional[RestoredSession]:
        """
        Rebuild the session from the latest snapshot.

        Time spent suspended since the snapshot was written is credited to
        whichever accumulator was ticking. A negative gap (clock skew) counts
        as zero.

        Returns:
            RestoredSession, or None when there is nothing to restore
        """
        snapshot = self.load()
        if snapshot is None or snapshot.state == TimerState.IDLE:
            return None

        try:
            gap = (self.clock.now() - snapshot.saved_at_time).total_seconds()
        except TypeError as e:
            # naive timestamp written by something else
            logger.warning(f"Discarding timer state with invalid timestamp: {e}")
            return None
        gap = max(0.0, gap)

        elapsed_focus = snapshot.elapsed_focus_seconds
        elapsed_break = snapshot.elapsed_break_seconds
        if snapshot.state == TimerState.RUNNING:
            elapsed_focus += gap
        elif snapshot.state == TimerState.ON_BREAK:
            elapsed_break += gap

        logger.info(
            f"Restored {snapshot.state.value} session: "
            f"focus={elapsed_focus:.0f}s, break={elapsed_break:.0f}s (suspended {gap:.0f}s)"
        )

        return RestoredSession(
            state=snapshot.state,
            elapsed_focus_seconds=elapsed_focus,
            elapsed_break_seconds=elapsed_break,
            session_start_time=snapshot.session_start_time,
        )

    def clear(self) -> None:
        """Delete the snapshot; safe to call when none exists"""
        try:
            self.repository.delete()
        except StorageError as e:
            logger.error(f"Could not clear timer state: {e}")
