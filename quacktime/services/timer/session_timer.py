"""Session Timer - focus/break state machine"""
import logging
from datetime import datetime
from typing import Optional

from quacktime.models.activity import DEFAULT_ACTIVITY_NAME, DEFAULT_EMOJI
from quacktime.models.timer_state import (
    DisplayState,
    FinalizedSession,
    RestoredSession,
    TimerState,
)

from .clock import Clock
from .display import DisplayPublisher
from .tick_source import TickSource
from .timer_state_store import TimerStateStore

logger = logging.getLogger(__name__)


class InvalidTransitionError(ValueError):
    """Raised when an operation is called from a state that does not allow it"""

    def __init__(self, operation: str, state: TimerState):
        super().__init__(f"Cannot {operation} while {state.value}")
        self.operation = operation
        self.state = state


class SessionTimer:
    """
    Focus timer with Idle / Running / OnBreak states.

    Each tick adds one second to the focus accumulator while Running and to
    the break accumulator while OnBreak. Every transition and every active
    tick writes a snapshot through the state store and publishes the display
    state.
    """

    def __init__(
        self,
        state_store: TimerStateStore,
        tick_source: TickSource,
        clock: Clock,
        display: Optional[DisplayPublisher] = None,
    ):
        self.state_store = state_store
        self.tick_source = tick_source
        self.clock = clock
        self.display = display or DisplayPublisher()

        self.state = TimerState.IDLE
        self.elapsed_focus_seconds: float = 0
        self.elapsed_break_seconds: float = 0
        self.session_start_time: Optional[datetime] = None
        self.activity_name = DEFAULT_ACTIVITY_NAME
        self.emoji = DEFAULT_EMOJI

    # ============================================================================
    # TRANSITIONS
    # ============================================================================

    def start(self, activity_name: str = DEFAULT_ACTIVITY_NAME, emoji: str = DEFAULT_EMOJI) -> None:
        """Begin a new session from Idle"""
        self._require_idle("start")

        self.session_start_time = self.clock.now()
        self.elapsed_focus_seconds = 0
        self.elapsed_break_seconds = 0
        self.activity_name = activity_name
        self.emoji = emoji
        self.state = TimerState.RUNNING

        self.tick_source.start(self.tick)
        logger.info(f"Session started at {self.session_start_time.isoformat()}")

        self._persist()
        self._publish()

    def tick(self) -> None:
        """Advance the active accumulator by one second"""
        if self.state == TimerState.RUNNING:
            self.elapsed_focus_seconds += 1
        elif self.state == TimerState.ON_BREAK:
            self.elapsed_break_seconds += 1
        else:
            return

        self._persist()
        self._publish()

    def toggle_break(self) -> TimerState:
        """
        Switch between Running and OnBreak.

        Returns:
            The new state
        """
        self._require_active("toggle break")

        if self.state == TimerState.ON_BREAK:
            self.state = TimerState.RUNNING
        else:
            self.state = TimerState.ON_BREAK
        logger.info(f"Timer now {self.state.value}")

        self._persist()
        self._publish()
        return self.state

    def stop(self) -> FinalizedSession:
        """
        End the session and hand its data over for confirmation.

        The timer returns to Idle with zeroed accumulators straight away; the
        returned FinalizedSession is the only copy of the session's data.
        """
        self._require_active("stop")
        self.tick_source.stop()

        finalized = FinalizedSession(
            start_time=self.session_start_time or self.clock.now(),
            end_time=self.clock.now(),
            focus_duration_seconds=self.elapsed_focus_seconds,
            break_duration_seconds=self.elapsed_break_seconds,
            activity_name=self.activity_name,
            emoji=self.emoji,
        )
        logger.info(
            f"Session stopped: focus={finalized.focus_duration_seconds:.0f}s, "
            f"break={finalized.break_duration_seconds:.0f}s"
        )

        self._to_idle()
        self._persist()
        self._end_display()
        return finalized

    def reset(self) -> None:
        """Discard the session without recording it"""
        self._require_active("reset")
        self.tick_source.stop()

        logger.info("Session reset, elapsed time discarded")
        self._to_idle()
        self.state_store.clear()
        self._end_display()

    def resume(self, restored: RestoredSession) -> None:
        """
        Reinstate a session rebuilt by the state store and restart ticking.

        Replaces whatever the timer currently holds.
        """
        if not restored.state.is_active:
            raise InvalidTransitionError("resume an idle session", restored.state)

        self.tick_source.stop()
        self.state = restored.state
        self.elapsed_focus_seconds = restored.elapsed_focus_seconds
        self.elapsed_break_seconds = restored.elapsed_break_seconds
        self.session_start_time = restored.session_start_time

        self.tick_source.start(self.tick)
        self._persist()
        self._publish()

    def suspend(self) -> None:
        """Save the current state and stop ticking until resumed"""
        self.tick_source.stop()
        self._persist()

    # ============================================================================
    # STATE
    # ============================================================================

    def display_state(self) -> DisplayState:
        return DisplayState(
            activity_name=self.activity_name,
            emoji=self.emoji,
            state=self.state,
            elapsed_focus_seconds=self.elapsed_focus_seconds,
            elapsed_break_seconds=self.elapsed_break_seconds,
            start_time=self.session_start_time,
        )

    def _to_idle(self) -> None:
        self.state = TimerState.IDLE
        self.elapsed_focus_seconds = 0
        self.elapsed_break_seconds = 0
        self.session_start_time = None

    def _require_idle(self, operation: str) -> None:
        if self.state != TimerState.IDLE:
            raise InvalidTransitionError(operation, self.state)

    def _require_active(self, operation: str) -> None:
        if not self.state.is_active:
            raise InvalidTransitionError(operation, self.state)

    def _persist(self) -> None:
        self.state_store.save(
            self.state,
            self.elapsed_focus_seconds,
            self.elapsed_break_seconds,
            self.session_start_time,
        )

    def _publish(self) -> None:
        if not self.state.is_active:
            return

        try:
            self.display.publish(self.display_state())
        except Exception as e:
            logger.error(f"Display publisher failed: {e}")

    def _end_display(self) -> None:
        try:
            self.display.end()
        except Exception as e:
            logger.error(f"Display publisher failed to end: {e}")
