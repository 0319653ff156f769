"""Publishing timer state to read-only observers (widgets, live activities)"""
import logging

from quacktime.models.timer_state import DisplayState

logger = logging.getLogger(__name__)


class DisplayPublisher:
    """
    Receives the current display state after every tick and transition.

    Observers never write back into the timer. The only request they may
    make is a break toggle, routed through FocusSessionService.handle_break_request.
    The base class ignores everything.
    """

    def publish(self, state: DisplayState) -> None:
        pass

    def end(self) -> None:
        pass


class LoggingDisplayPublisher(DisplayPublisher):
    """Publisher that only logs what a widget would show"""

    def __init__(self):
        self.active = False

    def publish(self, state: DisplayState) -> None:
        if not self.active:
            logger.info(f"Display started: {state.emoji} {state.activity_name}")
            self.active = True
        logger.debug(f"Display update: {state.state.value} {state.formatted_time}")

    def end(self) -> None:
        if self.active:
            logger.info("Display ended")
        self.active = False
