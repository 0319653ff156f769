"""Repeating tick sources that drive the session timer"""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class TickSource(ABC):
    """Fires a callback at a fixed interval until stopped"""

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Whether ticks are currently being delivered"""

    @abstractmethod
    def start(self, callback: TickCallback) -> None:
        """Begin delivering ticks to callback, replacing any previous callback"""

    @abstractmethod
    def stop(self) -> None:
        """Stop delivering ticks; stopping an idle source is a no-op"""


class AsyncioTickSource(TickSource):
    """
    Tick source running as a task on the current asyncio event loop.

    The callback runs on the loop thread, so it is the only writer of
    whatever state it mutates and no locking is needed.
    """

    def __init__(self, interval: float = 1.0):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: TickCallback) -> None:
        """
        Start ticking.

        Must be called from inside a running event loop.
        """
        self.stop()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(callback))
        logger.debug(f"Tick source started ({self.interval}s interval)")

    def stop(self) -> None:
        if self._task is None:
            return

        if not self._task.done():
            self._task.cancel()
        self._task = None
        logger.debug("Tick source stopped")

    async def _run(self, callback: TickCallback) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                callback()
            except Exception as e:
                logger.error(f"Tick callback failed: {e}", exc_info=True)
