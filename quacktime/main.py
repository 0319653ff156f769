"""Logging setup and composition root"""
import logging
from dataclasses import dataclass
from typing import Optional

from quacktime.config import Settings, get_settings
from quacktime.infra.storage.client import KeyValueStore, create_key_value_store
from quacktime.infra.storage.repositories import RepositoryFactory
from quacktime.services.activity.activity_service import ActivityLog
from quacktime.services.focus_session_service import FocusSessionService, StreakPresenter
from quacktime.services.streak.streak_service import StreakService
from quacktime.services.timer.clock import Clock, SystemClock
from quacktime.services.timer.display import DisplayPublisher, LoggingDisplayPublisher
from quacktime.services.timer.session_timer import SessionTimer
from quacktime.services.timer.tick_source import AsyncioTickSource, TickSource
from quacktime.services.timer.timer_state_store import TimerStateStore
from quacktime.services.todo.todo_service import TodoService
from quacktime.utils.datetime_helper import CalendarContext

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


@dataclass
class QuackTimeApp:
    """Every service of the app, constructed once and passed around explicitly"""
    settings: Settings
    repositories: RepositoryFactory
    calendar: CalendarContext
    timer: SessionTimer
    sessions: FocusSessionService
    activity_log: ActivityLog
    streaks: StreakService
    todos: TodoService


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
    clock: Optional[Clock] = None,
    tick_source: Optional[TickSource] = None,
    calendar: Optional[CalendarContext] = None,
    display: Optional[DisplayPublisher] = None,
    streak_presenter: Optional[StreakPresenter] = None,
) -> QuackTimeApp:
    """
    Wire up the services.

    Every collaborator can be injected; anything not given is built from
    settings (file storage, system clock, asyncio ticks, configured timezone).
    """
    if settings is None:
        settings = get_settings()
        configure_logging(settings.log_level)
    store = store or create_key_value_store(settings)
    clock = clock or SystemClock()
    tick_source = tick_source or AsyncioTickSource(settings.tick_interval)
    calendar = calendar or CalendarContext.from_name(settings.timezone)
    display = display or LoggingDisplayPublisher()

    repositories = RepositoryFactory(store)
    state_store = TimerStateStore(repositories.timer_snapshots, clock)
    timer = SessionTimer(state_store, tick_source, clock, display)
    activity_log = ActivityLog(repositories.activities)
    streaks = StreakService(repositories.streaks, calendar)
    todos = TodoService(repositories.todo_items, repositories.todo_groups)

    sessions = FocusSessionService(
        timer=timer,
        state_store=state_store,
        activity_log=activity_log,
        streaks=streaks,
        streak_presenter=streak_presenter,
    )

    return QuackTimeApp(
        settings=settings,
        repositories=repositories,
        calendar=calendar,
        timer=timer,
        sessions=sessions,
        activity_log=activity_log,
        streaks=streaks,
        todos=todos,
    )
