"""
Pytest configuration and shared fixtures for the Quack Time core tests.

Provides a controllable clock, a manually driven tick source and an
in-memory store so that timer behaviour is deterministic.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quacktime.config import Settings  # noqa: E402
from quacktime.infra.storage.client import InMemoryKeyValueStore, KeyValueStore, StorageError  # noqa: E402
from quacktime.infra.storage.repositories import RepositoryFactory  # noqa: E402
from quacktime.main import create_app  # noqa: E402
from quacktime.services.timer.clock import Clock  # noqa: E402
from quacktime.services.timer.display import DisplayPublisher  # noqa: E402
from quacktime.services.timer.session_timer import SessionTimer  # noqa: E402
from quacktime.services.timer.tick_source import TickSource  # noqa: E402
from quacktime.services.timer.timer_state_store import TimerStateStore  # noqa: E402
from quacktime.utils.datetime_helper import CalendarContext  # noqa: E402

T0 = datetime(2025, 3, 12, 9, 0, 0, tzinfo=timezone.utc)


class FakeClock(Clock):
    """Clock that only moves when told to"""

    def __init__(self, start: datetime = T0):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)

    def set(self, moment: datetime) -> None:
        self.current = moment


class ManualTickSource(TickSource):
    """Tick source driven by the test; fire() delivers ticks"""

    def __init__(self, clock: FakeClock = None):
        self.clock = clock
        self.callback = None
        self.start_count = 0

    @property
    def is_running(self) -> bool:
        return self.callback is not None

    def start(self, callback) -> None:
        self.callback = callback
        self.start_count += 1

    def stop(self) -> None:
        self.callback = None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is None:
                return
            if self.clock is not None:
                self.clock.advance(1)
            self.callback()


class RecordingDisplay(DisplayPublisher):
    def __init__(self):
        self.published = []
        self.ended = 0

    def publish(self, state) -> None:
        self.published.append(state)

    def end(self) -> None:
        self.ended += 1


class FailingStore(KeyValueStore):
    """Store whose reads and/or writes always fail"""

    def __init__(self, fail_reads: bool = True, fail_writes: bool = True):
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.data = {}

    def get(self, key):
        if self.fail_reads:
            raise StorageError("read failed")
        return self.data.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise StorageError("write failed")
        self.data[key] = value

    def remove(self, key):
        if self.fail_writes:
            raise StorageError("remove failed")
        self.data.pop(key, None)


class KeyFailingStore(InMemoryKeyValueStore):
    """In-memory store whose writes fail for the given keys only"""

    def __init__(self, failing_keys):
        super().__init__()
        self.failing_keys = set(failing_keys)

    def set(self, key, value):
        if key in self.failing_keys:
            raise StorageError(f"disk full writing {key}")
        super().set(key, value)


class FailingDisplay(DisplayPublisher):
    """Publisher that raises on every call after the first `healthy` publishes"""

    def __init__(self, healthy: int = 1):
        self.healthy = healthy
        self.published = 0

    def publish(self, state) -> None:
        self.published += 1
        if self.published > self.healthy:
            raise RuntimeError("widget gone")

    def end(self) -> None:
        raise RuntimeError("widget gone")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def calendar():
    return CalendarContext(timezone.utc)


@pytest.fixture
def repositories(store):
    return RepositoryFactory(store)


@pytest.fixture
def state_store(repositories, clock):
    return TimerStateStore(repositories.timer_snapshots, clock)


@pytest.fixture
def tick_source(clock):
    return ManualTickSource(clock)


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def timer(state_store, tick_source, clock, display):
    return SessionTimer(state_store, tick_source, clock, display)


@pytest.fixture
def presented():
    """Collects (count, header, sub_header) calls from the streak presenter"""
    return []


@pytest.fixture
def app(tmp_path, store, clock, tick_source, calendar, display, presented):
    settings = Settings(data_dir=tmp_path)
    return create_app(
        settings=settings,
        store=store,
        clock=clock,
        tick_source=tick_source,
        calendar=calendar,
        display=display,
        streak_presenter=lambda count, header, sub: presented.append((count, header, sub)),
    )


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
