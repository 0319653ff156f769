"""Tests for streak qualification, evaluation and messages."""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import FailingStore
from quacktime.infra.storage.client import InMemoryKeyValueStore
from quacktime.infra.storage.repositories.streaks import StreakRepository
from quacktime.models.streak import StreakUpdateResult
from quacktime.services.streak.messages import STREAK_HEADERS, STREAK_SUB_HEADERS
from quacktime.services.streak.streak_service import StreakService
from quacktime.utils.datetime_helper import CalendarContext

D1 = datetime(2025, 3, 12, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def streak_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def streaks(streak_store, calendar):
    return StreakService(StreakRepository(streak_store), calendar)


@pytest.mark.parametrize("seconds, expected", [
    (14 * 60, False),
    (15 * 60 - 1, False),
    (15 * 60, True),
    (2 * 3600, True),
    (0, False),
])
def test_qualifies_at_fifteen_minutes(seconds, expected):
    assert StreakService.qualifies(seconds) is expected


def test_first_qualifying_day_starts_streak(streaks):
    assert streaks.evaluate(D1) == StreakUpdateResult.NEW_STREAK_DAY
    assert streaks.current_streak == 1
    assert streaks.longest_streak == 1
    assert streaks.state.last_qualifying_day == D1.date()


def test_consecutive_day_extends_streak(streaks):
    streaks.evaluate(D1)

    assert streaks.evaluate(D1 + timedelta(days=1)) == StreakUpdateResult.NEW_STREAK_DAY
    assert streaks.current_streak == 2


def test_second_session_same_day_is_not_new(streaks):
    streaks.evaluate(D1)

    assert streaks.evaluate(D1 + timedelta(hours=5)) == StreakUpdateResult.NOT_NEW
    assert streaks.current_streak == 1


def test_gap_of_several_days_resets_streak(streaks):
    streaks.evaluate(D1)
    streaks.evaluate(D1 + timedelta(days=1))

    assert streaks.evaluate(D1 + timedelta(days=4)) == StreakUpdateResult.NEW_STREAK_DAY
    assert streaks.current_streak == 1
    assert streaks.longest_streak == 2


def test_earlier_day_resets_streak(streaks):
    streaks.evaluate(D1)
    streaks.evaluate(D1 + timedelta(days=1))

    assert streaks.evaluate(D1 - timedelta(days=3)) == StreakUpdateResult.NEW_STREAK_DAY
    assert streaks.current_streak == 1
    assert streaks.state.last_qualifying_day == (D1 - timedelta(days=3)).date()


def test_calendar_day_difference_not_elapsed_hours(streaks):
    late = datetime(2025, 3, 12, 23, 58, tzinfo=timezone.utc)
    early = datetime(2025, 3, 13, 0, 2, tzinfo=timezone.utc)

    streaks.evaluate(late)

    assert streaks.evaluate(early) == StreakUpdateResult.NEW_STREAK_DAY
    assert streaks.current_streak == 2


def test_day_boundaries_follow_injected_timezone(streak_store):
    singapore = CalendarContext(timezone(timedelta(hours=8)))
    streaks = StreakService(StreakRepository(streak_store), singapore)

    # 15:30 UTC and 16:30 UTC straddle midnight in UTC+8
    streaks.evaluate(datetime(2025, 3, 12, 15, 30, tzinfo=timezone.utc))
    result = streaks.evaluate(datetime(2025, 3, 12, 16, 30, tzinfo=timezone.utc))

    assert result == StreakUpdateResult.NEW_STREAK_DAY
    assert streaks.current_streak == 2


def test_longest_never_below_current(streaks):
    for offset in range(5):
        streaks.evaluate(D1 + timedelta(days=offset))
        state = streaks.state
        assert state.longest_streak_count >= state.current_streak_count

    assert streaks.longest_streak == 5


def test_state_persists_as_three_scalars(streaks, streak_store, calendar):
    streaks.evaluate(D1)
    streaks.evaluate(D1 + timedelta(days=1))

    assert streak_store.get("CurrentStreak") == 2
    assert streak_store.get("LongestStreak") == 2
    assert streak_store.get("LastStreakDate") == "2025-03-13"

    reloaded = StreakService(StreakRepository(streak_store), calendar)
    assert reloaded.current_streak == 2
    assert reloaded.evaluate(D1 + timedelta(days=1)) == StreakUpdateResult.NOT_NEW


def test_not_new_does_not_write(streaks, streak_store):
    streaks.evaluate(D1)
    streak_store.set("CurrentStreak", 99)

    streaks.evaluate(D1)

    assert streak_store.get("CurrentStreak") == 99


def test_invalid_stored_date_reads_as_no_date(streak_store, calendar):
    streak_store.set("CurrentStreak", 3)
    streak_store.set("LongestStreak", 5)
    streak_store.set("LastStreakDate", "yesterday")

    streaks = StreakService(StreakRepository(streak_store), calendar)

    assert streaks.current_streak == 3
    assert streaks.longest_streak == 5
    assert streaks.state.last_qualifying_day is None


@pytest.mark.parametrize("stored", ["three", -2, True, [1]])
def test_invalid_stored_counts_read_as_zero(streak_store, calendar, stored):
    streak_store.set("CurrentStreak", stored)
    streak_store.set("LongestStreak", stored)

    streaks = StreakService(StreakRepository(streak_store), calendar)

    assert streaks.current_streak == 0
    assert streaks.longest_streak == 0


def test_longest_raised_to_current_when_stored_longest_is_invalid(streak_store, calendar):
    streak_store.set("CurrentStreak", 4)
    streak_store.set("LongestStreak", "n/a")

    streaks = StreakService(StreakRepository(streak_store), calendar)

    assert streaks.longest_streak == 4


def test_unreadable_store_starts_fresh_streak(calendar):
    streaks = StreakService(StreakRepository(FailingStore()), calendar)

    assert streaks.current_streak == 0
    assert streaks.evaluate(D1) == StreakUpdateResult.NEW_STREAK_DAY
    assert streaks.current_streak == 1


@pytest.mark.parametrize("count", [0, 1, 7, 10, 23])
def test_message_is_deterministic_by_count(count):
    message = StreakService.message(count)

    assert message.header == STREAK_HEADERS[count % len(STREAK_HEADERS)]
    assert str(count) in message.sub_header
    assert message == StreakService.message(count)
    assert message.sub_header == STREAK_SUB_HEADERS[count % 10].format(count=count)
