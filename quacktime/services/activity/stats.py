"""Aggregations over the activity log for history and stats screens"""
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List

from pydantic import BaseModel

from quacktime.models.activity import ActivityRecord
from quacktime.utils.datetime_helper import CalendarContext


class DailyTotals(BaseModel):
    """Focus and break totals for one calendar day"""
    day: date
    focus_seconds: float = 0
    break_seconds: float = 0
    session_count: int = 0


def total_focus_minutes(activities: Iterable[ActivityRecord]) -> int:
    return int(sum(a.focus_duration_seconds for a in activities) / 60)


def average_session_minutes(activities: List[ActivityRecord]) -> int:
    if not activities:
        return 0
    return total_focus_minutes(activities) // len(activities)


def focus_minutes_since(activities: Iterable[ActivityRecord], since: datetime) -> int:
    return int(sum(a.focus_duration_seconds for a in activities if a.start_time >= since) / 60)


def break_minutes_since(activities: Iterable[ActivityRecord], since: datetime) -> int:
    return int(sum(a.break_duration_seconds for a in activities if a.start_time >= since) / 60)


def week_focus_minutes(activities: Iterable[ActivityRecord], now: datetime) -> int:
    """Focus minutes for sessions started in the last seven days"""
    return focus_minutes_since(activities, now - timedelta(days=7))


def week_break_minutes(activities: Iterable[ActivityRecord], now: datetime) -> int:
    return break_minutes_since(activities, now - timedelta(days=7))


def daily_breakdown(
    activities: Iterable[ActivityRecord],
    now: datetime,
    calendar: CalendarContext,
    days: int = 7,
) -> List[DailyTotals]:
    """
    Per-day totals for the last `days` calendar days, today included.

    Returns:
        One entry per day, oldest first; days without sessions are zero
    """
    today = calendar.day_of(now)
    totals: Dict[date, DailyTotals] = {
        today - timedelta(days=offset): DailyTotals(day=today - timedelta(days=offset))
        for offset in range(days - 1, -1, -1)
    }

    for activity in activities:
        entry = totals.get(calendar.day_of(activity.start_time))
        if entry is None:
            continue
        entry.focus_seconds += activity.focus_duration_seconds
        entry.break_seconds += activity.break_duration_seconds
        entry.session_count += 1

    return [totals[day] for day in sorted(totals)]


def group_by_day(
    activities: Iterable[ActivityRecord],
    calendar: CalendarContext,
) -> Dict[date, List[ActivityRecord]]:
    """
    Group sessions by the day they started on.

    Returns:
        Dict keyed by day, newest day first; each list keeps log order
    """
    groups: Dict[date, List[ActivityRecord]] = {}
    for activity in activities:
        groups.setdefault(calendar.day_of(activity.start_time), []).append(activity)

    return {day: groups[day] for day in sorted(groups, reverse=True)}


def day_label(day: date, today: date) -> str:
    """Section title for the history list"""
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{day.strftime('%A, %b')} {day.day}"
