"""
Countdown to closing time for an open restaurant.
"""

from datetime import datetime
from typing import Optional

from .clock import elapsed, resolve
from .evaluator import is_open_at
from .models import CLOSING, ClosingCountdown, CountdownState, ScheduleInput, WeeklySchedule
from .resolver import next_status_change_at

CRITICAL_THRESHOLD_MINUTES = 30
WARNING_THRESHOLD_MINUTES = 120


def classify_remaining(total_minutes: int) -> CountdownState:
    """Map minutes left until closing to "critical", "warning" or "open"."""
    if total_minutes < CRITICAL_THRESHOLD_MINUTES:
        return "critical"
    if total_minutes < WARNING_THRESHOLD_MINUTES:
        return "warning"
    return "open"


def time_until_closing(
    schedule: ScheduleInput,
    timezone: Optional[str],
    instant: Optional[datetime] = None,
) -> Optional[ClosingCountdown]:
    """
    Calculate the time remaining until closing.

    Returns:
        ClosingCountdown, or None if the restaurant is not open
    """
    if not schedule or not timezone:
        return None

    week = WeeklySchedule.coerce(schedule)
    now = resolve(instant, timezone)

    if not is_open_at(week, now):
        return None

    change = next_status_change_at(week, now)
    if change is None or change.type != CLOSING:
        return None

    total_minutes = elapsed(now.instant, change.time).in_minutes()
    hours, minutes = divmod(total_minutes, 60)

    return ClosingCountdown(
        hours=hours,
        minutes=minutes,
        total_minutes=total_minutes,
        state=classify_remaining(total_minutes),
        closing_time=change.time,
    )
