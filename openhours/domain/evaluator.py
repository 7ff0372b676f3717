"""
Open/closed evaluation of a weekly schedule at a given instant.
"""

from datetime import datetime
from typing import Optional

from .clock import resolve
from .models import CivilTime, ScheduleInput, WeeklySchedule


def is_open(
    schedule: ScheduleInput,
    timezone: Optional[str],
    instant: Optional[datetime] = None,
) -> bool:
    """
    Check whether the restaurant should be open at ``instant`` (default now).

    The opening minute counts as open and the closing minute as closed.
    Overnight hours such as 22:00-02:00 are open from the opening time until
    midnight and from midnight until the closing time.

    Args:
        schedule: Weekly schedule or its wire mapping
        timezone: IANA timezone name of the restaurant
        instant: Moment to evaluate, defaults to now

    Returns:
        False when schedule or timezone is missing, otherwise the status
    """
    if not schedule or not timezone:
        return False

    return is_open_at(WeeklySchedule.coerce(schedule), resolve(instant, timezone))


def is_open_at(schedule: WeeklySchedule, now: CivilTime) -> bool:
    """Evaluate an already resolved civil time."""
    day = schedule.for_day(now.weekday)

    if day.is_closed_all_day:
        return False

    current = now.minutes
    open_minutes = day.open_minutes
    close_minutes = day.close_minutes

    if day.is_overnight:
        return current >= open_minutes or current < close_minutes

    return open_minutes <= current < close_minutes
