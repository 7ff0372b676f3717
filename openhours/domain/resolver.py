"""
Resolution of the next status change (opening or closing).

Algorithm for the next change:
1. Look at today's hours. For overnight hours the next change is either
   the early-morning closing, tonight's opening, or tomorrow's closing.
   For normal hours it is today's opening or today's closing.
2. Otherwise scan the following seven days for the first day that opens.
3. If no day opens within a week, there is no next change.
"""

from datetime import datetime
from typing import Optional

from pendulum import Duration

from .clock import add_days, civil_to_instant, day_of_week, elapsed, is_before, resolve
from .models import (
    CLOSING,
    OPENING,
    CivilTime,
    NextOpening,
    ScheduleInput,
    StatusChange,
    WeeklySchedule,
)

DAYS_AHEAD = 7


def next_status_change(
    schedule: ScheduleInput,
    timezone: Optional[str],
    instant: Optional[datetime] = None,
) -> Optional[StatusChange]:
    """
    Get the next status change after ``instant`` (default now).

    Returns:
        StatusChange with the time, type and weekday of the change, or None
        if the schedule never opens or the inputs are missing
    """
    if not schedule or not timezone:
        return None

    return next_status_change_at(WeeklySchedule.coerce(schedule), resolve(instant, timezone))


def next_status_change_at(schedule: WeeklySchedule, now: CivilTime) -> Optional[StatusChange]:
    """Find the next status change for an already resolved civil time."""
    today = schedule.for_day(now.weekday)
    current = now.minutes

    if not today.is_closed_all_day:
        open_minutes = today.open_minutes
        close_minutes = today.close_minutes

        if today.is_overnight:
            # Still inside the early-morning tail of last night's hours
            if current < close_minutes:
                return _change_on(now, 0, close_minutes, CLOSING)
            if current < open_minutes:
                return _change_on(now, 0, open_minutes, OPENING)
            return _change_on(now, 1, close_minutes, CLOSING)

        if current < open_minutes:
            return _change_on(now, 0, open_minutes, OPENING)
        if current < close_minutes:
            return _change_on(now, 0, close_minutes, CLOSING)

    return _first_opening(schedule, now, first_offset=1)


def time_until_next_change(
    schedule: ScheduleInput,
    timezone: Optional[str],
    instant: Optional[datetime] = None,
) -> Optional[Duration]:
    """
    Get the time remaining until the next status change.

    Returns:
        A non-negative Duration, or None if no change is scheduled. Callers
        that need milliseconds can use ``int(duration.total_seconds() * 1000)``.
    """
    if not schedule or not timezone:
        return None

    now = resolve(instant, timezone)
    change = next_status_change_at(WeeklySchedule.coerce(schedule), now)

    if change is None:
        return None

    return elapsed(now.instant, change.time)


def next_opening_time(
    schedule: ScheduleInput,
    timezone: Optional[str],
    instant: Optional[datetime] = None,
) -> Optional[NextOpening]:
    """
    Get the next opening time, skipping over the current trading window.

    While the restaurant is open the next change is a closing; in that case
    the search continues from the closing date to the first opening at or
    after the closing instant.
    """
    if not schedule or not timezone:
        return None

    week = WeeklySchedule.coerce(schedule)
    now = resolve(instant, timezone)
    change = next_status_change_at(week, now)

    if change is None:
        return None

    if change.type == OPENING:
        opening = change
    else:
        opening = _first_opening(week, now, first_offset=0, not_before=change.time)
        if opening is None:
            return None

    return NextOpening(
        time=opening.time,
        day=opening.day,
        time_string=week.for_day(opening.day).open,
    )


def _first_opening(
    schedule: WeeklySchedule,
    now: CivilTime,
    first_offset: int,
    not_before: Optional[datetime] = None,
) -> Optional[StatusChange]:
    """
    Scan forward day by day for the first opening.

    Closed days are skipped. With ``not_before`` set, openings earlier than
    that instant are skipped as well.
    """
    for offset in range(first_offset, DAYS_AHEAD + 1):
        day_name = day_of_week(add_days(now.date, offset))
        hours = schedule.for_day(day_name)

        if hours.is_closed_all_day:
            continue

        change = _change_on(now, offset, hours.open_minutes, OPENING)
        if not_before is not None and is_before(change.time, not_before):
            continue

        return change

    return None


def _change_on(now: CivilTime, offset: int, minutes: int, change_type: str) -> StatusChange:
    """Build a change at ``minutes`` past midnight, ``offset`` days from today."""
    civil_date = add_days(now.date, offset)
    return StatusChange(
        time=civil_to_instant(civil_date, minutes, now.tz, not_before=now.instant),
        type=change_type,
        day=day_of_week(civil_date),
    )
