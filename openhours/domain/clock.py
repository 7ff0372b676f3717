"""
Timezone resolution between absolute instants and civil wall-clock time.

This is the only module that consults the timezone database. Everything
downstream works on the ``CivilTime`` values produced here, so the result
never depends on the host's local timezone.
"""

from datetime import date, datetime
from typing import Optional

import pendulum
from pendulum import Date, DateTime, Duration
from pendulum.tz.exceptions import InvalidTimezone
from pendulum.tz.timezone import Timezone

from .exceptions import TimezoneError
from .models import WEEKDAYS, CivilTime


def get_timezone(name: str) -> Timezone:
    """
    Look up an IANA timezone.

    Raises:
        TimezoneError: If the name is unknown to the timezone database
    """
    try:
        return pendulum.timezone(name)
    except (InvalidTimezone, ValueError, TypeError) as exc:
        raise TimezoneError(f"Unknown timezone: {name!r}") from exc


def day_of_week(civil_date: date) -> str:
    """Return the lowercase weekday name of a civil date."""
    return WEEKDAYS[pendulum.date(civil_date.year, civil_date.month, civil_date.day).day_of_week]


def resolve(instant: Optional[datetime], timezone: str) -> CivilTime:
    """
    Resolve an instant to its wall-clock components in ``timezone``.

    ``None`` means now. A naive datetime is read as wall-clock time that is
    already in ``timezone``.
    """
    tz = get_timezone(timezone)

    if instant is None:
        local = pendulum.now(tz)
    else:
        local = pendulum.instance(instant, tz=tz).in_timezone(tz)

    return CivilTime(
        year=local.year,
        month=local.month,
        day=local.day,
        hour=local.hour,
        minute=local.minute,
        second=local.second,
        weekday=day_of_week(local),
        tz=tz,
        instant=local,
    )


def civil_to_instant(
    civil_date: date,
    minutes: int,
    tz: Timezone,
    not_before: Optional[datetime] = None,
) -> DateTime:
    """
    Build the aware instant for a civil date and minute of the day.

    Wall-clock times repeated by a DST fall-back resolve to the earlier
    occurrence unless that would be before ``not_before``. Times skipped by
    a DST gap land after the gap.
    """
    hour, minute = divmod(minutes, 60)
    later = pendulum.datetime(
        civil_date.year, civil_date.month, civil_date.day, hour, minute, tz=tz
    )
    earlier = pendulum.datetime(
        civil_date.year, civil_date.month, civil_date.day, hour, minute, tz=tz, fold=0
    )

    # Only a repeated wall-clock time keeps its hour and minute under fold=0
    if (earlier.hour, earlier.minute) == (hour, minute) and earlier.timestamp() < later.timestamp():
        if not_before is None or earlier.timestamp() >= not_before.timestamp():
            return earlier

    return later


def elapsed(start: datetime, end: datetime) -> Duration:
    """Absolute time between two aware datetimes, DST transitions included."""
    return _to_utc(start).diff(_to_utc(end), False)


def is_before(value: datetime, other: datetime) -> bool:
    return value.timestamp() < other.timestamp()


def add_days(civil_date: date, days: int) -> Date:
    return pendulum.date(civil_date.year, civil_date.month, civil_date.day).add(days=days)


def _to_utc(value: datetime) -> DateTime:
    # Aware datetimes sharing a tzinfo compare on wall time; UTC avoids that.
    return pendulum.instance(value).in_timezone("UTC")
