"""
Conversions between ``HH:MM`` strings and minutes since midnight.
"""

import re

from .exceptions import ConfigError

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def is_valid_time_format(value: object) -> bool:
    """Return True if ``value`` is a 24-hour ``HH:MM`` string."""
    if not isinstance(value, str):
        return False
    return _TIME_PATTERN.match(value) is not None


def time_to_minutes(time_str: str) -> int:
    """
    Convert a time string to minutes since midnight.

    Raises:
        ConfigError: If the value is not a valid ``HH:MM`` string
    """
    if not is_valid_time_format(time_str):
        raise ConfigError(f"Invalid time of day {time_str!r}, expected HH:MM")

    hours, minutes = time_str.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to ``HH:MM``, wrapping past midnight."""
    hours, mins = divmod(minutes % MINUTES_PER_DAY, 60)
    return f"{hours:02d}:{mins:02d}"


def format_time_12_hour(time_str: str) -> str:
    """
    Format a time for display in 12-hour format.

    Example: "09:00" -> "9:00 AM", "00:30" -> "12:30 AM"
    """
    hours, minutes = divmod(time_to_minutes(time_str), 60)
    period = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{minutes:02d} {period}"
