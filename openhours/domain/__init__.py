"""
Domain layer - Pure business-hours logic without external dependencies.
"""

from .countdown import classify_remaining, time_until_closing
from .evaluator import is_open
from .exceptions import ConfigError, OpenHoursError, TimezoneError
from .models import (
    WEEKDAYS,
    ClosingCountdown,
    DaySpec,
    NextOpening,
    StatusChange,
    WeeklySchedule,
)
from .resolver import next_opening_time, next_status_change, time_until_next_change
from .time_converter import format_time_12_hour, minutes_to_time, time_to_minutes

__all__ = [
    "WEEKDAYS",
    "ClosingCountdown",
    "ConfigError",
    "DaySpec",
    "NextOpening",
    "OpenHoursError",
    "StatusChange",
    "TimezoneError",
    "WeeklySchedule",
    "classify_remaining",
    "format_time_12_hour",
    "is_open",
    "minutes_to_time",
    "next_opening_time",
    "next_status_change",
    "time_to_minutes",
    "time_until_closing",
    "time_until_next_change",
]
