"""
openhours - Business-hours scheduling for restaurants.
"""

from .domain import (
    ClosingCountdown,
    ConfigError,
    DaySpec,
    NextOpening,
    OpenHoursError,
    StatusChange,
    TimezoneError,
    WeeklySchedule,
    format_time_12_hour,
    is_open,
    minutes_to_time,
    next_opening_time,
    next_status_change,
    time_to_minutes,
    time_until_closing,
    time_until_next_change,
)

__version__ = "0.1.0"

__all__ = [
    "ClosingCountdown",
    "ConfigError",
    "DaySpec",
    "NextOpening",
    "OpenHoursError",
    "StatusChange",
    "TimezoneError",
    "WeeklySchedule",
    "__version__",
    "format_time_12_hour",
    "is_open",
    "minutes_to_time",
    "next_opening_time",
    "next_status_change",
    "time_to_minutes",
    "time_until_closing",
    "time_until_next_change",
]
