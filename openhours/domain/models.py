"""
Domain models for weekly business hours and schedule results.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

import pendulum
from pendulum import Date, DateTime
from pendulum.tz.timezone import Timezone

from .exceptions import ConfigError
from .time_converter import time_to_minutes

# Order matches date.weekday(): 0=Monday, 6=Sunday
WEEKDAYS: Tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

OPENING = "opening"
CLOSING = "closing"

ChangeType = Literal["opening", "closing"]
CountdownState = Literal["open", "warning", "critical"]


@dataclass(frozen=True)
class DaySpec:
    """
    Trading hours for a single day.

    ``open`` and ``close`` are ignored when ``closed`` is set and may then
    hold stale values or be missing entirely.
    """
    open: Optional[str] = None
    close: Optional[str] = None
    closed: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DaySpec":
        """
        Build a DaySpec from its ``{open, close, closed}`` wire form.

        Raises:
            ConfigError: If ``closed`` is present but not a boolean
        """
        closed = data.get("closed")
        if closed is None:
            closed = False
        elif not isinstance(closed, bool):
            raise ConfigError(f"closed must be true or false, got {closed!r}")

        return cls(
            open=data.get("open"),
            close=data.get("close"),
            closed=closed,
        )

    @property
    def open_minutes(self) -> int:
        return time_to_minutes(self.open)

    @property
    def close_minutes(self) -> int:
        return time_to_minutes(self.close)

    @property
    def is_closed_all_day(self) -> bool:
        """
        True if the day never opens.

        A day whose opening time equals its closing time counts as closed
        even without the ``closed`` flag.
        """
        if self.closed:
            return True
        return self.open_minutes == self.close_minutes

    @property
    def is_overnight(self) -> bool:
        """True if the trading window crosses midnight."""
        return self.close_minutes < self.open_minutes

    def to_dict(self) -> Dict[str, Any]:
        return {"open": self.open, "close": self.close, "closed": self.closed}


@dataclass(frozen=True)
class WeeklySchedule:
    """
    Exactly seven DaySpec values, one per weekday.
    """
    monday: DaySpec
    tuesday: DaySpec
    wednesday: DaySpec
    thursday: DaySpec
    friday: DaySpec
    saturday: DaySpec
    sunday: DaySpec

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WeeklySchedule":
        """
        Build a schedule from the storage shape keyed by weekday name.

        Raises:
            ConfigError: If a weekday is missing or not a mapping
        """
        missing = [day for day in WEEKDAYS if day not in data]
        if missing:
            raise ConfigError(f"Schedule is missing weekday(s): {', '.join(missing)}")

        days: Dict[str, DaySpec] = {}
        for day in WEEKDAYS:
            value = data[day]
            if isinstance(value, DaySpec):
                days[day] = value
            elif isinstance(value, Mapping):
                days[day] = DaySpec.from_mapping(value)
            else:
                raise ConfigError(f"Hours for {day} must be a mapping, got {type(value).__name__}")

        return cls(**days)

    @classmethod
    def coerce(cls, schedule: "WeeklySchedule | Mapping[str, Any]") -> "WeeklySchedule":
        """Accept either a WeeklySchedule or its wire mapping."""
        if isinstance(schedule, cls):
            return schedule
        return cls.from_mapping(schedule)

    def for_day(self, day: str) -> DaySpec:
        """Return the hours for a weekday name."""
        if day not in WEEKDAYS:
            raise ConfigError(f"Unknown weekday: {day!r}")
        return getattr(self, day)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {f.name: getattr(self, f.name).to_dict() for f in fields(self)}


@dataclass(frozen=True)
class CivilTime:
    """
    Wall-clock reading of an instant in a specific timezone.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: str
    tz: Timezone
    instant: DateTime

    @property
    def minutes(self) -> int:
        """Minutes since local midnight."""
        return self.hour * 60 + self.minute

    @property
    def date(self) -> Date:
        return pendulum.date(self.year, self.month, self.day)


@dataclass(frozen=True)
class StatusChange:
    """The next instant at which the open/closed status flips."""
    time: DateTime
    type: ChangeType
    day: str


@dataclass(frozen=True)
class NextOpening:
    """The next time a closed restaurant opens its doors."""
    time: DateTime
    day: str
    time_string: str


@dataclass(frozen=True)
class ClosingCountdown:
    """Time remaining until closing for an open restaurant."""
    hours: int
    minutes: int
    total_minutes: int
    state: CountdownState
    closing_time: DateTime


ScheduleInput = Union[WeeklySchedule, Mapping[str, Any], None]
