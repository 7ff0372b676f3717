"""
Configuration management using Pydantic models loaded from YAML.

Restaurant hours are validated here, at the ingestion boundary, so the
domain layer can assume well-formed schedules.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import pendulum
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .domain.clock import get_timezone
from .domain.exceptions import TimezoneError
from .domain.models import DaySpec, WeeklySchedule
from .domain.time_converter import is_valid_time_format

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Africa/Lagos"
DEFAULT_OPEN = "09:00"
DEFAULT_CLOSE = "21:00"


class DayHoursConfig(BaseModel):
    """Opening hours for one day."""
    open: Optional[str] = DEFAULT_OPEN
    close: Optional[str] = DEFAULT_CLOSE
    closed: bool = False

    @model_validator(mode="after")
    def validate_times(self) -> "DayHoursConfig":
        """Require HH:MM times unless the day is closed."""
        if self.closed:
            return self
        for label, value in (("open", self.open), ("close", self.close)):
            if not is_valid_time_format(value):
                raise ValueError(f"{label} must be a time in HH:MM format, got {value!r}")
        return self

    def to_day_spec(self) -> DaySpec:
        return DaySpec(open=self.open, close=self.close, closed=self.closed)


class BusinessHoursConfig(BaseModel):
    """Opening hours for each day of the week (defaults to 09:00-21:00 daily)."""
    monday: DayHoursConfig = Field(default_factory=DayHoursConfig)
    tuesday: DayHoursConfig = Field(default_factory=DayHoursConfig)
    wednesday: DayHoursConfig = Field(default_factory=DayHoursConfig)
    thursday: DayHoursConfig = Field(default_factory=DayHoursConfig)
    friday: DayHoursConfig = Field(default_factory=DayHoursConfig)
    saturday: DayHoursConfig = Field(default_factory=DayHoursConfig)
    sunday: DayHoursConfig = Field(default_factory=DayHoursConfig)

    def to_schedule(self) -> WeeklySchedule:
        """Convert to the immutable domain schedule."""
        return WeeklySchedule(
            monday=self.monday.to_day_spec(),
            tuesday=self.tuesday.to_day_spec(),
            wednesday=self.wednesday.to_day_spec(),
            thursday=self.thursday.to_day_spec(),
            friday=self.friday.to_day_spec(),
            saturday=self.saturday.to_day_spec(),
            sunday=self.sunday.to_day_spec(),
        )


class NotificationsSentConfig(BaseModel):
    """When each closing warning was last sent, reset once per day."""
    model_config = ConfigDict(populate_by_name=True)

    two_hour_warning: Optional[datetime] = Field(default=None, alias="twoHourWarning")
    thirty_minute_warning: Optional[datetime] = Field(default=None, alias="thirtyMinuteWarning")
    last_reset_date: date = Field(
        default_factory=lambda: pendulum.today().date(), alias="lastResetDate"
    )


class RestaurantConfig(BaseModel):
    """
    Scheduling settings of a single restaurant.

    Field aliases match the camelCase keys used by the restaurant documents
    in storage, so exported documents can be loaded unchanged.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str
    timezone: str = DEFAULT_TIMEZONE
    business_hours: BusinessHoursConfig = Field(
        default_factory=BusinessHoursConfig, alias="businessHours"
    )
    auto_schedule_enabled: bool = Field(default=False, alias="autoScheduleEnabled")
    last_manual_status_change: Optional[datetime] = Field(
        default=None, alias="lastManualStatusChange"
    )
    last_auto_status_change: Optional[datetime] = Field(
        default=None, alias="lastAutoStatusChange"
    )
    notifications_sent: Optional[NotificationsSentConfig] = Field(
        default=None, alias="notificationsSent"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone exists in the timezone database."""
        try:
            get_timezone(value)
        except TimezoneError as exc:
            raise ValueError(str(exc)) from exc
        return value

    def schedule(self) -> WeeklySchedule:
        """Get the weekly schedule in domain form."""
        return self.business_hours.to_schedule()


class AppConfig(BaseModel):
    """Application configuration."""
    restaurants: List[RestaurantConfig] = Field(default_factory=list)

    @field_validator("restaurants")
    @classmethod
    def validate_restaurants(cls, value: List[RestaurantConfig]) -> List[RestaurantConfig]:
        """Ensure restaurant names are unique."""
        seen_names: set[str] = set()
        for restaurant in value:
            name_key = restaurant.name.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate restaurant name detected: {restaurant.name}")
            seen_names.add(name_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        config = cls(**data)
        logger.debug("Loaded %d restaurant(s) from %s", len(config.restaurants), config_path)
        return config

    def find_restaurant(self, name: str) -> RestaurantConfig | None:
        """Find a restaurant by name, ignoring case."""
        for restaurant in self.restaurants:
            if restaurant.name.lower() == name.lower():
                return restaurant
        return None


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of openhours/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
