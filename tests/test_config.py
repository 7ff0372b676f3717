"""
Tests for configuration loading and validation.
"""

from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from openhours.config import AppConfig, DayHoursConfig, RestaurantConfig
from openhours.domain.models import DaySpec

CONFIG_YAML = """
restaurants:
  - name: Mama-Put
    timezone: Africa/Lagos
    auto_schedule_enabled: true
    business_hours:
      sunday: {open: "10:00", close: "16:00", closed: true}
  - name: suya-spot
    autoScheduleEnabled: false
    lastManualStatusChange: 2026-02-03T18:00:00+01:00
    notificationsSent:
      twoHourWarning: 2026-02-03T01:00:00+01:00
      thirtyMinuteWarning: null
      lastResetDate: 2026-02-03
    businessHours:
      friday: {open: "18:00", close: "03:00", closed: false}
"""


def _write(tmp_path: Path, text: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(text, encoding="utf-8")
    return config_path


class TestLoadFromYaml:
    """Tests for AppConfig.load_from_yaml."""

    def test_loads_restaurants(self, tmp_path):
        """Test loading snake_case and camelCase keys."""
        config = AppConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        assert [r.name for r in config.restaurants] == ["Mama-Put", "suya-spot"]

        mama_put = config.restaurants[0]
        assert mama_put.auto_schedule_enabled
        assert mama_put.schedule().sunday == DaySpec(open="10:00", close="16:00", closed=True)

        suya = config.restaurants[1]
        assert suya.timezone == "Africa/Lagos"
        assert not suya.auto_schedule_enabled
        assert suya.last_manual_status_change.hour == 18
        assert suya.schedule().friday.is_overnight

    def test_notifications_sent_record(self, tmp_path):
        """Test that the stored warning record is loaded and exported under its keys."""
        config = AppConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        assert config.restaurants[0].notifications_sent is None

        sent = config.restaurants[1].notifications_sent
        assert sent.two_hour_warning.hour == 1
        assert sent.thirty_minute_warning is None
        assert sent.last_reset_date == date(2026, 2, 3)

        exported = config.restaurants[1].model_dump(by_alias=True)
        assert exported["notificationsSent"]["lastResetDate"] == date(2026, 2, 3)
        assert RestaurantConfig(**exported).notifications_sent == sent

    def test_unlisted_days_get_default_hours(self, tmp_path):
        """Test the 09:00-21:00 default."""
        config = AppConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        assert config.restaurants[0].schedule().monday == DaySpec(open="09:00", close="21:00", closed=False)

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that YAML syntax errors become ValueError."""
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "restaurants: [unclosed"))

    def test_root_must_be_mapping(self, tmp_path):
        """Test that a list at the root is rejected."""
        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(_write(tmp_path, "- a\n- b\n"))

    def test_empty_file(self, tmp_path):
        """Test that an empty file gives an empty config."""
        assert AppConfig.load_from_yaml(_write(tmp_path, "")).restaurants == []


class TestValidation:
    """Tests for model validation."""

    def test_invalid_time_rejected(self):
        """Test that open days need HH:MM times."""
        with pytest.raises(ValidationError, match="HH:MM"):
            DayHoursConfig(open="9am", close="21:00")

    def test_closed_day_allows_stale_times(self):
        """Test that closed days skip time validation."""
        day = DayHoursConfig(open=None, close="whenever", closed=True)

        assert day.to_day_spec().is_closed_all_day

    def test_invalid_timezone_rejected(self):
        """Test that the timezone must exist."""
        with pytest.raises(ValidationError, match="Unknown timezone"):
            RestaurantConfig(name="x", timezone="Atlantis/Capital")

    def test_duplicate_names_rejected(self):
        """Test that restaurant names are unique regardless of case."""
        with pytest.raises(ValidationError, match="Duplicate restaurant name"):
            AppConfig(restaurants=[{"name": "Diner"}, {"name": "diner"}])

    def test_find_restaurant_ignores_case(self):
        """Test lookups by name."""
        config = AppConfig(restaurants=[{"name": "Diner"}])

        assert config.find_restaurant("DINER").name == "Diner"
        assert config.find_restaurant("cafe") is None

    def test_notifications_sent_defaults(self):
        """Test an empty warning record."""
        restaurant = RestaurantConfig(name="x", notificationsSent={})

        assert restaurant.notifications_sent.two_hour_warning is None
        assert isinstance(restaurant.notifications_sent.last_reset_date, date)
