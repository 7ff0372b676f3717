"""
Tests for timezone resolution.
"""

from datetime import date, datetime, timedelta

import pendulum
import pytest

from openhours.domain.clock import (
    add_days,
    civil_to_instant,
    day_of_week,
    elapsed,
    get_timezone,
    is_before,
    resolve,
)
from openhours.domain.exceptions import TimezoneError

NEW_YORK = pendulum.timezone("America/New_York")


class TestResolve:
    """Tests for resolving instants to civil time."""

    def test_aware_instant_is_converted_to_target_zone(self):
        """Test that components come from the target timezone, not the input's."""
        civil = resolve(pendulum.datetime(2026, 2, 3, 7, 30), "Africa/Lagos")

        assert (civil.year, civil.month, civil.day) == (2026, 2, 3)
        assert (civil.hour, civil.minute) == (8, 30)
        assert civil.minutes == 510
        assert civil.weekday == "tuesday"
        assert civil.instant.timezone_name == "Africa/Lagos"

    def test_weekday_follows_civil_date(self):
        """Test that the weekday changes when the target zone is past midnight."""
        civil = resolve(pendulum.datetime(2026, 2, 2, 23, 30), "Africa/Lagos")

        assert civil.weekday == "tuesday"
        assert civil.date == date(2026, 2, 3)

    def test_naive_instant_is_wall_clock_in_target_zone(self):
        """Test that naive datetimes are not shifted."""
        civil = resolve(datetime(2026, 2, 3, 9, 15, 42), "Asia/Tokyo")

        assert (civil.hour, civil.minute, civil.second) == (9, 15, 42)
        assert civil.instant.offset_hours == 9

    def test_defaults_to_now(self):
        """Test resolving the current time."""
        before = pendulum.now("UTC")
        civil = resolve(None, "Africa/Lagos")

        assert civil.instant >= before.subtract(seconds=1)

    def test_unknown_timezone_raises(self):
        """Test that bad identifiers surface instead of falling back to UTC."""
        with pytest.raises(TimezoneError, match="Mars/Olympus_Mons"):
            resolve(datetime(2026, 2, 3, 9, 0), "Mars/Olympus_Mons")

        with pytest.raises(TimezoneError):
            get_timezone("../etc/passwd")


class TestCivilArithmetic:
    """Tests for mapping civil values back to instants."""

    def test_day_of_week(self):
        """Test weekday names."""
        assert day_of_week(date(2026, 2, 1)) == "sunday"
        assert day_of_week(date(2026, 2, 2)) == "monday"
        assert day_of_week(pendulum.date(2026, 2, 7)) == "saturday"

    def test_add_days_crosses_month_end(self):
        """Test calendar arithmetic on civil dates."""
        assert add_days(date(2026, 2, 27), 3) == date(2026, 3, 2)

    def test_elapsed_counts_real_time_across_dst(self):
        """Test that the spring-forward hour is not counted."""
        start = pendulum.datetime(2026, 3, 7, 22, 0, tz=NEW_YORK)
        end = pendulum.datetime(2026, 3, 8, 9, 0, tz=NEW_YORK)

        assert elapsed(start, end).in_hours() == 10
        assert elapsed(start, end).total_seconds() == 10 * 3600

    def test_elapsed_accepts_standard_library_datetimes(self):
        """Test that aware datetime objects from outside pendulum work too."""
        start = datetime(2026, 2, 3, 8, 0, tzinfo=pendulum.UTC)

        assert elapsed(start, start + timedelta(minutes=90)).in_minutes() == 90

    def test_time_in_dst_gap_moves_forward(self):
        """Test that a skipped wall-clock time lands after the gap."""
        instant = civil_to_instant(date(2026, 3, 8), 150, NEW_YORK)

        assert instant == pendulum.datetime(2026, 3, 8, 7, 30)
        assert (instant.hour, instant.minute) == (3, 30)

    def test_repeated_time_prefers_first_occurrence(self):
        """Test that an ambiguous time resolves to the earlier instant."""
        instant = civil_to_instant(date(2026, 11, 1), 110, NEW_YORK)

        assert instant.in_timezone("UTC") == pendulum.datetime(2026, 11, 1, 5, 50)

    def test_repeated_time_respects_not_before(self):
        """Test that the later occurrence is used when the earlier one has passed."""
        now = pendulum.datetime(2026, 11, 1, 1, 45, tz=NEW_YORK, fold=1)

        instant = civil_to_instant(date(2026, 11, 1), 110, NEW_YORK, not_before=now)

        assert instant.in_timezone("UTC") == pendulum.datetime(2026, 11, 1, 6, 50)
        assert elapsed(now, instant).in_minutes() == 5

    def test_is_before_compares_instants_not_wall_clock(self):
        """Test ordering of the two occurrences of a repeated wall-clock time."""
        first = pendulum.datetime(2026, 11, 1, 1, 30, tz=NEW_YORK, fold=0)
        second = pendulum.datetime(2026, 11, 1, 1, 30, tz=NEW_YORK, fold=1)

        assert is_before(first, second)
        assert not is_before(second, first)
