"""
Application service for reporting restaurant open/closed status.

The service reads restaurant settings through a store protocol and delegates
every timing decision to the domain functions. It produces a read-only
snapshot; writing the status back and deciding between automatic and manual
changes is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol, Sequence

import pendulum

from ..config import RestaurantConfig
from ..domain.clock import resolve
from ..domain.countdown import time_until_closing
from ..domain.evaluator import is_open
from ..domain.models import ClosingCountdown, NextOpening, StatusChange
from ..domain.resolver import next_opening_time, next_status_change

logger = logging.getLogger(__name__)


class RestaurantStoreProtocol(Protocol):
    """Protocol describing the restaurant store behaviour needed by the service."""

    def get_restaurant(self, name: str) -> Optional[RestaurantConfig]:
        """Return the restaurant with the given name, if any."""

    def list_restaurants(self) -> List[RestaurantConfig]:
        """Return all known restaurants."""


@dataclass(frozen=True)
class StatusReport:
    """Scheduling snapshot for one restaurant at one instant."""
    name: str
    timezone: str
    evaluated_at: datetime
    auto_schedule_enabled: bool
    should_be_open: bool
    next_change: Optional[StatusChange]
    next_opening: Optional[NextOpening]
    countdown: Optional[ClosingCountdown]


class RestaurantStatusService:
    """
    Builds status reports for restaurants held in a store.

    All reports of one call are evaluated against the same instant.
    """

    def __init__(self, store: RestaurantStoreProtocol) -> None:
        self._store = store

    def report(self, name: str, at: Optional[datetime] = None) -> StatusReport:
        """
        Build the status report for a single restaurant.

        Raises:
            KeyError: If the store does not know the restaurant
        """
        restaurant = self._store.get_restaurant(name)
        if restaurant is None:
            logger.warning("Restaurant %s not found in store", name)
            raise KeyError(f"Unknown restaurant: '{name}'")

        return self.build_report(restaurant, at=at)

    def report_many(
        self,
        names: Sequence[str] = (),
        at: Optional[datetime] = None,
    ) -> List[StatusReport]:
        """Build reports for the named restaurants, or all of them when none are named."""
        instant = at or pendulum.now()

        if not names:
            return [
                self.build_report(restaurant, at=instant)
                for restaurant in self._store.list_restaurants()
            ]

        return [self.report(name, at=instant) for name in names]

    @staticmethod
    def build_report(restaurant: RestaurantConfig, at: Optional[datetime] = None) -> StatusReport:
        """Evaluate one restaurant's schedule at ``at`` (default now)."""
        schedule = restaurant.schedule()
        tz = restaurant.timezone
        # Pin "now" once so every field below describes the same moment
        instant = resolve(at, tz).instant

        report = StatusReport(
            name=restaurant.name,
            timezone=tz,
            evaluated_at=instant,
            auto_schedule_enabled=restaurant.auto_schedule_enabled,
            should_be_open=is_open(schedule, tz, instant),
            next_change=next_status_change(schedule, tz, instant),
            next_opening=next_opening_time(schedule, tz, instant),
            countdown=time_until_closing(schedule, tz, instant),
        )

        logger.debug(
            "Status for %s at %s: open=%s next=%s",
            restaurant.name,
            instant.isoformat(),
            report.should_be_open,
            report.next_change.type if report.next_change else None,
        )
        return report
