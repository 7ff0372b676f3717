"""
Domain-specific exception hierarchy for the business-hours engine.
"""


class OpenHoursError(Exception):
    """Base class for all application-level errors."""


class ConfigError(OpenHoursError):
    """Raised when a schedule or time-of-day value is malformed."""


class TimezoneError(OpenHoursError):
    """Raised when a timezone identifier cannot be resolved."""
