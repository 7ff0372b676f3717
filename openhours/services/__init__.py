"""
Service layer helpers that combine restaurant stores and domain logic.
"""

from .restaurant_status import RestaurantStatusService, RestaurantStoreProtocol, StatusReport

__all__ = ["RestaurantStatusService", "RestaurantStoreProtocol", "StatusReport"]
