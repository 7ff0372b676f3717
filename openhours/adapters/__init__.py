"""
Adapters for restaurant configuration sources.
"""

from .config_store import ConfigRestaurantStore

__all__ = ["ConfigRestaurantStore"]
