"""
Read-only restaurant store backed by the YAML application config.
"""

from typing import List

from ..config import AppConfig, RestaurantConfig


class ConfigRestaurantStore:
    """
    Serves restaurant scheduling settings from a loaded ``AppConfig``.

    Stands in for the production database: it answers lookups but never
    writes status changes back.
    """

    def __init__(self, config: AppConfig):
        self._config = config

    def get_restaurant(self, name: str) -> RestaurantConfig | None:
        return self._config.find_restaurant(name)

    def list_restaurants(self) -> List[RestaurantConfig]:
        return list(self._config.restaurants)
