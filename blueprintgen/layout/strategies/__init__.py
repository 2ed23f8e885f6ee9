"""Placement strategies — one per building type."""

from blueprintgen.layout.strategies.base import Placement, PlacementStrategy
from blueprintgen.layout.strategies.generic import GenericStrategy, pack_rows
from blueprintgen.layout.strategies.house import HouseStrategy
from blueprintgen.layout.strategies.office import OfficeStrategy
from blueprintgen.layout.strategies.restaurant import RestaurantStrategy
from blueprintgen.layout.strategies.shop import ShopStrategy

__all__ = [
    "GenericStrategy",
    "HouseStrategy",
    "OfficeStrategy",
    "Placement",
    "PlacementStrategy",
    "RestaurantStrategy",
    "ShopStrategy",
    "pack_rows",
]
