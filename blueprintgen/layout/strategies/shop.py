"""ShopStrategy — a wide storefront with storage behind it."""

from __future__ import annotations

from typing import Sequence

from blueprintgen.layout.strategies.base import Placement, PlacementStrategy
from blueprintgen.models.blueprint import Room
from blueprintgen.standards.policy import LayoutConfig

STOREFRONT_SIZE = (40.0, 30.0)


class ShopStrategy(PlacementStrategy):

    @property
    def building_type(self) -> str:
        return "shop"

    @property
    def description(self) -> str:
        return "Storefront at the front, storage at the back, office and bathroom aside."

    def plan(self, rooms: Sequence[Room], config: LayoutConfig) -> list[Placement]:
        placements: list[Placement] = []

        storefront = self._first(rooms, "storefront")
        if storefront:
            width, depth = STOREFRONT_SIZE
            placements.append(Placement(storefront[0], 10.0, 10.0, width=width, depth=depth))

        storage = self._first(rooms, "storage")
        if storage:
            placements.append(Placement(storage[0], 15.0, 45.0))

        office = self._first(rooms, "office")
        if office:
            placements.append(Placement(office[0], 55.0, 10.0))

        bathroom = self._first(rooms, "bathroom")
        if bathroom:
            placements.append(Placement(bathroom[0], 55.0, 30.0))

        return placements
