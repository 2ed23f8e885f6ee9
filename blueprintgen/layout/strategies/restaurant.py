"""RestaurantStrategy — a large dining hall with the kitchen behind it."""

from __future__ import annotations

from typing import Sequence

from blueprintgen.layout.strategies.base import Placement, PlacementStrategy
from blueprintgen.models.blueprint import Room
from blueprintgen.standards.policy import LayoutConfig

DINING_SIZE = (50.0, 40.0)
SIDE_X = 65.0
BATHROOM_PITCH = 20.0


class RestaurantStrategy(PlacementStrategy):

    @property
    def building_type(self) -> str:
        return "restaurant"

    @property
    def description(self) -> str:
        return "Dining hall in front, kitchen and storage at the back, facilities on the side."

    def plan(self, rooms: Sequence[Room], config: LayoutConfig) -> list[Placement]:
        placements: list[Placement] = []

        dining = self._first(rooms, "dining")
        if dining:
            width, depth = DINING_SIZE
            placements.append(Placement(dining[0], 10.0, 10.0, width=width, depth=depth))

        kitchen = self._first(rooms, "kitchen")
        if kitchen:
            placements.append(Placement(kitchen[0], 15.0, 55.0))

        storage = self._first(rooms, "storage")
        if storage:
            placements.append(Placement(storage[0], 40.0, 55.0))

        for i, (index, _) in enumerate(self._all(rooms, "bathroom")):
            placements.append(Placement(index, SIDE_X, 15.0 + i * BATHROOM_PITCH))

        office = self._first(rooms, "office")
        if office:
            placements.append(Placement(office[0], SIDE_X, 55.0))

        return placements
