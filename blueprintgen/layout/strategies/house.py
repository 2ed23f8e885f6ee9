"""HouseStrategy — residential plan around a central hallway.

Living room at the public-facing left edge, kitchen to its right, a
hallway spine at the midline, bathrooms flanking the bedrooms, bedrooms in
two columns along the right edge.
"""

from __future__ import annotations

from typing import Sequence

from blueprintgen.layout.strategies.base import Placement, PlacementStrategy
from blueprintgen.models.blueprint import Room
from blueprintgen.standards.policy import LayoutConfig

LIVING_ORIGIN = (10.0, 20.0)
BEDROOM_COLUMN_X = 60.0
BATHROOM_X = 55.0
BATHROOM_Y = 25.0
BATHROOM_PITCH = 15.0
HALLWAY_ORIGIN = (45.0, 20.0)
HALLWAY_SIZE = (5.0, 40.0)


class HouseStrategy(PlacementStrategy):

    @property
    def building_type(self) -> str:
        return "house"

    @property
    def description(self) -> str:
        return "Living and kitchen on the left, hallway spine, bedrooms on the right."

    def plan(self, rooms: Sequence[Room], config: LayoutConfig) -> list[Placement]:
        placements: list[Placement] = []
        x0, y0 = LIVING_ORIGIN

        living = self._first(rooms, "living")
        if living:
            placements.append(Placement(living[0], x0, y0))

        kitchen = self._first(rooms, "kitchen")
        if kitchen:
            x = x0 + living[1].width + config.gap if living else x0
            placements.append(Placement(kitchen[0], x, y0))

        # Two bedrooms per row; the row advances after the second column
        bedroom_y = y0
        for i, (index, bedroom) in enumerate(self._all(rooms, "bedroom")):
            x = BEDROOM_COLUMN_X + (i % 2) * (bedroom.width + config.gap)
            placements.append(Placement(index, x, bedroom_y))
            if i % 2 == 1:
                bedroom_y += bedroom.depth + config.gap

        for i, (index, _) in enumerate(self._all(rooms, "bathroom")):
            placements.append(Placement(index, BATHROOM_X, BATHROOM_Y + i * BATHROOM_PITCH))

        hallway = self._first(rooms, "hallway")
        if hallway:
            width, depth = HALLWAY_SIZE
            placements.append(Placement(hallway[0], *HALLWAY_ORIGIN, width=width, depth=depth))

        return placements
