"""GenericStrategy — left-to-right row packing for unknown building types."""

from __future__ import annotations

from typing import Iterable, Sequence

from blueprintgen.layout.strategies.base import Placement, PlacementStrategy
from blueprintgen.models.blueprint import Room
from blueprintgen.standards.policy import LayoutConfig


def pack_rows(
    indexed_rooms: Iterable[tuple[int, Room]],
    origin: tuple[float, float],
    gap: float,
    wrap_width: float,
) -> list[Placement]:
    """Place rooms left to right, wrapping once x passes *wrap_width*.

    A room is placed before the wrap test, so the last room of a row may
    extend past the wrap width.  The next row starts below the tallest room
    of the current one.
    """
    x, y = origin
    row_height = 0.0
    placements: list[Placement] = []

    for index, room in indexed_rooms:
        placements.append(Placement(index, x, y))
        x += room.width + gap
        row_height = max(row_height, room.depth)

        if x > wrap_width:
            x = origin[0]
            y += row_height + gap
            row_height = 0.0

    return placements


class GenericStrategy(PlacementStrategy):
    """Fallback for any building type without its own strategy."""

    @property
    def building_type(self) -> str:
        return "generic"

    @property
    def description(self) -> str:
        return "Rooms packed in rows, left to right, with a fixed gutter."

    def plan(self, rooms: Sequence[Room], config: LayoutConfig) -> list[Placement]:
        return pack_rows(enumerate(rooms), config.origin, config.gap, config.wrap_width)
