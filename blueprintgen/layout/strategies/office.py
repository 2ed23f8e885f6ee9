"""OfficeStrategy — reception at the entrance, meeting rooms along one wall."""

from __future__ import annotations

from typing import Sequence

from blueprintgen.layout.strategies.base import Placement, PlacementStrategy
from blueprintgen.models.blueprint import Room
from blueprintgen.standards.policy import LayoutConfig

MEETING_X = 50.0
MEETING_PITCH = 20.0
SERVICE_X = 70.0
BATHROOM_Y = 40.0
BATHROOM_PITCH = 15.0


class OfficeStrategy(PlacementStrategy):

    @property
    def building_type(self) -> str:
        return "office"

    @property
    def description(self) -> str:
        return "Reception and open workspace in front, meeting rooms stacked on one wall."

    def plan(self, rooms: Sequence[Room], config: LayoutConfig) -> list[Placement]:
        placements: list[Placement] = []

        reception = self._first(rooms, "reception")
        if reception:
            placements.append(Placement(reception[0], 10.0, 10.0))

        workspace = self._first(rooms, "workspace")
        if workspace:
            placements.append(Placement(workspace[0], 20.0, 10.0))

        for i, (index, _) in enumerate(self._all(rooms, "meeting")):
            placements.append(Placement(index, MEETING_X, 10.0 + i * MEETING_PITCH))

        break_room = self._first(rooms, "break")
        if break_room:
            placements.append(Placement(break_room[0], SERVICE_X, 10.0))

        for i, (index, _) in enumerate(self._all(rooms, "bathroom")):
            placements.append(Placement(index, SERVICE_X, BATHROOM_Y + i * BATHROOM_PITCH))

        return placements
