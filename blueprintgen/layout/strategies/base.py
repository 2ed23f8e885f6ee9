"""Abstract PlacementStrategy interface.

A strategy owns the hand-authored floor-plan convention of one building
type.  It never builds rooms itself: it returns :class:`Placement`
directives that the :class:`~blueprintgen.layout.engine.LayoutEngine`
applies, so strategies stay pure and easy to add.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Sequence

from blueprintgen.models.blueprint import Room
from blueprintgen.standards.policy import LayoutConfig


@dataclass(frozen=True)
class Placement:
    """Where one room goes, and optionally the size it is forced to.

    ``index`` refers to the priority-sorted room sequence handed to
    :meth:`PlacementStrategy.plan`.
    """

    index: int
    x: float
    y: float
    width: float | None = None
    depth: float | None = None


class PlacementStrategy(abc.ABC):
    """Base class for all building-type placement strategies."""

    @property
    @abc.abstractmethod
    def building_type(self) -> str:
        """Building type tag this strategy lays out (e.g. 'house')."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable summary of the floor-plan convention."""

    @abc.abstractmethod
    def plan(self, rooms: Sequence[Room], config: LayoutConfig) -> list[Placement]:
        """Return placement directives for the rooms this strategy handles.

        Rooms the strategy has no rule for are left out; the engine places
        them afterwards so none are dropped.
        """

    # Helpers shared by all strategies

    @staticmethod
    def _first(rooms: Sequence[Room], room_type: str) -> tuple[int, Room] | None:
        """First room of *room_type* with its index, or None."""
        for index, room in enumerate(rooms):
            if room.type == room_type:
                return index, room
        return None

    @staticmethod
    def _all(rooms: Sequence[Room], room_type: str) -> list[tuple[int, Room]]:
        """Every room of *room_type*, in sequence order, with indices."""
        return [(i, r) for i, r in enumerate(rooms) if r.type == room_type]
