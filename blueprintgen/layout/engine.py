"""LayoutEngine — main entry point for room placement.

Usage::

    from blueprintgen.layout import LayoutEngine

    engine = LayoutEngine(spec)
    rooms = engine.generate_layout()
    final_spec, warnings = engine.finalize()

Placement is greedy, non-backtracking and deterministic: the same room
list and building type always produce the same positions and openings.
"""

from __future__ import annotations

import logging
from typing import Sequence

from blueprintgen.layout.openings import attach_openings
from blueprintgen.layout.registry import StrategyRegistry, default_registry
from blueprintgen.layout.strategies.base import Placement
from blueprintgen.layout.strategies.generic import pack_rows
from blueprintgen.models.blueprint import BlueprintSpec, Dimensions, Position, Room
from blueprintgen.standards.policy import LayoutConfig
from blueprintgen.validation.validator import Validator

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Assigns positions, corrected sizes and openings to a spec's rooms.

    Parameters
    ----------
    spec:
        The spec to lay out.  It is never mutated.
    config:
        Priority, openings and spacing tables.
    registry:
        Building-type strategies.  Defaults to all built-in strategies.
    validator:
        Validator used by :meth:`validate_layout` and :meth:`finalize`.
    """

    def __init__(
        self,
        spec: BlueprintSpec,
        *,
        config: LayoutConfig | None = None,
        registry: StrategyRegistry | None = None,
        validator: Validator | None = None,
    ) -> None:
        self.spec = spec
        self.config = config or LayoutConfig()
        self.registry = registry or default_registry()
        self.validator = validator or Validator()

    def generate_layout(self) -> list[Room]:
        """Return a new, fully placed room sequence.

        The output has exactly as many rooms as the stored spec.  Rooms the
        building-type strategy does not claim are row-packed below the rest.
        """
        rooms = self.sort_by_priority(self.spec.rooms)
        if not rooms:
            logger.debug("Spec has no rooms; nothing to lay out")
            return []

        strategy = self.registry.get(self.spec.building_type)
        placed: dict[int, Room] = {}
        order: list[int] = []

        for placement in strategy.plan(rooms, self.config):
            if placement.index in placed:
                logger.debug(
                    "Strategy %s placed room %d twice; keeping the first",
                    strategy.building_type, placement.index,
                )
                continue
            placed[placement.index] = self._apply(rooms[placement.index], placement)
            order.append(placement.index)

        leftovers = [(i, room) for i, room in enumerate(rooms) if i not in placed]
        if leftovers:
            start_y = (
                max(room.bottom for room in placed.values()) + self.config.gap
                if placed
                else self.config.origin[1]
            )
            origin = (self.config.origin[0], start_y)
            for placement in pack_rows(leftovers, origin, self.config.gap, self.config.wrap_width):
                placed[placement.index] = self._apply(rooms[placement.index], placement)
                order.append(placement.index)
            logger.debug(
                "%d rooms not handled by %s strategy were row-packed",
                len(leftovers), strategy.building_type,
            )

        layout = attach_openings((placed[i] for i in order), self.config.openings)
        logger.info(
            "Laid out %d rooms for %s (%s strategy)",
            len(layout), self.spec.building_type, strategy.building_type,
        )
        return layout

    def sort_by_priority(self, rooms: Sequence[Room]) -> list[Room]:
        """Stable sort by the public -> private -> service rank table."""
        return sorted(rooms, key=lambda room: self.config.rank(room.type))

    def calculate_total_area(self) -> float:
        """Sum of room areas over the STORED spec.

        Assign a fresh layout back into a spec (see :meth:`finalize`)
        before relying on this for laid-out sizes.
        """
        return sum(room.area for room in self.spec.rooms)

    def validate_layout(self) -> list[str]:
        """Advisory warnings for the stored spec."""
        return self.validator.validate(self.spec).warnings

    def finalize(self) -> tuple[BlueprintSpec, list[str]]:
        """Lay out, build the finalized spec, and validate it.

        Returns the new spec (total area and envelope recomputed) and the
        warnings for its rooms.
        """
        rooms = self.generate_layout()
        final = self.spec.with_rooms(rooms, dimensions=Dimensions.enclosing(rooms))
        warnings = self.validator.validate(final).warnings
        return final, warnings

    @staticmethod
    def _apply(room: Room, placement: Placement) -> Room:
        changes: dict[str, object] = {"position": Position(x=placement.x, y=placement.y)}
        if not room.custom_size:
            if placement.width is not None:
                changes["width"] = placement.width
            if placement.depth is not None:
                changes["depth"] = placement.depth
        return room.with_changes(**changes)
