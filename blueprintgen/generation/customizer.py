"""Manual room resizing followed by a full re-layout."""

from __future__ import annotations

import logging
from typing import Literal

from blueprintgen.config import MIN_CUSTOM_DIMENSION, SLIDER_RANGE
from blueprintgen.layout.engine import LayoutEngine
from blueprintgen.models.blueprint import BlueprintSpec

logger = logging.getLogger(__name__)

Dimension = Literal["width", "depth"]


def slider_range(unit: str) -> tuple[float, float]:
    """Allowed slider values for a dimension in *unit*."""
    return SLIDER_RANGE.get(unit, SLIDER_RANGE["feet"])


def set_room_dimension(
    spec: BlueprintSpec,
    room_id: str,
    dimension: Dimension,
    value: float,
    *,
    engine_factory=LayoutEngine,
) -> BlueprintSpec:
    """Set one dimension of a room, then lay the whole spec out again.

    The value is clamped to at least ``MIN_CUSTOM_DIMENSION`` and rounded
    to one decimal.  The room is marked ``customSize`` so layout keeps its
    size.  Raises ``KeyError`` for an unknown room and ``ValueError`` for
    an unknown dimension.
    """
    return _change_dimension(
        spec, room_id, dimension, lambda current: value,
        round_to=1, engine_factory=engine_factory,
    )


def resize_room(
    spec: BlueprintSpec,
    room_id: str,
    dimension: Dimension,
    delta: float,
    *,
    engine_factory=LayoutEngine,
) -> BlueprintSpec:
    """Grow or shrink one dimension of a room by *delta* (the +/- buttons).

    The step is applied at full precision, so a metric room of 4.8768 m
    grows to exactly 5.8768 m.
    """
    return _change_dimension(
        spec, room_id, dimension, lambda current: current + delta,
        round_to=None, engine_factory=engine_factory,
    )


def _change_dimension(
    spec: BlueprintSpec,
    room_id: str,
    dimension: Dimension,
    new_value,
    *,
    round_to: int | None,
    engine_factory,
) -> BlueprintSpec:
    if dimension not in ("width", "depth"):
        raise ValueError(f"dimension must be 'width' or 'depth', got {dimension!r}")

    room = spec.get_room(room_id)
    if room is None:
        raise KeyError(room_id)

    current = getattr(room, dimension)
    value = max(MIN_CUSTOM_DIMENSION, new_value(current))
    if round_to is not None:
        value = round(value, round_to)
    resized = room.with_changes(**{dimension: value, "custom_size": True})
    rooms = [resized if r.id == room_id else r for r in spec.rooms]
    logger.debug("Resized %s %s: %g -> %g", room_id, dimension, current, value)

    final, _ = engine_factory(spec.with_rooms(rooms)).finalize()
    return final
