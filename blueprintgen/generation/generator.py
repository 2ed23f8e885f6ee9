"""Initial spec generation from the static per-type and per-country tables.

This stands in for a remote generation service: :func:`generate_blueprint`
waits out a fixed latency, then builds the spec locally.
"""

from __future__ import annotations

import asyncio
import logging
import math

from blueprintgen.config import FEET_TO_METERS, GENERATION_DELAY_S
from blueprintgen.models.blueprint import BlueprintSpec, Dimensions, Position, Room
from blueprintgen.standards.countries import get_standard, unit_for_country
from blueprintgen.standards.rooms import ROOM_DEFAULTS, RoomSize, color_for

logger = logging.getLogger(__name__)

# Provisional envelope factor applied before layout
ENVELOPE_FACTOR = 1.5
PROVISIONAL_SPACING = 25.0


def room_table(building_type: str) -> dict[str, RoomSize]:
    """Default room sizes (feet) for *building_type*; unknown types get the house table."""
    table = ROOM_DEFAULTS.get(building_type)
    if table is None:
        logger.debug("No room defaults for '%s'; using house defaults", building_type)
        table = ROOM_DEFAULTS["house"]
    return dict(table)


def scale_to_minimum(size: RoomSize, min_area: float) -> tuple[float, float]:
    """Grow *size* uniformly until it reaches *min_area*.

    The comparison is made on the raw numbers, with the minimum in the
    country's own unit.
    """
    width, depth = size.width, size.depth
    if min_area > 0 and size.area < min_area:
        factor = math.sqrt(min_area / size.area)
        width *= factor
        depth *= factor
    return width, depth


def build_initial_spec(building_type: str, country: str) -> BlueprintSpec:
    """Build the provisional, not yet laid-out spec for *building_type*."""
    unit = unit_for_country(country)
    standard = get_standard(country)

    rooms: list[Room] = []
    for index, (room_type, size) in enumerate(room_table(building_type).items()):
        width, depth = scale_to_minimum(size, standard.min_area(room_type))
        if unit != "feet":
            width *= FEET_TO_METERS
            depth *= FEET_TO_METERS
        rooms.append(Room(
            id=f"room-{index}",
            name=room_type.capitalize(),
            type=room_type,
            width=width,
            depth=depth,
            position=Position(x=index * PROVISIONAL_SPACING, y=0),
            color=color_for(room_type),
        ))

    dimensions = Dimensions(
        width=round(sum(r.width for r in rooms) * ENVELOPE_FACTOR, 1),
        depth=round(max((r.depth for r in rooms), default=0.0) * ENVELOPE_FACTOR, 1),
    )
    return BlueprintSpec(
        building_type=building_type,
        country=country,
        dimensions=dimensions,
        rooms=rooms,
        layout="linear",
        unit=unit,
    )


async def generate_blueprint(
    building_type: str,
    country: str,
    *,
    delay: float = GENERATION_DELAY_S,
) -> BlueprintSpec:
    """Produce an initial spec after *delay* seconds."""
    logger.info("Generating %s blueprint for %s", building_type, country)
    if delay > 0:
        await asyncio.sleep(delay)
    return build_initial_spec(building_type, country)
