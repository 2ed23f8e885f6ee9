"""Door and window attachment — one post-placement pass over all rooms.

Openings come from a fixed table keyed by room type.  Wall length and
collisions between openings on the same wall are not checked.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from blueprintgen.models.blueprint import Opening, Room
from blueprintgen.standards.rooms import OPENINGS, OpeningSpec


def openings_for(
    room_type: str,
    table: Mapping[str, Mapping[str, tuple[OpeningSpec, ...]]] = OPENINGS,
) -> tuple[list[Opening], list[Opening]]:
    """Return ``(doors, windows)`` for *room_type*; both empty when unlisted."""
    entry = table.get(room_type, {})
    doors = [Opening(wall=w, position=p, width=width) for w, p, width in entry.get("doors", ())]
    windows = [Opening(wall=w, position=p, width=width) for w, p, width in entry.get("windows", ())]
    return doors, windows


def attach_openings(
    rooms: Iterable[Room],
    table: Mapping[str, Mapping[str, tuple[OpeningSpec, ...]]] = OPENINGS,
) -> list[Room]:
    """Return new rooms whose doors/windows are replaced from *table*."""
    result: list[Room] = []
    for room in rooms:
        doors, windows = openings_for(room.type, table)
        result.append(room.with_changes(doors=doors, windows=windows))
    return result
