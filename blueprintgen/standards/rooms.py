"""Room catalogue — per-type ranks, colors, validation minimums and openings.

Also holds the building-type catalogue and the default room sizes used by
the generation stub.  Sizes here are in feet; the stub converts them for
metric countries.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


# Public-facing rooms first, service rooms last
PRIORITY_ORDER: Mapping[str, int] = MappingProxyType({
    "living": 1,
    "dining": 2,
    "reception": 3,
    "storefront": 4,
    "kitchen": 5,
    "workspace": 6,
    "meeting": 7,
    "break": 8,
    "bedroom": 9,
    "office": 10,
    "bathroom": 11,
    "storage": 12,
    "hallway": 13,
})

ROOM_COLORS: Mapping[str, str] = MappingProxyType({
    "living": "#3b82f6",
    "kitchen": "#f59e0b",
    "bedroom": "#8b5cf6",
    "bathroom": "#06b6d4",
    "hallway": "#94a3b8",
    "storefront": "#10b981",
    "storage": "#64748b",
    "office": "#6366f1",
    "dining": "#ec4899",
    "reception": "#14b8a6",
    "workspace": "#0ea5e9",
    "meeting": "#84cc16",
    "break": "#f97316",
})

DEFAULT_ROOM_COLOR = "#6b7280"

# Flat per-type minimums used by the validator (independent of the
# country table used at generation time)
VALIDATION_MIN_AREAS: Mapping[str, float] = MappingProxyType({
    "living": 150.0,
    "kitchen": 80.0,
    "bedroom": 120.0,
    "bathroom": 35.0,
    "office": 100.0,
    "storage": 60.0,
    "dining": 140.0,
    "hallway": 30.0,
    "storefront": 200.0,
    "reception": 90.0,
    "workspace": 70.0,
    "meeting": 120.0,
    "break": 80.0,
})

VALIDATION_FALLBACK_MIN_AREA = 70.0

# (wall, fractional position, width)
OpeningSpec = tuple[str, float, float]

_STANDARD_ROOM = {
    "doors": (("south", 0.5, 3.0),),
    "windows": (("north", 0.3, 4.0), ("north", 0.7, 4.0)),
}
_DESK_ROOM = {
    "doors": (("east", 0.5, 3.0),),
    "windows": (("north", 0.5, 4.0),),
}

OPENINGS: Mapping[str, Mapping[str, tuple[OpeningSpec, ...]]] = MappingProxyType({
    "living": _STANDARD_ROOM,
    "dining": _STANDARD_ROOM,
    "bedroom": _STANDARD_ROOM,
    "kitchen": {
        "doors": (("east", 0.5, 3.0),),
        "windows": (("north", 0.5, 6.0),),
    },
    "bathroom": {
        "doors": (("west", 0.5, 2.5),),
        "windows": (("north", 0.8, 2.0),),
    },
    "office": _DESK_ROOM,
    "meeting": _DESK_ROOM,
    "storefront": {
        "doors": (("south", 0.5, 6.0),),
        "windows": (("south", 0.2, 8.0), ("south", 0.8, 8.0)),
    },
})


@dataclass(frozen=True)
class RoomSize:
    """Default width x depth for a room, in feet."""

    width: float
    depth: float

    @property
    def area(self) -> float:
        return self.width * self.depth


@dataclass(frozen=True)
class BuildingType:
    """A selectable building archetype."""

    id: str
    name: str
    description: str
    default_area: float
    default_rooms: tuple[str, ...]
    typical_layout: str


BUILDING_TYPES: Mapping[str, BuildingType] = MappingProxyType({
    "house": BuildingType(
        "house", "House", "Residential home", 2000,
        ("living", "kitchen", "bedroom", "bathroom", "hallway"), "clustered",
    ),
    "shop": BuildingType(
        "shop", "Retail Shop", "Small retail store", 1500,
        ("storefront", "storage", "office", "bathroom"), "linear",
    ),
    "office": BuildingType(
        "office", "Office", "Professional workspace", 2500,
        ("reception", "workspace", "meeting", "break", "bathroom"), "open",
    ),
    "restaurant": BuildingType(
        "restaurant", "Restaurant", "Food service establishment", 3000,
        ("dining", "kitchen", "storage", "bathroom", "office"), "central",
    ),
})

ROOM_DEFAULTS: Mapping[str, Mapping[str, RoomSize]] = MappingProxyType({
    "house": {
        "living": RoomSize(16, 20),
        "kitchen": RoomSize(12, 15),
        "bedroom": RoomSize(14, 16),
        "bathroom": RoomSize(8, 10),
        "hallway": RoomSize(4, 20),
    },
    "shop": {
        "storefront": RoomSize(30, 40),
        "storage": RoomSize(15, 20),
        "office": RoomSize(12, 12),
        "bathroom": RoomSize(8, 10),
    },
    "office": {
        "reception": RoomSize(20, 15),
        "workspace": RoomSize(25, 30),
        "meeting": RoomSize(15, 20),
        "break": RoomSize(12, 15),
        "bathroom": RoomSize(8, 10),
    },
    "restaurant": {
        "dining": RoomSize(40, 30),
        "kitchen": RoomSize(25, 25),
        "storage": RoomSize(15, 15),
        "bathroom": RoomSize(10, 12),
        "office": RoomSize(12, 12),
    },
})


def color_for(room_type: str) -> str:
    """Return the display color tag for a room type."""
    return ROOM_COLORS.get(room_type, DEFAULT_ROOM_COLOR)
