"""Drawing palette: room fills, line colors and the legend."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

Rgba = tuple[float, float, float, float]


def rgba(red: int, green: int, blue: int, alpha: float = 1.0) -> Rgba:
    """Convert 0-255 channels to a matplotlib RGBA tuple."""
    return (red / 255, green / 255, blue / 255, alpha)


BACKGROUND = "#f8fafc"

# Grid
MINOR_GRID = "#e2e8f0"
MAJOR_GRID = "#cbd5e1"
GRID_LABEL = "#94a3b8"

# Building outline
FOUNDATION = "#64748b"
EXTERIOR_WALL = "#1e293b"
WALL_HATCH = "#475569"
INK = "#1e293b"

# Rooms
INTERIOR_WALL = "#475569"
CENTERLINE = "#94a3b8"
DOOR = "#92400e"
WINDOW = "#0ea5e9"
WINDOW_GLASS = rgba(14, 165, 233, 0.1)
LABEL_FILL = rgba(255, 255, 255, 0.9)
LABEL_BORDER = "#94a3b8"
LABEL_SUBTEXT = "#64748b"

DIMENSION = "#059669"

TITLE_BLOCK_FILL = rgba(255, 255, 255, 0.95)
LEGEND_TEXT = "#475569"

ROOM_FILLS: Mapping[str, Rgba] = MappingProxyType({
    "living": rgba(254, 240, 138, 0.15),
    "kitchen": rgba(187, 247, 208, 0.15),
    "bedroom": rgba(219, 234, 254, 0.15),
    "bathroom": rgba(221, 214, 254, 0.15),
    "office": rgba(254, 226, 226, 0.15),
    "storage": rgba(229, 231, 235, 0.15),
    "dining": rgba(254, 240, 138, 0.1),
    "hallway": rgba(241, 245, 249, 0.2),
    "storefront": rgba(254, 215, 170, 0.15),
    "reception": rgba(186, 230, 253, 0.15),
    "workspace": rgba(220, 252, 231, 0.1),
    "meeting": rgba(233, 213, 255, 0.1),
    "break": rgba(254, 202, 202, 0.1),
})
DEFAULT_ROOM_FILL = rgba(241, 245, 249, 0.1)


def room_fill(room_type: str) -> Rgba:
    return ROOM_FILLS.get(room_type, DEFAULT_ROOM_FILL)


@dataclass(frozen=True)
class LegendItem:
    label: str
    color: str
    line_width: float


LEGEND_ITEMS: tuple[LegendItem, ...] = (
    LegendItem("Exterior Wall", EXTERIOR_WALL, 3.0),
    LegendItem("Interior Wall", INTERIOR_WALL, 1.5),
    LegendItem("Door", DOOR, 1.5),
    LegendItem("Window", WINDOW, 1.0),
)
