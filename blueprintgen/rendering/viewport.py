"""View state (zoom and pan) and the pixel geometry of a drawing surface."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from blueprintgen.config import (
    BOUNDS_MARGIN,
    DEFAULT_SCALE,
    DEFAULT_SURFACE_SIZE,
    GRID_PITCH,
    MAX_SCALE,
    MAX_SURFACE_SIZE,
    MIN_SCALE,
    SURFACE_EXTRA,
    SURFACE_ORIGIN_PAD,
    ZOOM_STEP,
)
from blueprintgen.models.blueprint import Room


def clamp_scale(scale: float) -> float:
    return round(min(max(scale, MIN_SCALE), MAX_SCALE), 2)


def grid_pitch(unit: str) -> float:
    """Surface pixels per logical unit (feet or meters)."""
    return GRID_PITCH.get(unit, GRID_PITCH["feet"])


@dataclass(frozen=True)
class ViewState:
    """Zoom factor and cumulative pan offset (in surface pixels).

    Instances are immutable; every interaction returns a new state.  The
    scale is always clamped to ``[MIN_SCALE, MAX_SCALE]``.
    """

    scale: float = DEFAULT_SCALE
    offset: tuple[float, float] = field(default=(0.0, 0.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "scale", clamp_scale(self.scale))
        object.__setattr__(self, "offset", (float(self.offset[0]), float(self.offset[1])))

    @property
    def percent(self) -> int:
        return round(self.scale * 100)

    def zoom_in(self) -> ViewState:
        return replace(self, scale=self.scale + ZOOM_STEP)

    def zoom_out(self) -> ViewState:
        return replace(self, scale=self.scale - ZOOM_STEP)

    def wheel(self, delta_y: float) -> ViewState:
        """Scroll up (negative delta) zooms in, anything else zooms out."""
        return self.zoom_in() if delta_y < 0 else self.zoom_out()

    def pan(self, dx: float, dy: float) -> ViewState:
        return replace(self, offset=(self.offset[0] + dx, self.offset[1] + dy))

    def reset(self) -> ViewState:
        return ViewState()


@dataclass(frozen=True)
class PixelBounds:
    """Axis-aligned box around all rooms, in surface pixels."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_rooms(
        cls,
        rooms: Iterable[Room],
        unit: str,
        margin: float = BOUNDS_MARGIN,
    ) -> PixelBounds:
        pitch = grid_pitch(unit)
        rooms = list(rooms)
        if not rooms:
            return cls(-margin, -margin, margin, margin)
        min_x = min(r.position.x * pitch for r in rooms)
        min_y = min(r.position.y * pitch for r in rooms)
        max_x = max(r.right * pitch for r in rooms)
        max_y = max(r.bottom * pitch for r in rooms)
        return cls(min_x - margin, min_y - margin, max_x + margin, max_y + margin)


def surface_size(rooms: Iterable[Room], unit: str) -> tuple[int, int]:
    """Surface size in pixels, capped at ``MAX_SURFACE_SIZE``.

    An empty room list gets ``DEFAULT_SURFACE_SIZE``.
    """
    rooms = list(rooms)
    if not rooms:
        return DEFAULT_SURFACE_SIZE

    pitch = grid_pitch(unit)
    max_x = 0.0
    max_y = 0.0
    for room in rooms:
        max_x = max(max_x, room.position.x * pitch + SURFACE_ORIGIN_PAD + room.width * pitch)
        max_y = max(max_y, room.position.y * pitch + SURFACE_ORIGIN_PAD + room.depth * pitch)

    width = min(max_x + SURFACE_EXTRA, MAX_SURFACE_SIZE[0])
    height = min(max_y + SURFACE_EXTRA, MAX_SURFACE_SIZE[1])
    return round(width), round(height)
