"""BlueprintSpec — the complete description of a building and its rooms.

The spec is the sole unit of exchange between generation, layout,
rendering and export.  Rooms are frozen: every change produces a new Room,
and derived quantities (``area``, ``totalArea``) are recomputed on
construction so they can never drift from ``width`` / ``depth``.

Serialized keys are camelCase (``buildingType``, ``totalArea``...).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from blueprintgen.standards.countries import unit_for_country
from blueprintgen.standards.rooms import DEFAULT_ROOM_COLOR

RoomType = Literal[
    "living",
    "kitchen",
    "bedroom",
    "bathroom",
    "office",
    "storage",
    "dining",
    "hallway",
    "storefront",
    "reception",
    "workspace",
    "meeting",
    "break",
]
WallSide = Literal["north", "south", "east", "west"]
Unit = Literal["feet", "meters"]
LayoutTag = Literal["linear", "central", "clustered", "open"]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Position(_FrozenModel):
    """Room origin (top-left corner) in the spec's logical unit."""

    x: float = 0.0
    y: float = 0.0


class Opening(_FrozenModel):
    """A door or window cutout on one wall of a room."""

    wall: WallSide
    position: float = Field(default=0.5, ge=0.0, le=1.0)
    """Fractional offset along the wall."""

    width: float = Field(gt=0)


class Room(_FrozenModel):
    """A single rectangular room."""

    id: str
    name: str
    type: RoomType
    width: float = Field(gt=0)
    depth: float = Field(gt=0)
    area: float = 0.0
    """Always ``round(width * depth, 1)``; supplied values are ignored."""

    position: Position = Field(default_factory=Position)
    color: str = DEFAULT_ROOM_COLOR
    doors: list[Opening] = Field(default_factory=list)
    windows: list[Opening] = Field(default_factory=list)
    custom_size: bool = False
    """Set when the user resized the room; layout size overrides skip it."""

    @model_validator(mode="before")
    @classmethod
    def _derive_area(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        width = data.get("width")
        depth = data.get("depth")
        if isinstance(width, (int, float)) and isinstance(depth, (int, float)):
            data = dict(data)
            data["area"] = round(width * depth, 1)
        return data

    @property
    def right(self) -> float:
        return self.position.x + self.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.depth

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)``."""
        return (self.position.x, self.position.y, self.right, self.bottom)

    def with_changes(self, **changes: Any) -> Room:
        """Return a validated copy with *changes* applied (area recomputed)."""
        data = self.model_dump()
        data.update(changes)
        return Room.model_validate(data)

    def resized(self, width: float, depth: float) -> Room:
        return self.with_changes(width=width, depth=depth)

    def moved_to(self, x: float, y: float) -> Room:
        return self.with_changes(position=Position(x=x, y=y))


class Dimensions(_FrozenModel):
    """Building envelope (derived, not authoritative)."""

    width: float = 0.0
    depth: float = 0.0

    @classmethod
    def enclosing(cls, rooms: Iterable[Room]) -> Dimensions:
        """Return the extent of the axis-aligned box around *rooms*."""
        rooms = list(rooms)
        if not rooms:
            return cls()
        min_x = min(r.position.x for r in rooms)
        min_y = min(r.position.y for r in rooms)
        max_x = max(r.right for r in rooms)
        max_y = max(r.bottom for r in rooms)
        return cls(width=round(max_x - min_x, 1), depth=round(max_y - min_y, 1))


class BlueprintSpec(BaseModel):
    """A building, its laid-out rooms and the unit they are measured in."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    building_type: str
    """``house``, ``shop``, ``office`` or ``restaurant``; anything else is
    laid out with the generic fallback."""

    country: str
    total_area: float = 0.0
    """Always ``round(sum(room.area), 1)``."""

    dimensions: Dimensions = Field(default_factory=Dimensions)
    rooms: list[Room] = Field(default_factory=list)
    layout: LayoutTag = "linear"
    unit: Unit = "feet"
    created_at: datetime = Field(default_factory=_utc_now)

    @model_validator(mode="before")
    @classmethod
    def _derive_unit(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        expected = unit_for_country(data.get("country"))
        unit = data.get("unit")
        if unit is None:
            data = dict(data)
            data["unit"] = expected
        elif unit != expected:
            raise ValueError(
                f"unit '{unit}' does not match country '{data.get('country')}' "
                f"(expected '{expected}')"
            )
        return data

    @model_validator(mode="after")
    def _derive_total_area(self) -> BlueprintSpec:
        self.total_area = round(sum(room.area for room in self.rooms), 1)
        return self

    def with_rooms(self, rooms: Iterable[Room], **changes: Any) -> BlueprintSpec:
        """Return a new spec holding *rooms*, with totals recomputed."""
        data = self.model_dump()
        data["rooms"] = list(rooms)
        data.update(changes)
        return BlueprintSpec.model_validate(data)

    def get_room(self, room_id: str) -> Room | None:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> BlueprintSpec:
        return cls.model_validate_json(text)
