"""Immutable configuration structs injected into the layout engine and validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from blueprintgen.config import ROOM_GAP, ROW_ORIGIN, ROW_WRAP_WIDTH
from blueprintgen.standards.countries import get_standard
from blueprintgen.standards.rooms import (
    OPENINGS,
    PRIORITY_ORDER,
    VALIDATION_FALLBACK_MIN_AREA,
    VALIDATION_MIN_AREAS,
    OpeningSpec,
)


@dataclass(frozen=True)
class MinimumSizePolicy:
    """Per-type minimum room areas consulted by the validator.

    The default instance uses the flat validation table.  Use
    :meth:`for_country` to validate against the same country table the
    generator scales rooms with.
    """

    min_areas: Mapping[str, float] = field(default_factory=lambda: VALIDATION_MIN_AREAS)
    fallback: float = VALIDATION_FALLBACK_MIN_AREA
    source: str = "flat validation table"

    def min_area(self, room_type: str) -> float:
        return self.min_areas.get(room_type, self.fallback)

    @classmethod
    def for_country(cls, country: str | None) -> MinimumSizePolicy:
        """Build a policy from the country standards table."""
        standard = get_standard(country)
        return cls(
            min_areas=MappingProxyType(dict(standard.min_room_sizes)),
            source=standard.notes,
        )


@dataclass(frozen=True)
class LayoutConfig:
    """Tables and constants the layout engine works from."""

    priority: Mapping[str, int] = field(default_factory=lambda: PRIORITY_ORDER)
    openings: Mapping[str, Mapping[str, tuple[OpeningSpec, ...]]] = field(
        default_factory=lambda: OPENINGS
    )
    gap: float = ROOM_GAP
    wrap_width: float = ROW_WRAP_WIDTH
    origin: tuple[float, float] = ROW_ORIGIN

    def rank(self, room_type: str) -> int:
        return self.priority.get(room_type, len(self.priority) + 1)
