"""Unit & Standards tables — static data consumed by layout and validation."""

from blueprintgen.standards.countries import (
    COUNTRIES,
    COUNTRY_STANDARDS,
    Country,
    CountryStandard,
    get_country,
    get_standard,
    list_countries,
    unit_for_country,
)
from blueprintgen.standards.policy import LayoutConfig, MinimumSizePolicy
from blueprintgen.standards.rooms import (
    BUILDING_TYPES,
    ROOM_DEFAULTS,
    BuildingType,
    RoomSize,
    color_for,
)

__all__ = [
    "BUILDING_TYPES",
    "BuildingType",
    "COUNTRIES",
    "COUNTRY_STANDARDS",
    "Country",
    "CountryStandard",
    "LayoutConfig",
    "MinimumSizePolicy",
    "ROOM_DEFAULTS",
    "RoomSize",
    "color_for",
    "get_country",
    "get_standard",
    "list_countries",
    "unit_for_country",
]
