"""Country standards — measurement unit and minimum room areas per country.

Areas are in the country's own unit: square feet for US/CA, square metres
everywhere else.  Unlisted countries fall back to the ``DEFAULT`` entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from blueprintgen.config import FEET_COUNTRIES

DEFAULT_STANDARD = "DEFAULT"


@dataclass(frozen=True)
class Country:
    """A selectable country with its display name and unit."""

    code: str
    name: str
    unit: str


@dataclass(frozen=True)
class CountryStandard:
    """Minimum room areas and the code they are based on."""

    code: str
    min_room_sizes: Mapping[str, float]
    notes: str

    def min_area(self, room_type: str) -> float:
        """Return the minimum area for *room_type*, or 0 when unlisted."""
        return self.min_room_sizes.get(room_type, 0.0)


COUNTRIES: tuple[Country, ...] = (
    Country("US", "United States", "feet"),
    Country("CA", "Canada", "feet"),
    Country("GB", "United Kingdom", "meters"),
    Country("AU", "Australia", "meters"),
    Country("DE", "Germany", "meters"),
    Country("JP", "Japan", "meters"),
    Country("IN", "India", "meters"),
    Country("MX", "Mexico", "meters"),
)


def _standard(code: str, notes: str, **sizes: float) -> CountryStandard:
    # "break" is a keyword, so it is passed as break_
    table = {k.rstrip("_"): float(v) for k, v in sizes.items()}
    return CountryStandard(code=code, min_room_sizes=MappingProxyType(table), notes=notes)


COUNTRY_STANDARDS: Mapping[str, CountryStandard] = MappingProxyType({
    "US": _standard(
        "US", "Based on IRC 2021 minimums",
        bedroom=120, living=200, kitchen=100, bathroom=50, office=100,
        storage=80, dining=150, hallway=40, storefront=300, reception=120,
        workspace=80, meeting=150, break_=80,
    ),
    "CA": _standard(
        "CA", "Based on NBC 2020",
        bedroom=110, living=180, kitchen=90, bathroom=45, office=90,
        storage=70, dining=140, hallway=35, storefront=280, reception=110,
        workspace=75, meeting=140, break_=75,
    ),
    "GB": _standard(
        "GB", "Based on UK Building Regulations",
        bedroom=11, living=18, kitchen=9, bathroom=4, office=9,
        storage=7, dining=14, hallway=3, storefront=28, reception=11,
        workspace=7, meeting=14, break_=7,
    ),
    "AU": _standard(
        "AU", "Based on NCC 2022",
        bedroom=12, living=20, kitchen=10, bathroom=4, office=10,
        storage=8, dining=15, hallway=4, storefront=30, reception=12,
        workspace=8, meeting=15, break_=8,
    ),
    DEFAULT_STANDARD: _standard(
        DEFAULT_STANDARD, "International standards",
        bedroom=100, living=180, kitchen=80, bathroom=40, office=80,
        storage=60, dining=120, hallway=30, storefront=250, reception=100,
        workspace=60, meeting=120, break_=60,
    ),
})


def unit_for_country(country: str | None) -> str:
    """Return ``"feet"`` for US/CA and ``"meters"`` for every other code."""
    if country and country.upper() in FEET_COUNTRIES:
        return "feet"
    return "meters"


def get_standard(country: str | None) -> CountryStandard:
    """Return the standards entry for *country*, or the DEFAULT fallback."""
    if country is None:
        return COUNTRY_STANDARDS[DEFAULT_STANDARD]
    return COUNTRY_STANDARDS.get(country.upper(), COUNTRY_STANDARDS[DEFAULT_STANDARD])


def get_country(code: str) -> Country | None:
    """Look up a selectable country by code."""
    for country in COUNTRIES:
        if country.code == code.upper():
            return country
    return None


def list_countries() -> list[Country]:
    """Return all selectable countries."""
    return list(COUNTRIES)
