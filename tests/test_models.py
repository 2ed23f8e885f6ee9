"""Tests for the blueprint data model and the standards tables."""

from __future__ import annotations

import json
from typing import get_args

import pytest
from pydantic import ValidationError

from blueprintgen.models import BlueprintSpec, Dimensions, Opening, Position, Room
from blueprintgen.models.blueprint import RoomType
from blueprintgen.standards import (
    COUNTRIES,
    COUNTRY_STANDARDS,
    LayoutConfig,
    MinimumSizePolicy,
    get_country,
    get_standard,
    unit_for_country,
)
from blueprintgen.standards.rooms import PRIORITY_ORDER, color_for


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _room(room_id: str = "r1", room_type: str = "living", width: float = 10, depth: float = 12,
          x: float = 0, y: float = 0) -> Room:
    return Room(
        id=room_id,
        name=room_type.capitalize(),
        type=room_type,
        width=width,
        depth=depth,
        position=Position(x=x, y=y),
        color=color_for(room_type),
    )


# ---------------------------------------------------------------------------
# Room
# ---------------------------------------------------------------------------

class TestRoom:
    def test_area_derived_from_width_and_depth(self):
        room = _room(width=16, depth=20)
        assert room.area == 320.0

    def test_supplied_area_is_ignored(self):
        room = Room(id="r", name="Kitchen", type="kitchen", width=12, depth=15, area=999)
        assert room.area == 180.0

    def test_area_rounded_to_one_decimal(self):
        room = _room(width=4.8768, depth=6.096)
        assert room.area == 29.7

    def test_with_changes_recomputes_area(self):
        room = _room(width=10, depth=10)
        bigger = room.with_changes(width=12)
        assert bigger.area == 120.0
        assert room.area == 100.0

    def test_resized_and_moved(self):
        room = _room().resized(5, 6).moved_to(3, 4)
        assert (room.width, room.depth, room.area) == (5, 6, 30.0)
        assert (room.position.x, room.position.y) == (3, 4)

    def test_rooms_are_frozen(self):
        room = _room()
        with pytest.raises(ValidationError):
            room.width = 3

    @pytest.mark.parametrize("width,depth", [(0, 10), (-1, 10), (10, 0)])
    def test_rejects_non_positive_sizes(self, width, depth):
        with pytest.raises(ValidationError):
            Room(id="r", name="X", type="living", width=width, depth=depth)

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            Room(id="r", name="Garage", type="garage", width=10, depth=10)

    def test_bounds(self):
        room = _room(width=10, depth=5, x=2, y=3)
        assert room.bounds() == (2, 3, 12, 8)
        assert room.right == 12
        assert room.bottom == 8

    def test_opening_position_range(self):
        assert Opening(wall="north", width=3).position == 0.5
        with pytest.raises(ValidationError):
            Opening(wall="north", position=1.5, width=3)


# ---------------------------------------------------------------------------
# BlueprintSpec
# ---------------------------------------------------------------------------

class TestBlueprintSpec:
    def test_total_area_is_sum_of_rooms(self):
        spec = BlueprintSpec(
            building_type="house",
            country="US",
            rooms=[_room("a", width=10, depth=10), _room("b", "kitchen", width=3.3, depth=3)],
        )
        assert spec.total_area == 109.9

    def test_unit_filled_from_country(self):
        assert BlueprintSpec(building_type="house", country="US").unit == "feet"
        assert BlueprintSpec(building_type="house", country="CA").unit == "feet"
        assert BlueprintSpec(building_type="house", country="GB").unit == "meters"
        assert BlueprintSpec(building_type="house", country="JP").unit == "meters"

    def test_unit_mismatch_rejected(self):
        with pytest.raises(ValidationError):
            BlueprintSpec(building_type="house", country="US", unit="meters")

    def test_with_rooms_recomputes_total(self):
        spec = BlueprintSpec(building_type="house", country="US", rooms=[_room("a")])
        updated = spec.with_rooms([_room("a"), _room("b", width=5, depth=5)])
        assert updated.total_area == 145.0
        assert spec.total_area == 120.0
        assert updated.created_at == spec.created_at

    def test_get_room(self):
        spec = BlueprintSpec(building_type="house", country="US", rooms=[_room("a"), _room("b")])
        assert spec.get_room("b").id == "b"
        assert spec.get_room("missing") is None

    def test_json_uses_camel_case_keys(self):
        spec = BlueprintSpec(
            building_type="shop", country="US", rooms=[_room("a")],
        )
        data = json.loads(spec.to_json())
        assert data["buildingType"] == "shop"
        assert data["totalArea"] == 120.0
        assert "createdAt" in data
        assert data["rooms"][0]["customSize"] is False

    def test_json_round_trip(self):
        spec = BlueprintSpec(building_type="office", country="GB", rooms=[_room("a")])
        restored = BlueprintSpec.from_json(spec.to_json())
        assert restored == spec

    def test_accepts_camel_case_input(self):
        spec = BlueprintSpec.model_validate({
            "buildingType": "restaurant",
            "country": "AU",
            "rooms": [{"id": "r", "name": "Dining", "type": "dining", "width": 10, "depth": 8}],
        })
        assert spec.building_type == "restaurant"
        assert spec.unit == "meters"
        assert spec.total_area == 80.0

    def test_dimensions_enclosing(self):
        rooms = [_room("a", width=10, depth=10, x=5, y=5), _room("b", width=4, depth=20, x=20, y=0)]
        dims = Dimensions.enclosing(rooms)
        assert (dims.width, dims.depth) == (19, 20)
        assert Dimensions.enclosing([]) == Dimensions()


# ---------------------------------------------------------------------------
# Standards tables
# ---------------------------------------------------------------------------

class TestStandards:
    def test_country_list(self):
        codes = [c.code for c in COUNTRIES]
        assert codes == ["US", "CA", "GB", "AU", "DE", "JP", "IN", "MX"]

    def test_country_units(self):
        for country in COUNTRIES:
            assert country.unit == unit_for_country(country.code)

    def test_get_country(self):
        assert get_country("de").name == "Germany"
        assert get_country("XX") is None

    def test_standard_fallback(self):
        assert get_standard("JP") is COUNTRY_STANDARDS["DEFAULT"]
        assert get_standard(None) is COUNTRY_STANDARDS["DEFAULT"]
        assert get_standard("us").min_area("bedroom") == 120

    def test_break_room_key(self):
        assert COUNTRY_STANDARDS["US"].min_area("break") == 80
        assert COUNTRY_STANDARDS["US"].min_area("garage") == 0

    def test_every_room_type_has_a_rank(self):
        assert set(get_args(RoomType)) == set(PRIORITY_ORDER)

    def test_priority_order(self):
        config = LayoutConfig()
        assert config.rank("living") < config.rank("kitchen") < config.rank("bathroom")
        assert config.rank("hallway") == max(PRIORITY_ORDER.values())
        assert config.rank("unknown") > config.rank("hallway")

    def test_colors(self):
        assert color_for("living") == "#3b82f6"
        assert color_for("unknown") == "#6b7280"

    def test_policy_defaults_and_fallback(self):
        policy = MinimumSizePolicy()
        assert policy.min_area("bathroom") == 35
        assert policy.min_area("unknown") == 70

    def test_policy_for_country(self):
        policy = MinimumSizePolicy.for_country("US")
        assert policy.min_area("bathroom") == 50
        assert "IRC" in policy.source

    def test_layout_config_rank(self):
        config = LayoutConfig()
        assert config.rank("living") == 1
        assert config.rank("unknown") == len(PRIORITY_ORDER) + 1
