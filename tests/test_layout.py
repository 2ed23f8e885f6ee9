"""Tests for the layout engine, placement strategies and openings."""

from __future__ import annotations

from typing import Sequence

import pytest

from blueprintgen.generation.generator import build_initial_spec
from blueprintgen.layout import LayoutEngine, StrategyRegistry, attach_openings, default_registry
from blueprintgen.layout.strategies import (
    GenericStrategy,
    HouseStrategy,
    Placement,
    PlacementStrategy,
    pack_rows,
)
from blueprintgen.models import BlueprintSpec, Room
from blueprintgen.standards import LayoutConfig
from blueprintgen.standards.rooms import color_for
from blueprintgen.validation import OverlapDetector


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _room(room_id: str, room_type: str, width: float, depth: float, **kwargs) -> Room:
    return Room(
        id=room_id,
        name=kwargs.pop("name", room_type.capitalize()),
        type=room_type,
        width=width,
        depth=depth,
        color=color_for(room_type),
        **kwargs,
    )


def _spec(building_type: str, rooms: list[Room], country: str = "US") -> BlueprintSpec:
    return BlueprintSpec(building_type=building_type, country=country, rooms=rooms)


def _positions(rooms: Sequence[Room]) -> dict[str, tuple[float, float]]:
    return {r.id: (r.position.x, r.position.y) for r in rooms}


@pytest.fixture
def us_house() -> BlueprintSpec:
    return build_initial_spec("house", "US")


# ---------------------------------------------------------------------------
# House
# ---------------------------------------------------------------------------

class TestHouseLayout:
    def test_positions(self, us_house):
        rooms = LayoutEngine(us_house).generate_layout()
        by_type = {r.type: r for r in rooms}
        assert (by_type["living"].position.x, by_type["living"].position.y) == (10, 20)
        assert (by_type["kitchen"].position.x, by_type["kitchen"].position.y) == (31, 20)
        assert (by_type["bedroom"].position.x, by_type["bedroom"].position.y) == (60, 20)
        assert (by_type["bathroom"].position.x, by_type["bathroom"].position.y) == (55, 25)
        assert (by_type["hallway"].position.x, by_type["hallway"].position.y) == (45, 20)

    def test_hallway_forced_to_spine(self, us_house):
        rooms = LayoutEngine(us_house).generate_layout()
        hallway = next(r for r in rooms if r.type == "hallway")
        assert (hallway.width, hallway.depth, hallway.area) == (5, 40, 200)

    def test_end_to_end_us_house(self, us_house):
        final, warnings = LayoutEngine(us_house).finalize()
        assert len(final.rooms) == 5
        assert final.total_area == 1004.0
        assert final.total_area == round(sum(r.area for r in final.rooms), 1)
        living = final.get_room("room-0")
        assert len(living.doors) == 1 and living.doors[0].wall == "south"
        assert len(living.windows) == 2
        assert warnings == ["Bedroom overlaps with Bathroom"]

    def test_bedrooms_two_per_row(self):
        rooms = [_room(f"b{i}", "bedroom", 14, 16) for i in range(3)]
        placed = _positions(LayoutEngine(_spec("house", rooms)).generate_layout())
        assert placed["b0"] == (60, 20)
        assert placed["b1"] == (79, 20)
        assert placed["b2"] == (60, 41)

    def test_kitchen_without_living(self):
        rooms = [_room("k", "kitchen", 12, 15)]
        placed = _positions(LayoutEngine(_spec("house", rooms)).generate_layout())
        assert placed["k"] == (10, 20)

    def test_bathrooms_stack(self):
        rooms = [_room(f"ba{i}", "bathroom", 8, 10) for i in range(2)]
        placed = _positions(LayoutEngine(_spec("house", rooms)).generate_layout())
        assert placed == {"ba0": (55, 25), "ba1": (55, 40)}


# ---------------------------------------------------------------------------
# Office / shop / restaurant
# ---------------------------------------------------------------------------

class TestOtherBuildingTypes:
    def test_office(self):
        rooms = [
            _room("r", "reception", 20, 15),
            _room("w", "workspace", 25, 30),
            _room("m1", "meeting", 15, 20),
            _room("m2", "meeting", 15, 20),
            _room("br", "break", 12, 15),
            _room("ba", "bathroom", 8, 10),
        ]
        placed = _positions(LayoutEngine(_spec("office", rooms)).generate_layout())
        assert placed == {
            "r": (10, 10),
            "w": (20, 10),
            "m1": (50, 10),
            "m2": (50, 30),
            "br": (70, 10),
            "ba": (70, 40),
        }

    def test_shop_storefront_forced(self):
        spec = build_initial_spec("shop", "US")
        rooms = LayoutEngine(spec).generate_layout()
        by_type = {r.type: r for r in rooms}
        storefront = by_type["storefront"]
        assert (storefront.width, storefront.depth) == (40, 30)
        assert (storefront.position.x, storefront.position.y) == (10, 10)
        assert (by_type["storage"].position.x, by_type["storage"].position.y) == (15, 45)
        assert (by_type["office"].position.x, by_type["office"].position.y) == (55, 10)
        assert (by_type["bathroom"].position.x, by_type["bathroom"].position.y) == (55, 30)

    def test_restaurant_dining_forced(self):
        spec = build_initial_spec("restaurant", "US")
        rooms = LayoutEngine(spec).generate_layout()
        by_type = {r.type: r for r in rooms}
        assert (by_type["dining"].width, by_type["dining"].depth) == (50, 40)
        assert (by_type["kitchen"].position.x, by_type["kitchen"].position.y) == (15, 55)
        assert (by_type["storage"].position.x, by_type["storage"].position.y) == (40, 55)
        assert (by_type["bathroom"].position.x, by_type["bathroom"].position.y) == (65, 15)
        assert (by_type["office"].position.x, by_type["office"].position.y) == (65, 55)


# ---------------------------------------------------------------------------
# Generic fallback
# ---------------------------------------------------------------------------

class TestGenericLayout:
    def test_unknown_type_uses_row_packing(self):
        rooms = [
            _room("a", "office", 30, 10),
            _room("b", "office", 30, 20),
            _room("c", "office", 30, 10),
            _room("d", "office", 10, 10),
        ]
        placed = _positions(LayoutEngine(_spec("warehouse", rooms)).generate_layout())
        # c pushes x past the wrap width, so d starts the next row
        assert placed["a"] == (10, 10)
        assert placed["b"] == (45, 10)
        assert placed["c"] == (80, 10)
        assert placed["d"] == (10, 35)

    def test_pack_rows_wraps_after_placing(self):
        rooms = [_room("a", "office", 100, 10), _room("b", "office", 10, 10)]
        placements = pack_rows(enumerate(rooms), (10, 10), 5, 80)
        assert placements[0] == Placement(0, 10, 10)
        assert placements[1] == Placement(1, 10, 25)

    def test_registry_fallback(self):
        registry = default_registry()
        assert registry.has("house")
        assert not registry.has("warehouse")
        assert isinstance(registry.get("warehouse"), GenericStrategy)
        assert isinstance(registry.get("house"), HouseStrategy)
        assert {s.building_type for s in registry.list_strategies()} == {
            "house", "office", "shop", "restaurant",
        }


# ---------------------------------------------------------------------------
# Engine invariants
# ---------------------------------------------------------------------------

class TestLayoutEngine:
    def test_room_count_preserved_with_unhandled_rooms(self):
        rooms = [
            _room("l", "living", 16, 20),
            _room("s", "storage", 10, 10),
            _room("m", "meeting", 15, 20),
        ]
        layout = LayoutEngine(_spec("house", rooms)).generate_layout()
        assert len(layout) == 3
        placed = _positions(layout)
        # living bottom = 40; unhandled rooms start one gap below
        assert placed["m"] == (10, 45)
        assert placed["s"] == (30, 45)

    def test_empty_room_list(self):
        engine = LayoutEngine(_spec("house", []))
        assert engine.generate_layout() == []
        final, warnings = engine.finalize()
        assert final.rooms == []
        assert final.total_area == 0
        assert warnings == []

    def test_input_not_mutated(self, us_house):
        before = us_house.to_dict()
        LayoutEngine(us_house).finalize()
        assert us_house.to_dict() == before

    def test_deterministic(self, us_house):
        first = LayoutEngine(us_house).generate_layout()
        second = LayoutEngine(us_house).generate_layout()
        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

    def test_output_in_priority_order(self):
        rooms = [
            _room("h", "hallway", 4, 20),
            _room("b", "bathroom", 8, 10),
            _room("l", "living", 16, 20),
        ]
        layout = LayoutEngine(_spec("house", rooms)).generate_layout()
        assert [r.id for r in layout] == ["l", "b", "h"]

    def test_area_consistent_after_layout(self, us_house):
        for room in LayoutEngine(us_house).generate_layout():
            assert room.area == round(room.width * room.depth, 1)

    def test_calculate_total_area_uses_stored_spec(self, us_house):
        engine = LayoutEngine(us_house)
        engine.generate_layout()
        # hallway is still 4 x 20 in the stored spec
        assert engine.calculate_total_area() == pytest.approx(884.0)

    def test_finalize_sets_envelope(self, us_house):
        final, _ = LayoutEngine(us_house).finalize()
        assert (final.dimensions.width, final.dimensions.depth) == (64, 40)

    def test_custom_size_survives_layout(self):
        hallway = _room("h", "hallway", 8, 40, custom_size=True)
        layout = LayoutEngine(_spec("house", [hallway])).generate_layout()
        assert (layout[0].width, layout[0].depth) == (8, 40)
        assert (layout[0].position.x, layout[0].position.y) == (45, 20)

    def test_custom_registry(self):
        class CornerStrategy(PlacementStrategy):
            @property
            def building_type(self) -> str:
                return "kiosk"

            @property
            def description(self) -> str:
                return "Everything in the corner."

            def plan(self, rooms, config):
                return [Placement(i, 0, 0) for i in range(len(rooms))]

        registry = StrategyRegistry()
        registry.register(CornerStrategy())
        layout = LayoutEngine(
            _spec("kiosk", [_room("a", "storage", 5, 5)]), registry=registry,
        ).generate_layout()
        assert _positions(layout) == {"a": (0, 0)}

    def test_custom_gap(self):
        rooms = [_room("l", "living", 16, 20), _room("k", "kitchen", 12, 15)]
        layout = LayoutEngine(_spec("house", rooms), config=LayoutConfig(gap=2)).generate_layout()
        assert _positions(layout)["k"] == (28, 20)


# ---------------------------------------------------------------------------
# Openings
# ---------------------------------------------------------------------------

class TestOpenings:
    @pytest.mark.parametrize("room_type,doors,windows", [
        ("living", [("south", 0.5, 3.0)], [("north", 0.3, 4.0), ("north", 0.7, 4.0)]),
        ("kitchen", [("east", 0.5, 3.0)], [("north", 0.5, 6.0)]),
        ("bathroom", [("west", 0.5, 2.5)], [("north", 0.8, 2.0)]),
        ("office", [("east", 0.5, 3.0)], [("north", 0.5, 4.0)]),
        ("storefront", [("south", 0.5, 6.0)], [("south", 0.2, 8.0), ("south", 0.8, 8.0)]),
        ("hallway", [], []),
        ("storage", [], []),
    ])
    def test_table(self, room_type, doors, windows):
        room = attach_openings([_room("r", room_type, 10, 10)])[0]
        assert [(d.wall, d.position, d.width) for d in room.doors] == doors
        assert [(w.wall, w.position, w.width) for w in room.windows] == windows

    def test_openings_replaced_not_appended(self):
        room = attach_openings(attach_openings([_room("r", "living", 16, 20)]))[0]
        assert len(room.doors) == 1
        assert len(room.windows) == 2


# ---------------------------------------------------------------------------
# Overlap sanity on generated layouts
# ---------------------------------------------------------------------------

class TestGeneratedLayouts:
    @pytest.mark.parametrize("building_type", ["shop", "restaurant"])
    def test_us_layouts_have_no_overlaps(self, building_type):
        spec = build_initial_spec(building_type, "US")
        layout = LayoutEngine(spec).generate_layout()
        assert OverlapDetector().detect(layout) == []
        assert len(layout) == len(spec.rooms)
