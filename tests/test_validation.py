"""Tests for layout validation — minimum areas, overlaps and reports."""

from __future__ import annotations

import json

import pytest

from blueprintgen.models import BlueprintSpec, Position, Room
from blueprintgen.standards import MinimumSizePolicy
from blueprintgen.validation import OverlapDetector, ValidationReport, Validator
from blueprintgen.validation.overlap import boxes_overlap, overlap_area
from blueprintgen.validation.rules import (
    MinimumAreaRule,
    RoomOverlapRule,
    ValidationIssue,
    ValidationRule,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _room(room_id: str, room_type: str, width: float, depth: float,
          x: float = 0, y: float = 0, name: str | None = None) -> Room:
    return Room(
        id=room_id,
        name=name or room_type.capitalize(),
        type=room_type,
        width=width,
        depth=depth,
        position=Position(x=x, y=y),
    )


def _spec(rooms: list[Room], country: str = "US") -> BlueprintSpec:
    return BlueprintSpec(building_type="house", country=country, rooms=rooms)


# ---------------------------------------------------------------------------
# Minimum area
# ---------------------------------------------------------------------------

class TestMinimumArea:
    def test_small_bathroom_single_warning(self):
        report = Validator().validate(_spec([_room("b", "bathroom", 5, 6)]))
        assert len(report.warnings) == 1
        assert report.warnings[0] == "Bathroom is below minimum size (30 < 35 sq feet)"
        assert "30" in report.warnings[0] and "35" in report.warnings[0]

    def test_at_minimum_passes(self):
        report = Validator().validate(_spec([_room("b", "bathroom", 5, 7)]))
        assert report.warnings == []
        assert report.status == "passed"

    def test_fallback_minimum_for_unlisted_type(self):
        policy = MinimumSizePolicy(min_areas={})
        rule = MinimumAreaRule(policy)
        issues = rule.check(_spec([_room("s", "storage", 8, 8)]))
        assert len(issues) == 1
        assert "64 < 70" in issues[0].message

    def test_metric_unit_in_message(self):
        report = Validator().validate(_spec([_room("b", "bathroom", 2, 2)], country="GB"))
        assert report.warnings == ["Bathroom is below minimum size (4 < 35 sq meters)"]

    def test_country_policy(self):
        validator = Validator(MinimumSizePolicy.for_country("US"))
        report = validator.validate(_spec([_room("b", "bathroom", 6, 7)]))
        assert report.warnings == ["Bathroom is below minimum size (42 < 50 sq feet)"]

    def test_issue_carries_room_id(self):
        issues = MinimumAreaRule().check(_spec([_room("tiny", "kitchen", 5, 5)]))
        assert issues[0].room_ids == ("tiny",)
        assert issues[0].severity == "warning"


# ---------------------------------------------------------------------------
# Overlaps
# ---------------------------------------------------------------------------

class TestOverlap:
    def test_shared_edge_is_not_overlap(self):
        rooms = [_room("a", "living", 10, 10), _room("b", "living", 10, 10, x=10)]
        assert OverlapDetector().detect(rooms) == []

    def test_shared_corner_is_not_overlap(self):
        rooms = [_room("a", "living", 10, 10), _room("b", "living", 10, 10, x=10, y=10)]
        assert OverlapDetector().detect(rooms) == []

    def test_interior_intersection(self):
        rooms = [
            _room("a", "living", 10, 10, name="Lounge"),
            _room("b", "kitchen", 10, 10, x=5, y=5, name="Galley"),
        ]
        results = OverlapDetector().detect(rooms)
        assert len(results) == 1
        assert results[0].message == "Lounge overlaps with Galley"
        assert results[0].overlap_area == 25.0
        assert (results[0].room_a_id, results[0].room_b_id) == ("a", "b")

    def test_containment(self):
        rooms = [_room("a", "living", 20, 20), _room("b", "bathroom", 2, 2, x=5, y=5)]
        assert len(OverlapDetector().detect(rooms)) == 1

    def test_each_pair_once(self):
        rooms = [_room(c, "living", 10, 10, x=i) for i, c in enumerate("abc")]
        results = OverlapDetector().detect(rooms)
        pairs = {(r.room_a_id, r.room_b_id) for r in results}
        assert pairs == {("a", "b"), ("a", "c"), ("b", "c")}

    @pytest.mark.parametrize("a,b,expected", [
        ((0, 0, 10, 10), (10, 0, 20, 10), False),
        ((0, 0, 10, 10), (0, 10, 10, 20), False),
        ((0, 0, 10, 10), (9.9, 9.9, 12, 12), True),
        ((0, 0, 10, 10), (-5, -5, 0.1, 0.1), True),
        ((0, 0, 10, 10), (20, 20, 30, 30), False),
    ])
    def test_boxes_overlap(self, a, b, expected):
        assert boxes_overlap(a, b) is expected
        assert boxes_overlap(b, a) is expected

    def test_overlap_area_disjoint(self):
        assert overlap_area((0, 0, 1, 1), (2, 2, 3, 3)) == 0.0

    def test_overlap_rule(self):
        spec = _spec([_room("a", "living", 20, 20), _room("b", "living", 20, 20, x=10)])
        issues = RoomOverlapRule().check(spec)
        assert [i.message for i in issues] == ["Living overlaps with Living"]
        assert issues[0].room_ids == ("a", "b")


# ---------------------------------------------------------------------------
# Validator / report
# ---------------------------------------------------------------------------

class _ExplodingRule(ValidationRule):
    @property
    def name(self) -> str:
        return "test.explode"

    @property
    def description(self) -> str:
        return "Always fails."

    def check(self, spec):
        raise RuntimeError("boom")


class _NoteRule(ValidationRule):
    @property
    def name(self) -> str:
        return "test.note"

    @property
    def description(self) -> str:
        return "Always reports one note."

    def check(self, spec):
        return [ValidationIssue(self.name, "info", "note | with pipe", suggestion="none")]


class TestValidator:
    def test_rule_order_area_then_overlap(self):
        spec = _spec([
            _room("a", "bathroom", 5, 5),
            _room("b", "bathroom", 5, 5, x=2),
        ])
        warnings = Validator().validate(spec).warnings
        assert len(warnings) == 3
        assert warnings[0].startswith("Bathroom is below")
        assert warnings[1].startswith("Bathroom is below")
        assert warnings[2] == "Bathroom overlaps with Bathroom"

    def test_failing_rule_is_skipped(self):
        validator = Validator()
        validator.add_rule(_ExplodingRule())
        report = validator.validate(_spec([_room("b", "bathroom", 5, 6)]))
        assert len(report.warnings) == 1

    def test_custom_rule(self):
        validator = Validator()
        validator.add_rule(_NoteRule())
        report = validator.validate(_spec([]))
        assert report.warnings == ["note | with pipe"]
        assert report.status == "warnings"

    def test_empty_spec_passes(self):
        report = Validator().validate(_spec([]))
        assert report.status == "passed"
        assert report.issues == []

    def test_markdown(self):
        validator = Validator()
        validator.add_rule(_NoteRule())
        md = validator.validate(_spec([_room("b", "bathroom", 5, 6)])).to_markdown()
        assert md.startswith("# Layout Validation: house (US)")
        assert "**Status:** WARNINGS" in md
        assert "| WARNING | layout.minimum_area |" in md
        assert "note \\| with pipe" in md

    def test_markdown_passed(self):
        md = Validator().validate(_spec([])).to_markdown()
        assert "No issues found" in md

    def test_json(self):
        report = Validator().validate(_spec([_room("b", "bathroom", 5, 6)]))
        data = json.loads(report.to_json())
        assert data["status"] == "warnings"
        assert data["issues"][0]["rule_name"] == "layout.minimum_area"
        assert data["issues"][0]["room_ids"] == ["b"]

    def test_report_from_iso_timestamp(self):
        report = ValidationReport(validated_at="2024-05-01T12:00:00+00:00")
        assert report.validated_at.year == 2024
        assert report.to_dict()["validated_at"].startswith("2024-05-01T12:00:00")
