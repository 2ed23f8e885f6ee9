"""Layout rules — minimum room areas and room overlaps."""

from __future__ import annotations

from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.standards.policy import MinimumSizePolicy
from blueprintgen.validation.overlap import OverlapDetector
from blueprintgen.validation.rules.base import ValidationIssue, ValidationRule


class MinimumAreaRule(ValidationRule):
    """Each room's area must reach the per-type minimum."""

    def __init__(self, policy: MinimumSizePolicy | None = None) -> None:
        self.policy = policy or MinimumSizePolicy()

    @property
    def name(self) -> str:
        return "layout.minimum_area"

    @property
    def description(self) -> str:
        return "Verify each room meets the minimum area for its type."

    def check(self, spec: BlueprintSpec) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        for room in spec.rooms:
            min_size = self.policy.min_area(room.type)
            if room.area < min_size:
                issues.append(ValidationIssue(
                    rule_name=self.name,
                    severity="warning",
                    message=(
                        f"{room.name} is below minimum size "
                        f"({room.area:g} < {min_size:g} sq {spec.unit})"
                    ),
                    room_ids=(room.id,),
                    suggestion=f"Enlarge {room.name} to at least {min_size:g} sq {spec.unit}.",
                ))
        return issues


class RoomOverlapRule(ValidationRule):
    """No two rooms may overlap."""

    def __init__(self, detector: OverlapDetector | None = None) -> None:
        self.detector = detector or OverlapDetector()

    @property
    def name(self) -> str:
        return "layout.room_overlap"

    @property
    def description(self) -> str:
        return "Verify no two room rectangles overlap (shared edges allowed)."

    def check(self, spec: BlueprintSpec) -> list[ValidationIssue]:
        return [
            ValidationIssue(
                rule_name=self.name,
                severity="warning",
                message=result.message,
                room_ids=(result.room_a_id, result.room_b_id),
                suggestion="Resize or move one of the rooms.",
            )
            for result in self.detector.detect(spec.rooms)
        ]


class LayoutRules:
    """Collection of all built-in layout rules."""

    @staticmethod
    def all_rules(policy: MinimumSizePolicy | None = None) -> list[ValidationRule]:
        return [
            MinimumAreaRule(policy),
            RoomOverlapRule(),
        ]
