"""Validator — main entry point for layout validation.

Usage::

    from blueprintgen.validation import Validator

    report = Validator().validate(spec)
    for warning in report.warnings:
        print(warning)

Findings are advisory: validation never raises on a bad layout.
"""

from __future__ import annotations

import logging

from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.standards.policy import MinimumSizePolicy
from blueprintgen.validation.report import ValidationReport
from blueprintgen.validation.rules.base import ValidationIssue, ValidationRule
from blueprintgen.validation.rules.layout import LayoutRules

logger = logging.getLogger(__name__)


class Validator:
    """Validation engine with a pluggable rule list.

    Parameters
    ----------
    policy:
        Minimum-area policy for the built-in area rule.  Defaults to the
        flat validation table.
    """

    def __init__(self, policy: MinimumSizePolicy | None = None) -> None:
        self.policy = policy or MinimumSizePolicy()
        self.rules: list[ValidationRule] = []
        self._load_default_rules()

    def _load_default_rules(self) -> None:
        self.rules.extend(LayoutRules.all_rules(self.policy))

    def add_rule(self, rule: ValidationRule) -> None:
        """Register an additional validation rule."""
        self.rules.append(rule)

    def validate(self, spec: BlueprintSpec) -> ValidationReport:
        """Run every registered rule against *spec*."""
        all_issues: list[ValidationIssue] = []
        for rule in self.rules:
            try:
                all_issues.extend(rule.check(spec))
            except Exception:
                logger.debug("Rule %s failed", rule.name, exc_info=True)

        status = "warnings" if all_issues else "passed"
        logger.debug(
            "Validated %s layout: %d rooms, %d issues",
            spec.building_type, len(spec.rooms), len(all_issues),
        )
        return ValidationReport(
            building_type=spec.building_type,
            country=spec.country,
            status=status,
            issues=all_issues,
        )
