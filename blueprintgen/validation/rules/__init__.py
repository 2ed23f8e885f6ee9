"""Validation rules."""

from blueprintgen.validation.rules.base import ValidationIssue, ValidationRule
from blueprintgen.validation.rules.layout import LayoutRules, MinimumAreaRule, RoomOverlapRule

__all__ = [
    "LayoutRules",
    "MinimumAreaRule",
    "RoomOverlapRule",
    "ValidationIssue",
    "ValidationRule",
]
