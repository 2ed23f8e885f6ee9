"""Abstract ValidationRule interface."""

from __future__ import annotations

import abc
from typing import Any

from blueprintgen.models.blueprint import BlueprintSpec


class ValidationIssue:
    """A single advisory finding produced by a rule."""

    def __init__(
        self,
        rule_name: str,
        severity: str,
        message: str,
        room_ids: tuple[str, ...] = (),
        suggestion: str = "",
    ) -> None:
        self.rule_name = rule_name
        self.severity = severity  # "warning", "info"
        self.message = message
        self.room_ids = room_ids
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_name": self.rule_name,
            "severity": self.severity,
            "message": self.message,
            "room_ids": list(self.room_ids),
            "suggestion": self.suggestion,
        }


class ValidationRule(abc.ABC):
    """Base class for all layout validation rules."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short rule identifier."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable description."""

    @abc.abstractmethod
    def check(self, spec: BlueprintSpec) -> list[ValidationIssue]:
        """Run this rule against a laid-out spec.

        Returns list of issues (empty if passing).
        """
