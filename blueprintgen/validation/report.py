"""ValidationReport model and Markdown generation."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from blueprintgen.validation.rules.base import ValidationIssue


class ValidationReport:
    """Complete validation report for a laid-out spec."""

    def __init__(
        self,
        building_type: str = "",
        country: str = "",
        status: str = "passed",
        issues: list[ValidationIssue] | None = None,
        validated_at: datetime | str | None = None,
    ) -> None:
        self.building_type = building_type
        self.country = country
        self.status = status
        self.issues = issues or []
        if validated_at is None:
            self.validated_at = datetime.now(timezone.utc)
        elif isinstance(validated_at, str):
            self.validated_at = datetime.fromisoformat(validated_at)
        else:
            self.validated_at = validated_at

    @property
    def warnings(self) -> list[str]:
        """Human-readable warning strings, in rule order."""
        return [issue.message for issue in self.issues]

    def to_markdown(self) -> str:
        """Generate a Markdown summary of the findings."""
        lines: list[str] = []

        title = f"{self.building_type or 'Blueprint'} ({self.country})" if self.country else (
            self.building_type or "Blueprint"
        )
        lines.append(f"# Layout Validation: {title}")
        lines.append("")
        lines.append(f"**Status:** {self.status.upper()}")
        lines.append(f"**Validated:** {self.validated_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append("")

        if self.issues:
            lines.append("| Severity | Rule | Message | Suggestion |")
            lines.append("|----------|------|---------|------------|")
            for issue in self.issues:
                msg = issue.message.replace("|", "\\|")
                sug = issue.suggestion.replace("|", "\\|")
                lines.append(
                    f"| {issue.severity.upper()} | {issue.rule_name} | {msg} | {sug} |"
                )
            lines.append("")
        else:
            lines.append("No issues found. Layout passes all checks.")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_dict(self) -> dict[str, Any]:
        return {
            "building_type": self.building_type,
            "country": self.country,
            "status": self.status,
            "validated_at": self.validated_at.isoformat(),
            "issues": [i.to_dict() for i in self.issues],
        }
