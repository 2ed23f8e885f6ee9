"""JSON exporter — the full spec as pretty-printed camelCase JSON."""

from __future__ import annotations

from pathlib import Path

from blueprintgen.export.base import Exporter
from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.rendering.surface import DrawingSurface


class JSONExporter(Exporter):
    """Always available; also provides the text for clipboard copies."""

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def extension(self) -> str:
        return "json"

    def render_text(self, spec: BlueprintSpec) -> str:
        return spec.to_json(indent=2)

    def write(
        self,
        spec: BlueprintSpec,
        path: Path,
        surface: DrawingSurface | None,
    ) -> None:
        path.write_text(self.render_text(spec), encoding="utf-8")
