"""PNG exporter — the full rendered drawing as a raster image."""

from __future__ import annotations

from pathlib import Path

from blueprintgen.export.base import Exporter
from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.rendering.surface import DrawingSurface


class PNGExporter(Exporter):
    needs_surface = True

    @property
    def format_name(self) -> str:
        return "png"

    @property
    def extension(self) -> str:
        return "png"

    def write(
        self,
        spec: BlueprintSpec,
        path: Path,
        surface: DrawingSurface | None,
    ) -> None:
        surface.save_png(path)
