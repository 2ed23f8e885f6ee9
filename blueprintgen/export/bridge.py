"""ExportBridge — main entry point for blueprint exports."""

from __future__ import annotations

import logging
from pathlib import Path

from blueprintgen.config import DEFAULT_OUTPUT_DIR
from blueprintgen.export.base import ExportResult, Exporter
from blueprintgen.export.json_export import JSONExporter
from blueprintgen.export.pdf import PDFExporter
from blueprintgen.export.png import PNGExporter
from blueprintgen.export.svg import SVGExporter
from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.rendering.renderer import BlueprintRenderer
from blueprintgen.rendering.surface import DrawingSurface
from blueprintgen.rendering.viewport import ViewState

logger = logging.getLogger(__name__)

__all__ = ["ExportBridge", "ExportResult", "available_formats"]

_EXPORTERS: dict[str, type[Exporter]] = {
    "json": JSONExporter,
    "svg": SVGExporter,
    "pdf": PDFExporter,
    "png": PNGExporter,
}


def available_formats() -> list[str]:
    return sorted(_EXPORTERS)


class ExportBridge:
    """Dispatches exports by format name.

    Raster formats (``pdf``, ``png``) are captured from a drawing surface;
    when the caller supplies none, the bridge renders one with *view*.

    Parameters
    ----------
    output_dir:
        Default directory for exported files.
    renderer:
        Renderer used when a surface has to be produced.
    """

    def __init__(
        self,
        output_dir: str | Path = DEFAULT_OUTPUT_DIR,
        *,
        renderer: BlueprintRenderer | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.renderer = renderer or BlueprintRenderer()

    def export(
        self,
        spec: BlueprintSpec,
        format: str = "json",
        *,
        output_dir: str | Path | None = None,
        surface: DrawingSurface | None = None,
        view: ViewState | None = None,
        basename: str | None = None,
    ) -> ExportResult:
        """Export *spec* in *format*; unknown formats fall back to JSON."""
        exporter = self._get_exporter(format)
        target = Path(output_dir) if output_dir is not None else self.output_dir

        owned: DrawingSurface | None = None
        if exporter.needs_surface and surface is None:
            owned = surface = self.renderer.render(spec, view)
        try:
            return exporter.export(spec, target, surface=surface, basename=basename)
        finally:
            if owned is not None:
                owned.close()

    def export_all(
        self,
        spec: BlueprintSpec,
        formats: list[str] | None = None,
        *,
        output_dir: str | Path | None = None,
        view: ViewState | None = None,
    ) -> list[ExportResult]:
        """Export to several formats, sharing one rendered surface."""
        if formats is None:
            formats = ["json", "svg"]

        surface: DrawingSurface | None = None
        if any(self._get_exporter(fmt).needs_surface for fmt in formats):
            surface = self.renderer.render(spec, view)

        try:
            return [
                self.export(spec, fmt, output_dir=output_dir, surface=surface)
                for fmt in formats
            ]
        finally:
            if surface is not None:
                surface.close()

    def render_text(self, spec: BlueprintSpec, format: str = "json") -> str:
        """Return the textual form of a text format (``json`` or ``svg``)."""
        if format == "svg":
            return SVGExporter().render_text(spec)
        if format != "json":
            logger.warning("Format '%s' has no text form, using json", format)
        return JSONExporter().render_text(spec)

    def _get_exporter(self, format: str) -> Exporter:
        exporter_cls = _EXPORTERS.get(format)
        if exporter_cls is None:
            logger.warning("Unknown format '%s', using json", format)
            exporter_cls = JSONExporter
        return exporter_cls()
