"""PDF exporter — the rendered plan on one A4 landscape page (reportlab)."""

from __future__ import annotations

import io
from pathlib import Path

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from blueprintgen.config import PAGE_MARGIN_MM, PAGE_SIZE_MM
from blueprintgen.export.base import Exporter
from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.rendering.surface import DrawingSurface


def fit_image(
    image_size: tuple[float, float],
    page_size: tuple[float, float],
    margin: float,
) -> tuple[float, float, float, float]:
    """Uniformly scale *image_size* into the page's margin box, centered.

    Returns ``(x, y, width, height)`` in page units.
    """
    img_w, img_h = image_size
    box_w = page_size[0] - 2 * margin
    box_h = page_size[1] - 2 * margin
    ratio = min(box_w / img_w, box_h / img_h)
    width = img_w * ratio
    height = img_h * ratio
    return ((page_size[0] - width) / 2, (page_size[1] - height) / 2, width, height)


class PDFExporter(Exporter):
    """Capture the drawing surface and place it on a single A4 landscape page."""

    needs_surface = True

    @property
    def format_name(self) -> str:
        return "pdf"

    @property
    def extension(self) -> str:
        return "pdf"

    def write(
        self,
        spec: BlueprintSpec,
        path: Path,
        surface: DrawingSurface | None,
    ) -> None:
        page_w, page_h = PAGE_SIZE_MM[0] * mm, PAGE_SIZE_MM[1] * mm
        x, y, width, height = fit_image(
            (surface.width, surface.height), (page_w, page_h), PAGE_MARGIN_MM * mm,
        )

        image = ImageReader(io.BytesIO(surface.to_png_bytes()))
        pdf = canvas.Canvas(str(path), pagesize=(page_w, page_h))
        pdf.setTitle(f"{spec.building_type.upper()} PLAN - {spec.country}")
        pdf.drawImage(image, x, y, width=width, height=height)
        pdf.showPage()
        pdf.save()
