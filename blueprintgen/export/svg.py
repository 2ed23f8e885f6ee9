"""SVG exporter — a simplified vector plan built from the spec alone.

Rooms only: one tinted rectangle and a centered name per room.  Doors,
windows and dimension lines are not part of this format.
"""

from __future__ import annotations

from pathlib import Path

import svgwrite

from blueprintgen.config import SVG_CANVAS, SVG_PX_PER_UNIT
from blueprintgen.export.base import Exporter
from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.rendering.surface import DrawingSurface

ROOM_FILL_OPACITY = 0.25
LABEL_COLOR = "#1f2937"


def build_drawing(spec: BlueprintSpec, filename: str = "") -> svgwrite.Drawing:
    width, height = SVG_CANVAS
    dwg = svgwrite.Drawing(filename, size=(width, height))
    dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill="white"))

    for room in spec.rooms:
        x = room.position.x * SVG_PX_PER_UNIT
        y = room.position.y * SVG_PX_PER_UNIT
        w = room.width * SVG_PX_PER_UNIT
        h = room.depth * SVG_PX_PER_UNIT
        dwg.add(dwg.rect(
            insert=(x, y), size=(w, h),
            fill=room.color, fill_opacity=ROOM_FILL_OPACITY,
            stroke=room.color, stroke_width=2,
        ))
        dwg.add(dwg.text(
            room.name,
            insert=(x + w / 2, y + h / 2),
            text_anchor="middle",
            font_family="Arial",
            font_size=12,
            fill=LABEL_COLOR,
        ))
    return dwg


class SVGExporter(Exporter):
    """Export the room rectangles as an 800x600 SVG."""

    @property
    def format_name(self) -> str:
        return "svg"

    @property
    def extension(self) -> str:
        return "svg"

    def render_text(self, spec: BlueprintSpec) -> str:
        return build_drawing(spec).tostring()

    def write(
        self,
        spec: BlueprintSpec,
        path: Path,
        surface: DrawingSurface | None,
    ) -> None:
        build_drawing(spec, str(path)).save(pretty=True)
