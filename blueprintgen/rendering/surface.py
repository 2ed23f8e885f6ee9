"""DrawingSurface — a fixed-size raster surface backed by a matplotlib Figure."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from blueprintgen.config import SURFACE_DPI

logger = logging.getLogger(__name__)


class DrawingSurface:
    """A ``width`` x ``height`` pixel surface.

    The single axes fills the figure with x growing right and y growing
    down, so axes data coordinates are surface pixels.  ``stages`` records
    the drawing passes in the order they ran.
    """

    def __init__(self, width: int, height: int, *, dpi: int = SURFACE_DPI) -> None:
        self.width = int(width)
        self.height = int(height)
        self.dpi = dpi
        self.stages: list[str] = []

        self.figure = Figure(figsize=(self.width / dpi, self.height / dpi), dpi=dpi)
        self.canvas = FigureCanvasAgg(self.figure)
        self.axes: Axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.axes.set_xlim(0, self.width)
        self.axes.set_ylim(self.height, 0)
        self.axes.set_autoscale_on(False)
        self.axes.set_axis_off()

    def mark(self, stage: str) -> None:
        self.stages.append(stage)

    def to_png_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.figure.savefig(buffer, format="png", dpi=self.dpi)
        return buffer.getvalue()

    def save_png(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.to_png_bytes())
        logger.debug("Wrote %dx%d surface to %s", self.width, self.height, path)
        return path

    def close(self) -> None:
        """Release the figure's artists."""
        self.figure.clear()

    def __repr__(self) -> str:
        return f"DrawingSurface({self.width}x{self.height}, stages={self.stages})"
