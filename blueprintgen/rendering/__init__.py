"""Rendering — architectural plan drawing with zoom and pan."""

from blueprintgen.rendering.renderer import BlueprintRenderer
from blueprintgen.rendering.surface import DrawingSurface
from blueprintgen.rendering.viewport import PixelBounds, ViewState, surface_size

__all__ = ["BlueprintRenderer", "DrawingSurface", "PixelBounds", "ViewState", "surface_size"]
