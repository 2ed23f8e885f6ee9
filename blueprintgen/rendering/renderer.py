"""BlueprintRenderer — draws a laid-out spec as an architectural plan.

Usage::

    from blueprintgen.rendering import BlueprintRenderer, ViewState

    surface = BlueprintRenderer().render(spec, ViewState(scale=1.0))
    surface.save_png("plan.png")

Passes run in a fixed order (recorded in ``surface.stages``): background,
grid, building outline, rooms, dimension lines, annotations.  Each pass
draws over the previous ones.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.lines import Line2D
from matplotlib.patches import Arc, Circle, Rectangle
from matplotlib.transforms import Affine2D, Transform

from blueprintgen.config import MAJOR_GRID_PX
from blueprintgen.models.blueprint import BlueprintSpec, Opening, Room
from blueprintgen.rendering import styles
from blueprintgen.rendering.surface import DrawingSurface
from blueprintgen.rendering.viewport import PixelBounds, ViewState, grid_pitch, surface_size

logger = logging.getLogger(__name__)

Point = tuple[float, float]

# Door swing arcs, in degrees, keyed by wall side (y grows downward)
DOOR_SWINGS: dict[str, tuple[float, float]] = {
    "north": (180.0, 270.0),
    "south": (0.0, 90.0),
    "east": (90.0, 180.0),
    "west": (270.0, 360.0),
}

DOOR_KNOB_RADIUS = 0.8
LABEL_MAX_WIDTH = 120.0
LABEL_HEIGHT = 36.0
DIMENSION_OFFSET = 15.0
ARROWHEAD_SIZE = 3.0
TITLE_BLOCK_SIZE = (200.0, 80.0)
LEGEND_SIZE = (180.0, 100.0)
ANNOTATION_MARGIN = 20.0


@dataclass(frozen=True)
class _Pen:
    """Draws primitives on *axes* through one coordinate frame.

    Line widths, dash lengths and font sizes are scaled by *zoom* so they
    grow and shrink with the drawing.
    """

    axes: Axes
    transform: Transform
    zoom: float

    def _dash_style(self, line_width: float, dashes: Sequence[float] | None):
        if not dashes:
            return "solid"
        # matplotlib multiplies dash lengths by the line width
        return (0, tuple(d / line_width for d in dashes))

    def line(
        self,
        points: Sequence[Point],
        color: str,
        line_width: float,
        dashes: Sequence[float] | None = None,
    ) -> None:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        self.axes.add_line(Line2D(
            xs, ys,
            color=color,
            linewidth=line_width * self.zoom,
            linestyle=self._dash_style(line_width, dashes),
            transform=self.transform,
        ))

    def segments(self, segments: Sequence[Sequence[Point]], color: str, line_width: float) -> None:
        self.axes.add_collection(LineCollection(
            segments,
            colors=color,
            linewidths=line_width * self.zoom,
            transform=self.transform,
        ), autolim=False)

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        *,
        fill=None,
        edge=None,
        line_width: float = 1.0,
        dashes: Sequence[float] | None = None,
    ) -> None:
        self.axes.add_patch(Rectangle(
            (x, y), width, height,
            facecolor=fill if fill is not None else "none",
            edgecolor=edge if edge is not None else "none",
            linewidth=line_width * self.zoom if edge is not None else 0.0,
            linestyle=self._dash_style(line_width, dashes),
            transform=self.transform,
        ))

    def arc(self, center: Point, radius: float, theta1: float, theta2: float,
            color: str, line_width: float) -> None:
        self.axes.add_patch(Arc(
            center, 2 * radius, 2 * radius,
            theta1=theta1, theta2=theta2,
            edgecolor=color,
            linewidth=line_width * self.zoom,
            transform=self.transform,
        ))

    def circle(self, center: Point, radius: float, *, fill=None, edge=None,
               line_width: float = 1.0) -> None:
        self.axes.add_patch(Circle(
            center, radius,
            facecolor=fill if fill is not None else "none",
            edgecolor=edge if edge is not None else "none",
            linewidth=line_width * self.zoom if edge is not None else 0.0,
            transform=self.transform,
        ))

    def text(
        self,
        x: float,
        y: float,
        content: str,
        *,
        size: float,
        color: str = styles.INK,
        bold: bool = False,
        mono: bool = False,
        align: str = "left",
        rotation: float = 0.0,
    ) -> None:
        self.axes.text(
            x, y, content,
            fontsize=size * self.zoom,
            color=color,
            fontweight="bold" if bold else "normal",
            fontfamily="monospace" if mono else "sans-serif",
            ha=align,
            va="baseline",
            rotation=rotation,
            rotation_mode="anchor",
            transform=self.transform,
        )


def _arrowhead(x: float, y: float, angle: float, size: float = ARROWHEAD_SIZE) -> list[list[Point]]:
    """Two short strokes forming an open arrowhead pointing along *angle*."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)

    def rotate(px: float, py: float) -> Point:
        return (x + px * cos_a - py * sin_a, y + px * sin_a + py * cos_a)

    tip = (x, y)
    return [[tip, rotate(-size, -size)], [tip, rotate(-size, size)]]


def _unit_marks(unit: str) -> tuple[str, str]:
    """Length and area suffixes for labels."""
    if unit == "meters":
        return "m", " m²"
    return "'", " SF"


class BlueprintRenderer:
    """Produces a :class:`DrawingSurface` from a spec and a view state."""

    def render(self, spec: BlueprintSpec, view: ViewState | None = None) -> DrawingSurface:
        view = view or ViewState()
        width, height = surface_size(spec.rooms, spec.unit)
        surface = DrawingSurface(width, height)

        self._draw_background(surface)
        if not spec.rooms:
            logger.debug("Spec has no rooms; rendered background only")
            return surface

        view_frame = (
            Affine2D()
            .scale(view.scale)
            .translate(*view.offset)
        )
        bounds = PixelBounds.from_rooms(spec.rooms, spec.unit)
        visible_w = surface.width / view.scale
        visible_h = surface.height / view.scale
        center_x = (visible_w - bounds.width) / 2 - bounds.min_x
        center_y = (visible_h - bounds.height) / 2 - bounds.min_y
        plan_frame = Affine2D().translate(center_x, center_y) + view_frame

        view_pen = _Pen(surface.axes, view_frame + surface.axes.transData, view.scale)
        plan_pen = _Pen(surface.axes, plan_frame + surface.axes.transData, view.scale)

        self._draw_grid(surface, view_pen, visible_w, visible_h, spec.unit)
        self._draw_outline(surface, plan_pen, spec, bounds)
        self._draw_rooms(surface, plan_pen, spec)
        self._draw_dimensions(surface, plan_pen, spec)
        self._draw_annotations(surface, view_pen, visible_w, visible_h, spec)

        logger.debug(
            "Rendered %s plan: %d rooms on %dx%d surface at %d%%",
            spec.building_type, len(spec.rooms), surface.width, surface.height, view.percent,
        )
        return surface

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _draw_background(self, surface: DrawingSurface) -> None:
        surface.axes.add_patch(Rectangle(
            (0, 0), surface.width, surface.height,
            facecolor=styles.BACKGROUND, edgecolor="none",
            transform=surface.axes.transData,
        ))
        surface.mark("background")

    def _draw_grid(
        self,
        surface: DrawingSurface,
        pen: _Pen,
        width: float,
        height: float,
        unit: str,
    ) -> None:
        major = MAJOR_GRID_PX.get(unit, MAJOR_GRID_PX["feet"])
        minor = major / 4

        for step, color, line_width in ((minor, styles.MINOR_GRID, 0.3), (major, styles.MAJOR_GRID, 0.5)):
            segments: list[list[Point]] = []
            count = int(width // step)
            segments.extend([(i * step, 0.0), (i * step, height)] for i in range(count + 1))
            count = int(height // step)
            segments.extend([(0.0, i * step), (width, i * step)] for i in range(count + 1))
            pen.segments(segments, color, line_width)

        if unit == "feet":
            label_step = major * 2
            x = label_step
            while x < width:
                pen.text(x, 15, f"{x / major * 4:.0f}'", size=9, color=styles.GRID_LABEL,
                         mono=True, align="center")
                x += label_step
            y = label_step
            while y < height:
                pen.text(15, y, f"{y / major * 4:.0f}'", size=9, color=styles.GRID_LABEL,
                         mono=True, align="center", rotation=90)
                y += label_step

        surface.mark("grid")

    def _draw_outline(
        self,
        surface: DrawingSurface,
        pen: _Pen,
        spec: BlueprintSpec,
        bounds: PixelBounds,
    ) -> None:
        pen.rect(bounds.min_x - 5, bounds.min_y - 5, bounds.width + 10, bounds.height + 10,
                 edge=styles.FOUNDATION, line_width=1.0, dashes=(5, 3))
        pen.rect(bounds.min_x, bounds.min_y, bounds.width, bounds.height,
                 edge=styles.EXTERIOR_WALL, line_width=3.0)
        pen.rect(bounds.min_x + 1.5, bounds.min_y + 1.5, bounds.width - 3, bounds.height - 3,
                 edge=styles.WALL_HATCH, line_width=1.0, dashes=(2, 4))

        self._draw_north_arrow(pen, bounds.min_x + 30, bounds.min_y + 30)

        pen.text(bounds.min_x + 50, bounds.min_y - 10,
                 f"{spec.building_type.upper()} PLAN - {spec.country}", size=14, bold=True)
        pen.text(bounds.max_x - 150, bounds.min_y - 10,
                 "SCALE: 1:100 (1/8\" = 1'-0\")", size=10, mono=True)
        surface.mark("outline")

    def _draw_north_arrow(self, pen: _Pen, x: float, y: float) -> None:
        pen.text(x, y - 8, "N", size=10, bold=True, align="center")
        pen.circle((x, y + 15), 10, edge=styles.INK, line_width=1.5)
        pen.line([(x, y + 5), (x, y + 25), (x - 5, y + 20)], styles.INK, 1.5)
        pen.line([(x, y + 25), (x + 5, y + 20)], styles.INK, 1.5)

    def _draw_rooms(self, surface: DrawingSurface, pen: _Pen, spec: BlueprintSpec) -> None:
        pitch = grid_pitch(spec.unit)
        for room in spec.rooms:
            self._draw_room(pen, room, pitch, spec.unit)
        surface.mark("rooms")

    def _draw_room(self, pen: _Pen, room: Room, pitch: float, unit: str) -> None:
        x = room.position.x * pitch
        y = room.position.y * pitch
        w = room.width * pitch
        d = room.depth * pitch

        pen.rect(x, y, w, d, fill=styles.room_fill(room.type))
        pen.rect(x, y, w, d, edge=styles.INTERIOR_WALL, line_width=1.5)
        pen.rect(x + 0.75, y + 0.75, w - 1.5, d - 1.5,
                 edge=styles.CENTERLINE, line_width=0.5, dashes=(3, 3))

        for door in room.doors:
            self._draw_door(pen, x, y, w, d, door, pitch)
        for window in room.windows:
            self._draw_window(pen, x, y, w, d, window, pitch)

        self._draw_label(pen, x, y, w, d, room, unit)

    def _draw_door(self, pen: _Pen, x: float, y: float, w: float, d: float,
                   door: Opening, pitch: float) -> None:
        leaf = door.width * pitch
        if door.wall == "north":
            hinge = (x + w * door.position, y)
            jamb_end = (hinge[0], hinge[1] + leaf)
        elif door.wall == "south":
            hinge = (x + w * door.position, y + d)
            jamb_end = (hinge[0], hinge[1] - leaf)
        elif door.wall == "east":
            hinge = (x + w, y + d * door.position)
            jamb_end = (hinge[0] - leaf, hinge[1])
        else:
            hinge = (x, y + d * door.position)
            jamb_end = (hinge[0] + leaf, hinge[1])

        theta1, theta2 = DOOR_SWINGS[door.wall]
        pen.line([hinge, jamb_end], styles.DOOR, 1.5)
        pen.arc(hinge, leaf, theta1, theta2, styles.DOOR, 1.5)
        pen.circle(hinge, DOOR_KNOB_RADIUS, fill=styles.DOOR)

    def _draw_window(self, pen: _Pen, x: float, y: float, w: float, d: float,
                     window: Opening, pitch: float) -> None:
        span = window.width * pitch
        if window.wall in ("north", "south"):
            start_x = x + w * window.position - span / 2
            start_y = y if window.wall == "north" else y + d
            end_x, end_y = start_x + span, start_y
        else:
            start_x = x + w if window.wall == "east" else x
            start_y = y + d * window.position - span / 2
            end_x, end_y = start_x, start_y + span

        pen.rect(start_x, start_y, end_x - start_x, end_y - start_y,
                 fill=styles.WINDOW_GLASS, edge=styles.WINDOW, line_width=1.0)
        mid_x = (start_x + end_x) / 2
        mid_y = (start_y + end_y) / 2
        pen.segments([[(mid_x, start_y), (mid_x, end_y)], [(start_x, mid_y), (end_x, mid_y)]],
                     styles.WINDOW, 1.0)

    def _draw_label(self, pen: _Pen, x: float, y: float, w: float, d: float,
                    room: Room, unit: str) -> None:
        cx = x + w / 2
        cy = y + d / 2
        label_w = min(w * 0.8, LABEL_MAX_WIDTH)
        pen.rect(cx - label_w / 2, cy - LABEL_HEIGHT / 2, label_w, LABEL_HEIGHT,
                 fill=styles.LABEL_FILL, edge=styles.LABEL_BORDER, line_width=0.5)

        length_mark, area_mark = _unit_marks(unit)
        pen.text(cx, cy - 6, room.name.upper(), size=10, bold=True, align="center")
        pen.text(cx, cy + 4, f"{room.width:g}{length_mark} × {room.depth:g}{length_mark}",
                 size=9, color=styles.LABEL_SUBTEXT, mono=True, align="center")
        pen.text(cx, cy + 16, f"{room.area:g}{area_mark}",
                 size=9, color=styles.LABEL_SUBTEXT, mono=True, align="center")

    def _draw_dimensions(self, surface: DrawingSurface, pen: _Pen, spec: BlueprintSpec) -> None:
        pitch = grid_pitch(spec.unit)
        length_mark, _ = _unit_marks(spec.unit)

        for room in spec.rooms:
            x = room.position.x * pitch
            y = room.position.y * pitch
            w = room.width * pitch
            d = room.depth * pitch

            dim_y = y + d + DIMENSION_OFFSET
            segments: list[list[Point]] = [
                [(x, dim_y), (x + w, dim_y)],
                [(x, y + d), (x, dim_y)],
                [(x + w, y + d), (x + w, dim_y)],
            ]
            segments += _arrowhead(x, dim_y, math.pi / 2)
            segments += _arrowhead(x + w, dim_y, -math.pi / 2)

            dim_x = x - DIMENSION_OFFSET
            segments += [
                [(dim_x, y), (dim_x, y + d)],
                [(x, y), (dim_x, y)],
                [(x, y + d), (dim_x, y + d)],
            ]
            segments += _arrowhead(dim_x, y, 0.0)
            segments += _arrowhead(dim_x, y + d, math.pi)
            pen.segments(segments, styles.DIMENSION, 0.8)

            pen.text(x + w / 2, dim_y + 10, f"{room.width:g}{length_mark}",
                     size=8, color=styles.DIMENSION, mono=True, align="center")
            pen.text(dim_x - 10, y + d / 2, f"{room.depth:g}{length_mark}",
                     size=8, color=styles.DIMENSION, mono=True, align="center", rotation=90)

        surface.mark("dimensions")

    def _draw_annotations(
        self,
        surface: DrawingSurface,
        pen: _Pen,
        width: float,
        height: float,
        spec: BlueprintSpec,
    ) -> None:
        block_w, block_h = TITLE_BLOCK_SIZE
        tx = width - block_w - ANNOTATION_MARGIN
        ty = height - block_h - ANNOTATION_MARGIN
        pen.rect(tx, ty, block_w, block_h,
                 fill=styles.TITLE_BLOCK_FILL, edge=styles.INK, line_width=1.0)

        _, area_mark = _unit_marks(spec.unit)
        pen.text(tx + 10, ty + 20, "ARCHITECTURAL PLAN", size=12, bold=True)
        pen.text(tx + 10, ty + 35, f"Type: {spec.building_type.upper()}", size=10)
        pen.text(tx + 10, ty + 50, f"Area: {spec.total_area:.0f}{area_mark}", size=10)
        pen.text(tx + 10, ty + 65, f"Layout: {spec.layout.upper()}", size=10)
        pen.text(tx + 110, ty + 35, f"Drawn: {spec.created_at:%m/%d/%Y}", size=8, mono=True)
        pen.text(tx + 110, ty + 50, f"Units: {spec.unit}", size=8, mono=True)
        pen.text(tx + 110, ty + 65, "Scale: 1/8\" = 1'-0\"", size=8, mono=True)

        legend_w, legend_h = LEGEND_SIZE
        lx = ANNOTATION_MARGIN
        ly = height - 120
        pen.rect(lx, ly, legend_w, legend_h,
                 fill=styles.LABEL_FILL, edge=styles.LABEL_BORDER, line_width=0.5)
        pen.text(lx + 10, ly + 15, "LEGEND", size=10, bold=True)
        for i, item in enumerate(styles.LEGEND_ITEMS):
            item_y = ly + 30 + i * 15
            pen.line([(lx + 10, item_y), (lx + 30, item_y)], item.color, item.line_width)
            pen.text(lx + 40, item_y + 3, item.label, size=9, color=styles.LEGEND_TEXT)

        surface.mark("annotations")
