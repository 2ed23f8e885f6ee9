"""Global configuration: drawing constants, layout constants, export sizes."""

from pathlib import Path

# Default output directory for exported drawings
DEFAULT_OUTPUT_DIR = Path("output")

# Countries whose plans are measured in feet; everything else is metric
FEET_COUNTRIES = ("US", "CA")

FEET_TO_METERS = 0.3048

# Layout engine: gap between neighbouring rooms and generic row wrap width,
# both in the spec's logical unit
ROOM_GAP = 5.0
ROW_WRAP_WIDTH = 80.0
ROW_ORIGIN = (10.0, 10.0)

# Manual resize clamps (logical units)
MIN_CUSTOM_DIMENSION = 5.0
SLIDER_RANGE = {"feet": (3.0, 50.0), "meters": (3.0, 15.0)}

# Rendering: drawing-surface pixels per logical unit
GRID_PITCH = {"feet": 12.0, "meters": 4.0}

# Architectural grid spacing in pixels (4 ft / 1.2 m major lines)
MAJOR_GRID_PX = {"feet": 48.0, "meters": 14.4}

# Surface sizing
SURFACE_ORIGIN_PAD = 40.0
SURFACE_EXTRA = 100.0
MAX_SURFACE_SIZE = (1400, 1000)
DEFAULT_SURFACE_SIZE = (1000, 800)
BOUNDS_MARGIN = 20.0

# One surface pixel per point keeps line widths in pixels
SURFACE_DPI = 72

# View state
DEFAULT_SCALE = 0.8
MIN_SCALE = 0.3
MAX_SCALE = 2.5
ZOOM_STEP = 0.1

# Document export: A4 landscape, millimetres
PAGE_SIZE_MM = (297.0, 210.0)
PAGE_MARGIN_MM = 10.0

# Simplified vector export
SVG_CANVAS = (800, 600)
SVG_PX_PER_UNIT = 3.0

# Generation stub latency (seconds)
GENERATION_DELAY_S = 1.0
