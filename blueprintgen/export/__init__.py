"""Blueprint exporters — PDF, SVG, PNG and JSON."""

from blueprintgen.export.base import ExportResult, Exporter
from blueprintgen.export.bridge import ExportBridge, available_formats
from blueprintgen.export.json_export import JSONExporter
from blueprintgen.export.pdf import PDFExporter
from blueprintgen.export.png import PNGExporter
from blueprintgen.export.svg import SVGExporter

__all__ = [
    "ExportBridge",
    "ExportResult",
    "Exporter",
    "JSONExporter",
    "PDFExporter",
    "PNGExporter",
    "SVGExporter",
    "available_formats",
]
