"""Abstract Exporter interface for all blueprint export formats."""

from __future__ import annotations

import abc
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from blueprintgen.models.blueprint import BlueprintSpec
from blueprintgen.rendering.surface import DrawingSurface

logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    """Current time in milliseconds since the epoch (file-name stamp)."""
    return int(time.time() * 1000)


def default_basename(spec: BlueprintSpec) -> str:
    return f"blueprint-{spec.building_type}-{epoch_millis()}"


@dataclass
class ExportResult:
    """Result of an export operation."""

    file_path: Path | None
    format: str
    success: bool = True
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": str(self.file_path) if self.file_path else None,
            "format": self.format,
            "success": self.success,
            "message": self.message,
        }


class Exporter(abc.ABC):
    """Base class for all blueprint exporters.

    Subclasses implement :meth:`write`; :meth:`export` creates the output
    directory and turns I/O failures into an unsuccessful result.
    """

    #: Whether the format is captured from a rendered surface.
    needs_surface: bool = False

    @property
    @abc.abstractmethod
    def format_name(self) -> str:
        """Short format identifier (e.g., 'pdf', 'svg', 'json')."""

    @property
    @abc.abstractmethod
    def extension(self) -> str:
        """File extension without the dot."""

    @abc.abstractmethod
    def write(
        self,
        spec: BlueprintSpec,
        path: Path,
        surface: DrawingSurface | None,
    ) -> None:
        """Write *spec* (or *surface*) to *path*."""

    def export(
        self,
        spec: BlueprintSpec,
        output_dir: str | Path,
        *,
        surface: DrawingSurface | None = None,
        basename: str | None = None,
    ) -> ExportResult:
        """Export to ``output_dir / {basename}.{extension}``.

        Parameters
        ----------
        spec:
            The laid-out spec.
        output_dir:
            Directory in which to write the output file.
        surface:
            The rendered drawing, for formats captured from it.
        basename:
            File name without extension.  Defaults to
            ``blueprint-{buildingType}-{epoch ms}``.
        """
        if self.needs_surface and surface is None:
            logger.debug("No drawing surface for %s export; skipping", self.format_name)
            return ExportResult(
                file_path=None,
                format=self.format_name,
                success=False,
                message="No drawing surface to export.",
            )

        output_path = Path(output_dir) / f"{basename or default_basename(spec)}.{self.extension}"
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self.write(spec, output_path, surface)
        except OSError as exc:
            logger.warning("%s export to %s failed: %s", self.format_name, output_path, exc)
            return ExportResult(
                file_path=None,
                format=self.format_name,
                success=False,
                message=f"{self.format_name.upper()} export failed: {exc}",
            )

        logger.info("Exported %s blueprint to %s", self.format_name, output_path)
        return ExportResult(
            file_path=output_path,
            format=self.format_name,
            message=f"{self.format_name.upper()} exported successfully.",
        )
