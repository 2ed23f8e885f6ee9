"""blueprintgen — procedural architectural floor plans from building type and country."""

__version__ = "1.0.0"

from blueprintgen.export.bridge import ExportBridge
from blueprintgen.export.base import ExportResult
from blueprintgen.generation.generator import build_initial_spec, generate_blueprint
from blueprintgen.generation.session import GenerationSession
from blueprintgen.layout.engine import LayoutEngine
from blueprintgen.models.blueprint import BlueprintSpec, Dimensions, Opening, Position, Room
from blueprintgen.rendering.renderer import BlueprintRenderer
from blueprintgen.rendering.viewport import ViewState
from blueprintgen.settings import ConfigManager
from blueprintgen.standards.policy import LayoutConfig, MinimumSizePolicy
from blueprintgen.validation.report import ValidationReport
from blueprintgen.validation.validator import Validator

__all__ = [
    "BlueprintRenderer",
    "BlueprintSpec",
    "ConfigManager",
    "Dimensions",
    "ExportBridge",
    "ExportResult",
    "GenerationSession",
    "LayoutConfig",
    "LayoutEngine",
    "MinimumSizePolicy",
    "Opening",
    "Position",
    "Room",
    "ValidationReport",
    "Validator",
    "ViewState",
    "build_initial_spec",
    "generate_blueprint",
]
