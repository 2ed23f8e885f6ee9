"""Layout Engine — procedural room placement per building archetype."""

from blueprintgen.layout.engine import LayoutEngine
from blueprintgen.layout.openings import attach_openings
from blueprintgen.layout.registry import StrategyRegistry, default_registry

__all__ = ["LayoutEngine", "StrategyRegistry", "attach_openings", "default_registry"]
