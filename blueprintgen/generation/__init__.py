"""Generation — initial specs, the generation session and manual resizing."""

from blueprintgen.generation.customizer import resize_room, set_room_dimension, slider_range
from blueprintgen.generation.generator import build_initial_spec, generate_blueprint
from blueprintgen.generation.session import GenerationSession

__all__ = [
    "GenerationSession",
    "build_initial_spec",
    "generate_blueprint",
    "resize_room",
    "set_room_dimension",
    "slider_range",
]
