from blueprintgen.models.blueprint import (
    BlueprintSpec,
    Dimensions,
    Opening,
    Position,
    Room,
)

__all__ = ["BlueprintSpec", "Dimensions", "Opening", "Position", "Room"]
