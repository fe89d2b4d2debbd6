# materials/presets.py
from core.vector import Vector3
from materials.material import Material

class ColorPresets:
    """Colors used by the built-in scenes."""

    RED = Vector3(0.9, 0.2, 0.2)
    GREEN = Vector3(0.2, 0.7, 0.4)
    STEEL_BLUE = Vector3(0.35, 0.42, 0.65)
    SLATE = Vector3(0.25, 0.28, 0.35)
    FLOOR_GRAY = Vector3(0.82, 0.82, 0.82)

    WHITE = Vector3(1.0, 1.0, 1.0)
    DIM_WHITE = Vector3(0.6, 0.6, 0.6)
    BLACK = Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Vector3) -> Material:
        """Create a non-reflective material with the given color."""
        return Material(color, 0.0)
