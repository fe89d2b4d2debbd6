# geometry/light.py
from core.vector import Vector3

class PointLight:
    """
    Point light. `intensity` is an RGB multiplier, so (1, 1, 1) is plain white
    and (0.6, 0.6, 0.6) a dimmed white.
    """
    def __init__(self, position: Vector3, intensity: Vector3 = None):
        self.position = position
        self.intensity = intensity if intensity is not None else Vector3(1, 1, 1)

    def __repr__(self) -> str:
        return f"PointLight(position={self.position!r}, intensity={self.intensity!r})"
