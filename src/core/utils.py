# core/utils.py
from core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def clamp(x: float, low: float, high: float) -> float:
    return min(max(x, low), high)

def clamp01(x: float) -> float:
    return clamp(x, 0.0, 1.0)

def clamp_color(c: Vector3, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(clamp(c.x, low, high), clamp(c.y, low, high), clamp(c.z, low, high))
