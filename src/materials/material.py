# materials/material.py
from core.vector import Vector3
from core.utils import clamp01

class Material:
    """
    Surface description owned by a single primitive.

    albedo is the base color under full illumination; reflectivity is the
    fraction of the final color taken from the mirror-reflected ray.
    """
    __slots__ = ("albedo", "reflectivity")

    def __init__(self, albedo: Vector3, reflectivity: float = 0.0):
        self.albedo = albedo
        self.reflectivity = clamp01(float(reflectivity))

    def __repr__(self) -> str:
        return f"Material(albedo={self.albedo!r}, reflectivity={self.reflectivity})"
