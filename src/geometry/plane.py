# geometry/plane.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from materials.material import Material

PARALLEL_EPS = 1e-6

class Plane(Hittable):
    """
    Infinite plane through `point`. The normal is normalized on construction.
    """
    def __init__(self, point: Vector3, normal: Vector3, material: Material):
        if normal.length() == 0:
            raise ValueError("Plane normal must be non-zero")
        self.point = point
        self.normal = normal.normalize()
        self.material = material

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        denom = ray.direction.dot(self.normal)
        if abs(denom) < PARALLEL_EPS:
            return None

        t = (self.point - ray.origin).dot(self.normal) / denom
        if t < t_min or t > t_max:
            return None
        return HitRecord.build(ray, t, self.normal, self.material)

    def __repr__(self) -> str:
        return f"Plane(point={self.point!r}, normal={self.normal!r})"
